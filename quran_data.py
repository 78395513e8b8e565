# --- 1. KONSTANTA MUSHAF ---
# Mushaf standar Madinah 15 baris per halaman, 604 halaman, 20 halaman per juz
LINES_PER_PAGE = 15
PAGES_PER_JUZ = 20
TOTAL_PAGES = 604
TOTAL_JUZ = 30
LINES_PER_JUZ = PAGES_PER_JUZ * LINES_PER_PAGE

# --- 2. DATA MASTER SURAH ---
# (nomor surah, nama, jumlah ayat, halaman awal di mushaf)
SURAH_METADATA = [
    (1, "Al-Fatihah", 7, 1), (2, "Al-Baqarah", 286, 2), (3, "Ali 'Imran", 200, 50),
    (4, "An-Nisa'", 176, 77), (5, "Al-Ma'idah", 120, 106), (6, "Al-An'am", 165, 128),
    (7, "Al-A'raf", 206, 151), (8, "Al-Anfal", 75, 177), (9, "At-Taubah", 129, 187),
    (10, "Yunus", 109, 208), (11, "Hud", 123, 221), (12, "Yusuf", 111, 235),
    (13, "Ar-Ra'd", 43, 249), (14, "Ibrahim", 52, 255), (15, "Al-Hijr", 99, 262),
    (16, "An-Nahl", 128, 267), (17, "Al-Isra'", 111, 282), (18, "Al-Kahf", 110, 293),
    (19, "Maryam", 98, 305), (20, "Ta-Ha", 135, 312), (21, "Al-Anbiya'", 112, 322),
    (22, "Al-Hajj", 78, 332), (23, "Al-Mu'minun", 118, 342), (24, "An-Nur", 64, 350),
    (25, "Al-Furqan", 77, 359), (26, "Asy-Syu'ara'", 227, 367), (27, "An-Naml", 93, 377),
    (28, "Al-Qasas", 88, 385), (29, "Al-'Ankabut", 69, 396), (30, "Ar-Rum", 60, 404),
    (31, "Luqman", 34, 411), (32, "As-Sajdah", 30, 415), (33, "Al-Ahzab", 73, 418),
    (34, "Saba'", 54, 428), (35, "Fatir", 45, 434), (36, "Ya-Sin", 83, 440),
    (37, "As-Saffat", 182, 446), (38, "Sad", 88, 453), (39, "Az-Zumar", 75, 458),
    (40, "Ghafir", 85, 467), (41, "Fussilat", 54, 477), (42, "Asy-Syura", 53, 483),
    (43, "Az-Zukhruf", 89, 489), (44, "Ad-Dukhan", 59, 496), (45, "Al-Jasiyah", 37, 499),
    (46, "Al-Ahqaf", 35, 502), (47, "Muhammad", 38, 507), (48, "Al-Fath", 29, 511),
    (49, "Al-Hujurat", 18, 515), (50, "Qaf", 45, 518), (51, "Adz-Dzariyat", 60, 520),
    (52, "At-Tur", 49, 523), (53, "An-Najm", 62, 526), (54, "Al-Qamar", 55, 528),
    (55, "Ar-Rahman", 78, 531), (56, "Al-Waqi'ah", 96, 534), (57, "Al-Hadid", 29, 537),
    (58, "Al-Mujadilah", 22, 542), (59, "Al-Hasyr", 24, 545), (60, "Al-Mumtahanah", 13, 549),
    (61, "As-Saff", 14, 551), (62, "Al-Jumu'ah", 11, 553), (63, "Al-Munafiqun", 11, 554),
    (64, "At-Taghabun", 18, 556), (65, "At-Talaq", 12, 558), (66, "At-Tahrim", 12, 560),
    (67, "Al-Mulk", 30, 562), (68, "Al-Qalam", 52, 564), (69, "Al-Haqqah", 52, 566),
    (70, "Al-Ma'arij", 44, 568), (71, "Nuh", 28, 570), (72, "Al-Jinn", 28, 572),
    (73, "Al-Muzzammil", 20, 574), (74, "Al-Muddassir", 56, 575), (75, "Al-Qiyamah", 40, 577),
    (76, "Al-Insan", 31, 578), (77, "Al-Mursalat", 50, 580), (78, "An-Naba'", 40, 582),
    (79, "An-Nazi'at", 46, 583), (80, "'Abasa", 42, 585), (81, "At-Takwir", 29, 586),
    (82, "Al-Infitar", 19, 587), (83, "Al-Muthaffifin", 36, 587), (84, "Al-Insyiqaq", 25, 589),
    (85, "Al-Buruj", 22, 590), (86, "Ath-Thariq", 17, 591), (87, "Al-A'la", 19, 591),
    (88, "Al-Ghasyiyah", 26, 592), (89, "Al-Fajr", 30, 593), (90, "Al-Balad", 20, 594),
    (91, "Asy-Syams", 15, 595), (92, "Al-Lail", 21, 595), (93, "Ad-Duha", 11, 596),
    (94, "Al-Insyirah", 8, 596), (95, "At-Tin", 8, 597), (96, "Al-'Alaq", 19, 597),
    (97, "Al-Qadr", 5, 598), (98, "Al-Bayyinah", 8, 598), (99, "Az-Zalzalah", 8, 599),
    (100, "Al-'Adiyat", 11, 599), (101, "Al-Qari'ah", 11, 600), (102, "At-Takatsur", 8, 600),
    (103, "Al-'Asr", 3, 601), (104, "Al-Humazah", 9, 601), (105, "Al-Fil", 5, 601),
    (106, "Quraisy", 4, 602), (107, "Al-Ma'un", 7, 602), (108, "Al-Kautsar", 3, 602),
    (109, "Al-Kafirun", 6, 603), (110, "An-Nasr", 3, 603), (111, "Al-Lahab", 5, 603),
    (112, "Al-Ikhlas", 4, 604), (113, "Al-Falaq", 5, 604), (114, "An-Nas", 6, 604),
]
SURAH_NAMES = [name for _, name, _, _ in SURAH_METADATA]
TOTAL_AYAT_QURAN = sum(count for _, _, count, _ in SURAH_METADATA)

# --- 3. SEBARAN AYAT PER HALAMAN JUZ 30 ---
# (halaman, surah, ayat awal, ayat akhir) sesuai mushaf 15 baris.
# Surah di luar tabel ini disebar rata oleh registry berdasarkan halaman awal surah.
JUZ_AMMA_PAGES = [
    (582, "An-Naba'", 1, 30),
    (583, "An-Naba'", 31, 40), (583, "An-Nazi'at", 1, 15),
    (584, "An-Nazi'at", 16, 46),
    (585, "'Abasa", 1, 42),
    (586, "At-Takwir", 1, 29),
    (587, "Al-Infitar", 1, 19), (587, "Al-Muthaffifin", 1, 6),
    (588, "Al-Muthaffifin", 7, 34),
    (589, "Al-Muthaffifin", 35, 36), (589, "Al-Insyiqaq", 1, 25),
    (590, "Al-Buruj", 1, 22),
    (591, "Ath-Thariq", 1, 17), (591, "Al-A'la", 1, 15),
    (592, "Al-A'la", 16, 19), (592, "Al-Ghasyiyah", 1, 26),
    (593, "Al-Fajr", 1, 23),
    (594, "Al-Fajr", 24, 30), (594, "Al-Balad", 1, 20),
    (595, "Asy-Syams", 1, 15), (595, "Al-Lail", 1, 14),
    (596, "Al-Lail", 15, 21), (596, "Ad-Duha", 1, 11), (596, "Al-Insyirah", 1, 8),
    (597, "At-Tin", 1, 8), (597, "Al-'Alaq", 1, 19),
    (598, "Al-Qadr", 1, 5), (598, "Al-Bayyinah", 1, 7),
    (599, "Al-Bayyinah", 8, 8), (599, "Az-Zalzalah", 1, 8), (599, "Al-'Adiyat", 1, 9),
    (600, "Al-'Adiyat", 10, 11), (600, "Al-Qari'ah", 1, 11), (600, "At-Takatsur", 1, 8),
    (601, "Al-'Asr", 1, 3), (601, "Al-Humazah", 1, 9), (601, "Al-Fil", 1, 5),
    (602, "Quraisy", 1, 4), (602, "Al-Ma'un", 1, 7), (602, "Al-Kautsar", 1, 3),
    (603, "Al-Kafirun", 1, 6), (603, "An-Nasr", 1, 3), (603, "Al-Lahab", 1, 5),
    (604, "Al-Ikhlas", 1, 4), (604, "Al-Falaq", 1, 5), (604, "An-Nas", 1, 6),
]

# Ejaan lain yang dipakai guru di formulir / catatan lama
SURAH_ALIASES = {
    "Al-Mutaffifin": "Al-Muthaffifin",
    "At-Tariq": "Ath-Thariq",
    "Al-Gasyiyah": "Al-Ghasyiyah",
    "At-Takasur": "At-Takatsur",
    "Al-Kausar": "Al-Kautsar",
    "Al-Kausaar": "Al-Kautsar",
    "Asy-Syarh": "Al-Insyirah",
    "Al-Masad": "Al-Lahab",
    "Al-Muddatsir": "Al-Muddassir",
    "Al-Muzammil": "Al-Muzzammil",
    "Al-Jatsiyah": "Al-Jasiyah",
    "Adz-Dzariyaat": "Adz-Dzariyat",
    "Yasin": "Ya-Sin",
    "Thaha": "Ta-Ha",
    "Al-Mu'min": "Ghafir",
    "Fushshilat": "Fussilat",
    "Ash-Shaff": "As-Saff",
    "Al-Haaqqah": "Al-Haqqah",
    "Al-Ghasiyah": "Al-Ghasyiyah",
    "Al-Insyiqoq": "Al-Insyiqaq",
}

# --- 4. DATA MASTER IQRA ---
# Jumlah halaman tiap jilid Iqra' (jilid 1 sampai 6)
IQRA_PAGES = {1: 31, 2: 30, 3: 30, 4: 30, 5: 30, 6: 31}
IQRA_VOLUMES = [f"Iqra' {jilid}" for jilid in IQRA_PAGES]
TOTAL_HALAMAN_IQRA = sum(IQRA_PAGES.values())
