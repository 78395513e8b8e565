"""
Akumulasi capaian hafalan (juz / halaman / baris) dan progres target SDQ
per kelas. Modul ini berada di sisi pemanggil: kalkulator hanya menghitung
satu rentang, penjumlahan lintas laporan dilakukan di sini.
"""

import logging
import math
import re
from dataclasses import dataclass

from lokasi_registry import get_registry, juz_of_page
from quran_data import LINES_PER_JUZ, LINES_PER_PAGE, PAGES_PER_JUZ
from rentang import PLACEHOLDER, get_end_part, is_iqra_name, safe_int

logger = logging.getLogger(__name__)

# Skor Iqra' memakai rata-rata 30 halaman per jilid.
# Target kelas 1: Iqra' 6 halaman 31 -> (5 jilid * 30) + 31 = 181 poin
PAGES_PER_IQRA_SCORE = 30
TARGET_SCORE_KELAS_1 = 181

SDQ_TARGETS = {1: TARGET_SCORE_KELAS_1, 2: 1, 3: 3, 4: 4, 5: 5, 6: 5}

STATUS_LEVELS = [
    (100, "Target Tercapai"),
    (80, "Hampir Tercapai"),
    (50, "Perlu Dorongan"),
    (0, "Perlu Perhatian"),
]


@dataclass
class TotalHafalan:
    juz: int = 0
    pages: int = 0
    lines: int = 0

    @classmethod
    def from_dict(cls, data):
        data = data or {}
        return cls(
            juz=safe_int(data.get("juz"), 0) or 0,
            pages=safe_int(data.get("pages"), 0) or 0,
            lines=safe_int(data.get("lines"), 0) or 0,
        )

    @classmethod
    def from_lines(cls, total_lines):
        """Bangun total dari jumlah baris kumulatif (boleh pecahan)."""
        whole = int(math.floor(float(total_lines or 0) + 0.5))
        return normalize_total(cls(0, 0, whole))

    def to_dict(self):
        return {"juz": self.juz, "pages": self.pages, "lines": self.lines}

    @property
    def total_lines(self) -> int:
        return self.juz * LINES_PER_JUZ + self.pages * LINES_PER_PAGE + self.lines


@dataclass
class SDQProgress:
    class_level: int
    target: float
    current: float
    unit: str
    percentage: int
    status_text: str
    label: str


def normalize_total(total: TotalHafalan) -> TotalHafalan:
    """Bawa kelebihan baris ke halaman (15 baris) dan halaman ke juz (20 halaman)."""
    lines = max(0, total.total_lines)
    juz, rest = divmod(lines, LINES_PER_JUZ)
    pages, lines = divmod(rest, LINES_PER_PAGE)
    return TotalHafalan(juz, pages, lines)


def to_decimal_juz(total) -> float:
    """Total hafalan dalam juz desimal, dibulatkan dua angka."""
    if total is None:
        return 0.0
    if isinstance(total, dict):
        total = TotalHafalan.from_dict(total)
    value = total.juz + total.pages / PAGES_PER_JUZ + total.lines / LINES_PER_JUZ
    return round(value, 2)


def format_total_hafalan(total) -> str:
    if total is None:
        return "0 Juz"
    if isinstance(total, dict):
        total = TotalHafalan.from_dict(total)
    parts = []
    if total.juz:
        parts.append(f"{total.juz} Juz")
    if total.pages:
        parts.append(f"{total.pages} Halaman")
    if total.lines:
        parts.append(f"{total.lines} Baris")
    return " ".join(parts) if parts else "0 Juz"


def extract_class_level(value) -> int:
    """Tingkat kelas 1..6 dari nama kelas ("Kelas 3A", "4B", 2); selain itu 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value if 1 <= value <= 6 else 0
    text = str(value).strip()
    match = re.search(r"Kelas\s*(\d+)", text, re.IGNORECASE) or re.match(r"^(\d+)", text)
    if not match:
        return 0
    level = int(match.group(1))
    return level if 1 <= level <= 6 else 0


def get_iqra_score(progress) -> int:
    """
    Skor absolut Iqra' dari teks progres, misalnya "Iqra 3", "Iqra' 3: 15",
    "Jilid 4 Halaman 10". Progres yang sudah Al-Qur'an dianggap tuntas.
    """
    text = str(progress or "").strip()
    if not text or text == PLACEHOLDER or text == "Belum Ada":
        return 0
    if not is_iqra_name(text):
        return TARGET_SCORE_KELAS_1

    lower = text.lower()
    volume_match = re.search(r"(?:iqra|jilid)\s*'?\s*(\d+)", lower)
    volume = int(volume_match.group(1)) if volume_match else 0
    if volume == 0:
        return 0
    page_match = re.search(r"(?:hal|halaman|:)\s*(\d+)", lower) or re.search(r"\s(\d+)$", lower[volume_match.end():])
    page = int(page_match.group(1)) if page_match else 1
    return (volume - 1) * PAGES_PER_IQRA_SCORE + page


def _status_for(percentage: int) -> str:
    for threshold, text in STATUS_LEVELS:
        if percentage >= threshold:
            return text
    return STATUS_LEVELS[-1][1]


def calculate_sdq_progress(class_name, current_progress=None, total_hafalan=None) -> SDQProgress:
    """Progres murid terhadap target SDQ kelasnya."""
    level = extract_class_level(class_name)
    if level == 0:
        return SDQProgress(0, 0, 0, PLACEHOLDER, 0, "Kelas Tidak Valid", "Data Kelas Error")

    target = SDQ_TARGETS.get(level, 1)
    if level == 1:
        unit = "Poin Iqra"
        current = get_iqra_score(current_progress)
    else:
        unit = "Juz"
        current = to_decimal_juz(total_hafalan)

    percentage = round(current / target * 100) if target > 0 else 0

    if level == 1:
        if percentage >= 100:
            label = "Tuntas Iqra 6"
        elif current <= 0:
            label = "Belum Ada"
        else:
            volume = (current - 1) // PAGES_PER_IQRA_SCORE + 1
            page = (current - 1) % PAGES_PER_IQRA_SCORE + 1
            label = f"Iqra {volume} Hal {page}"
    else:
        label = f"{current} dari {target} Juz"

    return SDQProgress(level, target, current, unit, percentage, _status_for(percentage), label)


def get_juz_label(range_or_progress) -> str:
    """
    Label juz dari posisi terakhir murid, misalnya "Juz 30" untuk
    "An-Naba': 1 - An-Nazi'at: 5". Teks yang tidak dikenali dikembalikan apa adanya.
    """
    end_part = get_end_part(range_or_progress)
    if end_part == PLACEHOLDER:
        return PLACEHOLDER
    match = re.match(r"^(.*?)\s*[:\d]", end_part)
    surah = match.group(1).strip() if match else end_part
    page = get_registry().surah_start_page(surah)
    if page is None:
        return end_part
    return f"Juz {juz_of_page(page)}"
