"""Tests for accumulated memorization totals and SDQ class targets."""

import pytest

from capaian import (
    TotalHafalan,
    calculate_sdq_progress,
    extract_class_level,
    format_total_hafalan,
    get_iqra_score,
    get_juz_label,
    normalize_total,
    to_decimal_juz,
)
from kalkulator import calculate_from_fields


class TestTotalHafalan:

    def test_normalize_carries(self):
        assert normalize_total(TotalHafalan(0, 19, 20)) == TotalHafalan(1, 0, 5)

    def test_from_lines(self):
        assert TotalHafalan.from_lines(60.0) == TotalHafalan(0, 4, 0)
        assert TotalHafalan.from_lines(24.4) == TotalHafalan(0, 1, 9)
        assert TotalHafalan.from_lines(None) == TotalHafalan(0, 0, 0)

    def test_rounds_once_after_summing(self):
        # dua setoran satu ayat (0.5 baris) dijumlah dulu baru dibulatkan
        single = calculate_from_fields("An-Naba'", 1, "An-Naba'", 1)
        assert TotalHafalan.from_lines(single.total_lines * 2) == TotalHafalan(0, 0, 1)
        ranges = [
            calculate_from_fields("An-Naba'", 1, "An-Nazi'at", 5),
            calculate_from_fields("An-Nazi'at", 6, "'Abasa", 42),
        ]
        assert TotalHafalan.from_lines(sum(r.total_lines for r in ranges)) == TotalHafalan(0, 4, 0)

    def test_dict_round_trip(self):
        total = TotalHafalan(1, 2, 3)
        assert TotalHafalan.from_dict(total.to_dict()) == total
        assert TotalHafalan.from_dict({"pages": "4"}) == TotalHafalan(0, 4, 0)

    @pytest.mark.parametrize("total,expected", [
        (TotalHafalan(1, 2, 3), "1 Juz 2 Halaman 3 Baris"),
        (TotalHafalan(0, 4, 0), "4 Halaman"),
        (TotalHafalan(0, 0, 0), "0 Juz"),
        ({"juz": 2}, "2 Juz"),
        (None, "0 Juz"),
    ])
    def test_format(self, total, expected):
        assert format_total_hafalan(total) == expected

    def test_decimal_juz(self):
        assert to_decimal_juz(TotalHafalan(2, 10, 0)) == 2.5
        assert to_decimal_juz({"pages": 10}) == 0.5
        assert to_decimal_juz(None) == 0.0


class TestClassLevel:

    @pytest.mark.parametrize("value,level", [
        ("Kelas 1A", 1),
        ("kelas 3", 3),
        ("4B", 4),
        (6, 6),
        (7, 0),
        ("Kelas 9", 0),
        ("TK B", 0),
        (None, 0),
        (True, 0),
    ])
    def test_extract(self, value, level):
        assert extract_class_level(value) == level


class TestIqraScore:

    @pytest.mark.parametrize("progress,score", [
        ("Iqra 3", 61),
        ("Iqra' 3: 15", 75),
        ("Jilid 4 Halaman 10", 100),
        ("Iqra' 1", 1),
        ("An-Naba': 5", 181),
        ("-", 0),
        ("Belum Ada", 0),
        (None, 0),
    ])
    def test_score(self, progress, score):
        assert get_iqra_score(progress) == score


class TestSDQProgress:

    def test_class_one_iqra(self):
        progress = calculate_sdq_progress("Kelas 1A", "Iqra' 2: 5")
        assert progress.current == 35
        assert progress.target == 181
        assert progress.percentage == 19
        assert progress.status_text == "Perlu Perhatian"
        assert progress.label == "Iqra 2 Hal 5"

    def test_class_one_done(self):
        progress = calculate_sdq_progress("Kelas 1B", "Al-Fatihah: 7")
        assert progress.percentage == 100
        assert progress.status_text == "Target Tercapai"
        assert progress.label == "Tuntas Iqra 6"

    def test_class_one_empty(self):
        assert calculate_sdq_progress("Kelas 1", None).label == "Belum Ada"

    def test_class_three_juz(self):
        progress = calculate_sdq_progress("Kelas 3A", total_hafalan=TotalHafalan(2, 10, 0))
        assert progress.unit == "Juz"
        assert progress.current == 2.5
        assert progress.percentage == 83
        assert progress.status_text == "Hampir Tercapai"
        assert progress.label == "2.5 dari 3 Juz"

    def test_class_two_from_dict(self):
        progress = calculate_sdq_progress("Kelas 2", total_hafalan={"pages": 10})
        assert progress.percentage == 50
        assert progress.status_text == "Perlu Dorongan"

    def test_invalid_class(self):
        progress = calculate_sdq_progress("Guru")
        assert progress.class_level == 0
        assert progress.status_text == "Kelas Tidak Valid"
        assert progress.label == "Data Kelas Error"


class TestJuzLabel:

    @pytest.mark.parametrize("text,label", [
        ("An-Naba': 1 - An-Nazi'at: 5", "Juz 30"),
        ("Al-Mulk: 3", "Juz 29"),
        ("Al-Baqarah: 10", "Juz 1"),
        ("-", "-"),
        ("Surah Lain: 4", "Surah Lain: 4"),
    ])
    def test_label(self, text, label):
        assert get_juz_label(text) == label
