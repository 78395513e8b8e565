"""
Kalkulator capaian halaman & baris untuk rentang bacaan tahfizh / tilawah.

Registry hanya menyimpan sebaran ayat per halaman (bukan nomor baris tiap
ayat), jadi baris yang tertutup pada halaman yang dibaca sebagian
diperkirakan secara proporsional: porsi ayat pada entry halaman itu dikali
15 baris. Semua baris dihitung sebagai bilangan real dan baru dibulatkan
saat dipecah menjadi halaman penuh + sisa baris.
"""

import logging
import math
from dataclasses import dataclass

from lokasi_registry import get_registry
from quran_data import LINES_PER_PAGE
from rentang import (
    IqraEndpoint,
    QuranEndpoint,
    make_endpoint,
    normalize_range,
    normalize_range_string,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationResult:
    valid: bool
    pages: int = 0
    lines: int = 0
    total_lines: float = 0.0
    is_iqra: bool = False
    estimated: bool = False


INVALID_RESULT = CalculationResult(valid=False)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def split_lines(total_lines: float):
    """Pecah total baris menjadi (halaman penuh, sisa baris)."""
    pages = int(total_lines // LINES_PER_PAGE)
    lines = _round_half_up(total_lines - pages * LINES_PER_PAGE)
    if lines >= LINES_PER_PAGE:
        pages += 1
        lines -= LINES_PER_PAGE
    return pages, lines


def _entry_lines(entry, first_verse, last_verse) -> float:
    """Baris untuk ayat first_verse..last_verse dari satu entry (proporsi ayat entry x 15)."""
    covered = last_verse - first_verse + 1
    return covered * LINES_PER_PAGE / entry.verse_count


def calculate_quran(start: QuranEndpoint, end: QuranEndpoint, registry=None) -> CalculationResult:
    """Hitung halaman & baris untuk rentang Al-Qur'an yang sudah terurut."""
    registry = registry or get_registry()
    start_entry = registry.resolve_quran_verse(start.surah, start.verse)
    end_entry = registry.resolve_quran_verse(end.surah, end.verse)
    if start_entry is None or end_entry is None:
        logger.debug("Perhitungan dilewati, lokasi tidak dikenal: %r - %r", start, end)
        return INVALID_RESULT
    if end_entry.page < start_entry.page:
        logger.debug("Perhitungan dilewati, halaman terbalik: %r - %r", start, end)
        return INVALID_RESULT

    start_lines = _entry_lines(start_entry, start.verse, start_entry.end_verse)
    end_lines = _entry_lines(end_entry, end_entry.start_verse, end.verse)

    if start_entry == end_entry:
        if end.verse < start.verse:
            logger.debug("Perhitungan dilewati, ayat terbalik: %r - %r", start, end)
            return INVALID_RESULT
        total_lines = _entry_lines(start_entry, start.verse, end.verse)
    elif start_entry.page == end_entry.page:
        if end_entry.surah_index < start_entry.surah_index:
            logger.debug("Perhitungan dilewati, surah terbalik: %r - %r", start, end)
            return INVALID_RESULT
        # satu halaman fisik tidak pernah lebih dari 15 baris
        total_lines = min(LINES_PER_PAGE, start_lines + end_lines)
    else:
        middle_lines = (end_entry.page - start_entry.page - 1) * LINES_PER_PAGE
        total_lines = start_lines + middle_lines + end_lines

    pages, lines = split_lines(total_lines)
    estimated = start_entry.estimated or end_entry.estimated
    return CalculationResult(True, pages, lines, total_lines, False, estimated)


def calculate_iqra(start: IqraEndpoint, end: IqraEndpoint, registry=None) -> CalculationResult:
    """Jumlah halaman Iqra' (inklusif); Iqra' tidak dihitung per baris."""
    registry = registry or get_registry()
    first = registry.resolve_iqra_absolute_page(start.volume, start.page)
    last = registry.resolve_iqra_absolute_page(end.volume, end.page)
    if first is None or last is None:
        return INVALID_RESULT
    pages = max(0, last - first + 1)
    return CalculationResult(True, pages, 0, 0.0, True)


def calculate_normalized(normalized, registry=None) -> CalculationResult:
    if normalized is None:
        return INVALID_RESULT
    if normalized.is_iqra:
        return calculate_iqra(normalized.start, normalized.end, registry)
    return calculate_quran(normalized.start, normalized.end, registry)


def calculate_range(start, end, registry=None) -> CalculationResult:
    """
    Titik masuk utama: normalisasi dua titik lalu hitung capaiannya.
    Input apa pun yang tidak valid menghasilkan INVALID_RESULT, tidak pernah exception.
    """
    return calculate_normalized(normalize_range(start, end, registry), registry)


def calculate_from_fields(from_name, from_number, to_name, to_number, registry=None) -> CalculationResult:
    """Hitung langsung dari empat field formulir (surah/jilid + ayat/halaman)."""
    if not str(to_name or "").strip():
        to_name = from_name
    start = make_endpoint(from_name, from_number)
    end = make_endpoint(to_name, to_number)
    return calculate_range(start, end, registry)


def calculate_from_range_string(text, registry=None) -> CalculationResult:
    """Hitung dari string ringkas yang tersimpan di laporan."""
    return calculate_normalized(normalize_range_string(text, registry), registry)
