"""
Normalisasi rentang bacaan "dari - sampai".

Titik rentang datang dari field formulir (nama surah / jilid + nomor ayat /
halaman) atau dari string ringkas yang tersimpan di laporan, misalnya
"An-Naba': 1 - An-Naba': 10" atau "Iqra' 1: 10 - Iqra' 2: 5".
Semua bentuk itu diubah sekali di sini menjadi QuranEndpoint / IqraEndpoint.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Union

from lokasi_registry import get_registry

logger = logging.getLogger(__name__)

PLACEHOLDER = "-"
RANGE_SEPARATOR = " - "

_SEGMENT_RE = re.compile(r"^(?P<name>.*?)\s*[:\s]\s*(?P<number>\d+)$")
_IQRA_RE = re.compile(r"(?:iqra|jilid)\D*(\d+)", re.IGNORECASE)


@dataclass(frozen=True)
class QuranEndpoint:
    surah: str
    verse: int


@dataclass(frozen=True)
class IqraEndpoint:
    volume: int
    page: int


RangeEndpoint = Union[QuranEndpoint, IqraEndpoint]


@dataclass(frozen=True)
class NormalizedRange:
    """Pasangan titik yang sudah terurut maju dan sejenis."""

    start: RangeEndpoint
    end: RangeEndpoint
    is_iqra: bool = False


def convert_arabic_digits(text: str) -> str:
    """Ubah angka Arab (٠-٩) menjadi 0-9."""
    return text.translate(str.maketrans("٠١٢٣٤٥٦٧٨٩", "0123456789"))


def safe_int(value, default=None):
    """Ambil bilangan bulat dari input formulir (int atau string angka)."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    try:
        return int(convert_arabic_digits(str(value).strip()))
    except (ValueError, TypeError):
        return default


def is_iqra_name(name) -> bool:
    lower = str(name or "").lower()
    return "iqra" in lower or "jilid" in lower


def make_endpoint(name, number) -> Optional[RangeEndpoint]:
    """
    Bangun satu titik rentang dari field formulir.
    Nama kosong atau nomor bukan bilangan >= 1 menghasilkan None.
    """
    name = str(name or "").strip()
    number = safe_int(number)
    if not name or name == PLACEHOLDER or number is None or number < 1:
        return None

    if is_iqra_name(name):
        match = _IQRA_RE.search(name)
        if not match:
            return None
        return IqraEndpoint(int(match.group(1)), number)

    return QuranEndpoint(name, number)


def parse_endpoint(segment) -> Optional[RangeEndpoint]:
    """Urai satu segmen "<Surah>: <Ayat>" atau "Iqra' <N>: <Halaman>"."""
    segment = convert_arabic_digits(str(segment or "").strip())
    if not segment or segment == PLACEHOLDER:
        return None
    match = _SEGMENT_RE.match(segment)
    if not match:
        return None
    return make_endpoint(match.group("name"), match.group("number"))


def parse_range_string(text):
    """
    Urai string ringkas "<titik> - <titik>" menjadi (start, end).
    Mengembalikan None jika pemisah tidak ada atau salah satu segmen rusak.
    """
    text = str(text or "").strip()
    if not text or text == PLACEHOLDER:
        return None
    parts = text.split(RANGE_SEPARATOR)
    if len(parts) != 2:
        logger.debug("String rentang tanpa pemisah yang valid: %r", text)
        return None
    start = parse_endpoint(parts[0])
    end = parse_endpoint(parts[1])
    if start is None or end is None:
        logger.debug("Segmen rentang tidak bisa diurai: %r", text)
        return None
    return start, end


def normalize_range(start, end, registry=None) -> Optional[NormalizedRange]:
    """
    Susun dua titik menjadi rentang maju. Jika titik "dari" berada setelah
    titik "sampai" dalam urutan bacaan, keduanya ditukar. Titik yang tidak
    dikenal registry atau rentang campuran Quran/Iqra' menghasilkan None.
    """
    if start is None or end is None:
        return None
    registry = registry or get_registry()

    if isinstance(start, IqraEndpoint) and isinstance(end, IqraEndpoint):
        first = registry.resolve_iqra_absolute_page(start.volume, start.page)
        last = registry.resolve_iqra_absolute_page(end.volume, end.page)
        if first is None or last is None:
            return None
        if first > last:
            start, end = end, start
        return NormalizedRange(start, end, is_iqra=True)

    if isinstance(start, QuranEndpoint) and isinstance(end, QuranEndpoint):
        first = registry.position_of(start.surah, start.verse)
        last = registry.position_of(end.surah, end.verse)
        if first is None or last is None:
            return None
        start = QuranEndpoint(registry.canonical_name(start.surah), start.verse)
        end = QuranEndpoint(registry.canonical_name(end.surah), end.verse)
        if first > last:
            start, end = end, start
        return NormalizedRange(start, end, is_iqra=False)

    logger.debug("Rentang campuran Quran/Iqra' diabaikan: %r - %r", start, end)
    return None


def normalize_range_string(text, registry=None) -> Optional[NormalizedRange]:
    parsed = parse_range_string(text)
    if parsed is None:
        return None
    return normalize_range(parsed[0], parsed[1], registry)


def render_endpoint(endpoint) -> str:
    if endpoint is None:
        return PLACEHOLDER
    if isinstance(endpoint, IqraEndpoint):
        return f"Iqra' {endpoint.volume}: {endpoint.page}"
    return f"{endpoint.surah}: {endpoint.verse}"


def render_range(start, end=None) -> str:
    """
    Tulis ulang rentang ke format ringkas. Menerima NormalizedRange atau
    dua titik; titik kosong ditulis "-".
    """
    if isinstance(start, NormalizedRange):
        start, end = start.start, start.end
    if start is None and end is None:
        return PLACEHOLDER
    return f"{render_endpoint(start)}{RANGE_SEPARATOR}{render_endpoint(end)}"


def get_end_part(text) -> str:
    """Bagian "sampai" dari string rentang (posisi terakhir murid)."""
    text = str(text or "").strip()
    if not text or text == PLACEHOLDER:
        return PLACEHOLDER
    parts = text.split(RANGE_SEPARATOR)
    return parts[1].strip() if len(parts) > 1 else parts[0].strip()


def format_range_display(text) -> str:
    """
    Tampilan singkat rentang: satu surah/jilid yang sama diringkas menjadi
    "An-Naba': 1-10". Rentang lain ditampilkan apa adanya.
    """
    text = str(text or "").strip()
    if not text or text == PLACEHOLDER:
        return PLACEHOLDER
    parsed = parse_range_string(text)
    if parsed is None:
        return text
    start, end = parsed
    if isinstance(start, QuranEndpoint) and isinstance(end, QuranEndpoint):
        if start.surah == end.surah:
            return f"{start.surah}: {start.verse}-{end.verse}"
    elif isinstance(start, IqraEndpoint) and isinstance(end, IqraEndpoint):
        if start.volume == end.volume:
            return f"Iqra' {start.volume}: {start.page}-{end.page}"
    return f"{render_endpoint(start)}{RANGE_SEPARATOR}{render_endpoint(end)}"
