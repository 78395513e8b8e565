"""
Registry lokasi ayat: memetakan (surah, ayat) ke halaman mushaf dan
(jilid, halaman) Iqra' ke nomor halaman absolut kurikulum Iqra'.

Registry dibangun sekali saat proses dimulai dan tidak pernah diubah,
sehingga aman dibaca bersamaan dari banyak perhitungan.
"""

import logging
import re
import unicodedata
from dataclasses import dataclass
from functools import lru_cache

from quran_data import (
    IQRA_PAGES,
    JUZ_AMMA_PAGES,
    PAGES_PER_JUZ,
    SURAH_ALIASES,
    SURAH_METADATA,
    TOTAL_JUZ,
    TOTAL_PAGES,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocationEntry:
    """Potongan ayat satu surah yang berada di satu halaman mushaf."""

    surah: str
    start_verse: int
    end_verse: int
    page: int
    surah_index: int = 0
    estimated: bool = False

    @property
    def verse_count(self) -> int:
        return self.end_verse - self.start_verse + 1

    def contains(self, verse: int) -> bool:
        return self.start_verse <= verse <= self.end_verse


@dataclass(frozen=True)
class IqraLocationEntry:
    volume: int
    pages_in_volume: int


def normalize_surah_name(name) -> str:
    """
    Kunci pencarian nama surah: huruf kecil, tanpa harakat/diakritik,
    tanpa tanda hubung, apostrof, spasi, dan tanda baca lain.
    "An-Naba'", "an naba" dan "AN-NABA" menghasilkan kunci yang sama.
    """
    text = unicodedata.normalize("NFKD", str(name or ""))
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    return re.sub(r"[^0-9a-z]", "", text.casefold())


def juz_of_page(page: int) -> int:
    """Nomor juz untuk halaman mushaf (juz 1 = halaman 1-21, lalu 20 halaman per juz)."""
    if page < 2:
        return 1
    return min(TOTAL_JUZ, (page - 2) // PAGES_PER_JUZ + 1)


def _spread_surah(surah_index, name, verse_count, start_page, end_page):
    """Sebar ayat surah secara rata ke halaman start_page..end_page (data estimasi)."""
    total_pages = end_page - start_page + 1
    entries = []
    current_page = None
    first_verse = 1
    for verse in range(1, verse_count + 1):
        page = start_page + (verse - 1) * total_pages // verse_count
        if current_page is None:
            current_page = page
        elif page != current_page:
            entries.append(LocationEntry(name, first_verse, verse - 1, current_page, surah_index, True))
            current_page = page
            first_verse = verse
    entries.append(LocationEntry(name, first_verse, verse_count, current_page, surah_index, True))
    return entries


def build_location_entries():
    """
    Menyusun seluruh LocationEntry dalam urutan bacaan (halaman, nomor surah, ayat).
    Juz 30 memakai sebaran presisi dari JUZ_AMMA_PAGES, surah lain diestimasi.
    """
    index_by_name = {name: idx for idx, name, _, _ in SURAH_METADATA}
    exact_surahs = {name for _, name, _, _ in JUZ_AMMA_PAGES}

    entries = [
        LocationEntry(name, start, end, page, index_by_name[name])
        for page, name, start, end in JUZ_AMMA_PAGES
    ]

    for pos, (idx, name, verse_count, start_page) in enumerate(SURAH_METADATA):
        if name in exact_surahs:
            continue
        if pos + 1 < len(SURAH_METADATA):
            next_start = SURAH_METADATA[pos + 1][3]
        else:
            next_start = TOTAL_PAGES + 1
        end_page = max(start_page, next_start - 1)
        entries.extend(_spread_surah(idx, name, verse_count, start_page, end_page))

    entries.sort(key=lambda e: (e.page, e.surah_index, e.start_verse))
    return entries


class LocationRegistry:
    """Tabel lookup baca-saja untuk ruang halaman mushaf dan ruang halaman Iqra'."""

    def __init__(self, entries=None, iqra_pages=None, aliases=None):
        self.entries = tuple(entries if entries is not None else build_location_entries())
        self.iqra_entries = tuple(
            IqraLocationEntry(volume, count)
            for volume, count in sorted((iqra_pages or IQRA_PAGES).items())
        )

        self._by_surah = {}
        self._canonical = {}

        for entry in self.entries:
            key = normalize_surah_name(entry.surah)
            self._by_surah.setdefault(key, []).append(entry)
            self._canonical[key] = entry.surah

        for alias, canonical in (aliases if aliases is not None else SURAH_ALIASES).items():
            target = normalize_surah_name(canonical)
            if target in self._by_surah:
                self._by_surah.setdefault(normalize_surah_name(alias), self._by_surah[target])
                self._canonical.setdefault(normalize_surah_name(alias), canonical)

        for items in self._by_surah.values():
            items.sort(key=lambda e: e.start_verse)

    # ------------------------------------------------------------------
    # Ruang mushaf
    # ------------------------------------------------------------------

    def canonical_name(self, surah):
        """Nama baku surah sesuai registry, atau None jika tidak dikenal."""
        return self._canonical.get(normalize_surah_name(surah))

    def resolve_quran_verse(self, surah, verse):
        """
        Cari LocationEntry yang memuat ayat `verse` dari surah `surah`.
        Nama surah tidak dikenal atau ayat di luar rentang menghasilkan None.
        """
        if isinstance(verse, bool) or not isinstance(verse, int):
            return None
        for entry in self._by_surah.get(normalize_surah_name(surah), ()):
            if entry.contains(verse):
                return entry
        logger.debug("Lokasi tidak ditemukan: %s ayat %s", surah, verse)
        return None

    def surah_start_page(self, surah):
        items = self._by_surah.get(normalize_surah_name(surah))
        return items[0].page if items else None

    def position_of(self, surah, verse):
        """Kunci urutan bacaan (halaman, nomor surah, ayat), atau None."""
        entry = self.resolve_quran_verse(surah, verse)
        if entry is None:
            return None
        return (entry.page, entry.surah_index, verse)

    # ------------------------------------------------------------------
    # Ruang Iqra'
    # ------------------------------------------------------------------

    def resolve_iqra_absolute_page(self, volume, page):
        """
        Nomor halaman absolut di seluruh kurikulum Iqra':
        jumlah halaman jilid sebelumnya + halaman pada jilid ini.
        Jilid di luar 1..6 menghasilkan None.
        """
        if isinstance(volume, bool) or not isinstance(volume, int):
            return None
        if isinstance(page, bool) or not isinstance(page, int):
            return None
        volumes = [e.volume for e in self.iqra_entries]
        if volume not in volumes:
            logger.debug("Jilid Iqra' tidak valid: %s", volume)
            return None
        previous = sum(e.pages_in_volume for e in self.iqra_entries if e.volume < volume)
        return previous + page


@lru_cache(maxsize=1)
def get_registry() -> LocationRegistry:
    """Registry bersama untuk seluruh proses (dibangun sekali)."""
    registry = LocationRegistry()
    logger.info("Registry lokasi dimuat: %d entry halaman", len(registry.entries))
    return registry
