"""Tampilan teks hasil perhitungan halaman & baris."""

import logging

logger = logging.getLogger(__name__)

PLACEHOLDER = "-"

STYLES = ("compact", "long", "total")


def format_result(result, style="compact"):
    """
    Ubah CalculationResult menjadi teks:
      compact -> "2H 5B"            (Iqra': "3 Hal")
      long    -> "2 Halaman 5 Baris" (Iqra': "3 Halaman")
      total   -> "Total: 2 Hal 5 Baris" (Iqra': "Total: 3 Halaman")
    Gaya yang tidak dikenal memakai compact. Hasil tidak valid selalu "-".
    """
    if style not in STYLES:
        logger.warning("Gaya format tidak dikenal %r, memakai compact", style)
        style = "compact"
    if result is None or not result.valid:
        return PLACEHOLDER

    if result.is_iqra:
        if style == "compact":
            return f"{result.pages} Hal"
        if style == "long":
            return f"{result.pages} Halaman"
        return f"Total: {result.pages} Halaman"

    if style == "compact":
        return f"{result.pages}H {result.lines}B"
    if style == "long":
        return f"{result.pages} Halaman {result.lines} Baris"
    return f"Total: {result.pages} Hal {result.lines} Baris"
