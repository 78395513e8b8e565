"""Tests for range parsing, ordering and rendering."""

import pytest

from rentang import (
    IqraEndpoint,
    NormalizedRange,
    QuranEndpoint,
    format_range_display,
    get_end_part,
    is_iqra_name,
    make_endpoint,
    normalize_range,
    normalize_range_string,
    parse_endpoint,
    parse_range_string,
    render_range,
    safe_int,
)


class TestMakeEndpoint:

    @pytest.mark.parametrize("name,number,expected", [
        ("An-Naba'", 10, QuranEndpoint("An-Naba'", 10)),
        ("An-Naba'", "10", QuranEndpoint("An-Naba'", 10)),
        ("Al-Fatihah", "٧", QuranEndpoint("Al-Fatihah", 7)),
        ("Iqra' 3", 12, IqraEndpoint(3, 12)),
        ("Jilid 4", "5", IqraEndpoint(4, 5)),
        ("iqra 2", 1, IqraEndpoint(2, 1)),
    ])
    def test_valid(self, name, number, expected):
        assert make_endpoint(name, number) == expected

    @pytest.mark.parametrize("name,number", [
        ("", 5),
        (None, 5),
        ("-", 5),
        ("An-Naba'", 0),
        ("An-Naba'", ""),
        ("An-Naba'", "abc"),
        ("An-Naba'", True),
        ("Iqra'", 3),
    ])
    def test_invalid(self, name, number):
        assert make_endpoint(name, number) is None

    def test_is_iqra_name(self):
        assert is_iqra_name("Iqra' 1")
        assert is_iqra_name("JILID 2")
        assert not is_iqra_name("An-Naba'")

    def test_safe_int(self):
        assert safe_int(" 12 ") == 12
        assert safe_int("١٢") == 12
        assert safe_int("x", default=0) == 0


class TestParseRangeString:

    @pytest.mark.parametrize("text,expected", [
        ("An-Naba': 1 - An-Naba': 10", (QuranEndpoint("An-Naba'", 1), QuranEndpoint("An-Naba'", 10))),
        ("An-Naba': 1 - An-Nazi'at: 5", (QuranEndpoint("An-Naba'", 1), QuranEndpoint("An-Nazi'at", 5))),
        ("Ali 'Imran: 3 - Ali 'Imran: 9", (QuranEndpoint("Ali 'Imran", 3), QuranEndpoint("Ali 'Imran", 9))),
        ("Iqra' 1: 10 - Iqra' 2: 5", (IqraEndpoint(1, 10), IqraEndpoint(2, 5))),
        ("Iqra 5: 10 - Iqra 5: 15", (IqraEndpoint(5, 10), IqraEndpoint(5, 15))),
        ("Jilid 4 : 10 - Jilid 4 : 12", (IqraEndpoint(4, 10), IqraEndpoint(4, 12))),
    ])
    def test_valid(self, text, expected):
        assert parse_range_string(text) == expected

    @pytest.mark.parametrize("text", [
        "",
        None,
        "-",
        "An-Naba': 1",
        "An-Naba': 1 - ",
        "An-Naba': x - An-Naba': 3",
        "An-Naba' - An-Naba'",
        "An-Naba': 1 - An-Naba': 2 - An-Naba': 3",
        "An-Naba': - - An-Naba': 3",
    ])
    def test_malformed(self, text):
        assert parse_range_string(text) is None

    def test_parse_endpoint_placeholder(self):
        assert parse_endpoint("-") is None
        assert parse_endpoint("Ta-Ha: 5") == QuranEndpoint("Ta-Ha", 5)


class TestNormalizeRange:

    def test_forward_kept(self):
        nr = normalize_range(QuranEndpoint("An-Naba'", 1), QuranEndpoint("An-Nazi'at", 5))
        assert nr == NormalizedRange(QuranEndpoint("An-Naba'", 1), QuranEndpoint("An-Nazi'at", 5), False)

    def test_reversed_swapped(self):
        nr = normalize_range(QuranEndpoint("An-Nazi'at", 5), QuranEndpoint("An-Naba'", 1))
        assert nr.start == QuranEndpoint("An-Naba'", 1)
        assert nr.end == QuranEndpoint("An-Nazi'at", 5)

    def test_same_surah_reversed_verses(self):
        nr = normalize_range(QuranEndpoint("An-Naba'", 10), QuranEndpoint("An-Naba'", 1))
        assert (nr.start.verse, nr.end.verse) == (1, 10)

    def test_same_page_uses_surah_order(self):
        nr = normalize_range(QuranEndpoint("An-Nas", 1), QuranEndpoint("Al-Falaq", 1))
        assert nr.start.surah == "Al-Falaq"
        assert nr.end.surah == "An-Nas"

    def test_names_canonicalized(self):
        nr = normalize_range(QuranEndpoint("an naba", 1), QuranEndpoint("AL-MUTAFFIFIN", 3))
        assert nr.start.surah == "An-Naba'"
        assert nr.end.surah == "Al-Muthaffifin"

    def test_idempotent(self):
        nr = normalize_range(QuranEndpoint("An-Nazi'at", 5), QuranEndpoint("An-Naba'", 1))
        assert normalize_range(nr.start, nr.end) == nr

    def test_iqra_swapped(self):
        nr = normalize_range(IqraEndpoint(2, 5), IqraEndpoint(1, 10))
        assert nr == NormalizedRange(IqraEndpoint(1, 10), IqraEndpoint(2, 5), True)

    @pytest.mark.parametrize("start,end", [
        (QuranEndpoint("Al-XYZ", 1), QuranEndpoint("An-Naba'", 3)),
        (QuranEndpoint("An-Naba'", 1), QuranEndpoint("An-Naba'", 41)),
        (IqraEndpoint(7, 1), IqraEndpoint(1, 1)),
        (QuranEndpoint("An-Naba'", 1), IqraEndpoint(1, 1)),
        (None, QuranEndpoint("An-Naba'", 1)),
        (QuranEndpoint("An-Naba'", 1), None),
    ])
    def test_invalid(self, start, end):
        assert normalize_range(start, end) is None


class TestRender:

    @pytest.mark.parametrize("start,end", [
        (QuranEndpoint("An-Naba'", 1), QuranEndpoint("An-Naba'", 10)),
        (QuranEndpoint("An-Nazi'at", 5), QuranEndpoint("An-Naba'", 1)),
        (QuranEndpoint("Ali 'Imran", 7), QuranEndpoint("An-Nisa'", 2)),
        (QuranEndpoint("ta ha", 3), QuranEndpoint("Ta-Ha", 9)),
        (IqraEndpoint(2, 5), IqraEndpoint(1, 10)),
    ])
    def test_round_trip(self, start, end):
        nr = normalize_range(start, end)
        assert normalize_range_string(render_range(nr)) == nr

    def test_render_text(self):
        nr = normalize_range(IqraEndpoint(1, 10), IqraEndpoint(2, 5))
        assert render_range(nr) == "Iqra' 1: 10 - Iqra' 2: 5"
        assert render_range(QuranEndpoint("An-Naba'", 1), QuranEndpoint("An-Naba'", 10)) == "An-Naba': 1 - An-Naba': 10"

    def test_missing_segments(self):
        assert render_range(None, None) == "-"
        assert render_range(QuranEndpoint("An-Naba'", 1), None) == "An-Naba': 1 - -"


class TestDisplayHelpers:

    @pytest.mark.parametrize("text,expected", [
        ("An-Naba': 1 - An-Nazi'at: 5", "An-Nazi'at: 5"),
        ("An-Naba': 7", "An-Naba': 7"),
        ("", "-"),
        ("-", "-"),
        (None, "-"),
    ])
    def test_get_end_part(self, text, expected):
        assert get_end_part(text) == expected

    @pytest.mark.parametrize("text,expected", [
        ("An-Naba': 1 - An-Naba': 10", "An-Naba': 1-10"),
        ("Iqra' 5: 10 - Iqra' 5: 15", "Iqra' 5: 10-15"),
        ("An-Naba': 1 - An-Nazi'at: 5", "An-Naba': 1 - An-Nazi'at: 5"),
        ("catatan bebas", "catatan bebas"),
        ("", "-"),
    ])
    def test_format_range_display(self, text, expected):
        assert format_range_display(text) == expected
