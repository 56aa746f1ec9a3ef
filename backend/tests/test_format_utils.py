from __future__ import annotations

from datetime import date

from rendering.format_utils import esc, format_compact_currency, format_date, format_number


def test_format_compact_currency():
    assert format_compact_currency(4_400_000_000) == "$4.4B"
    assert format_compact_currency(2_500_000) == "$2.5M"
    assert format_compact_currency(1_200_000_000_000) == "$1.2T"
    assert format_compact_currency(950) == "$950"


def test_format_number():
    assert format_number(2140) == "2,140"
    assert format_number(0.5, precision=2) == "0.50"


def test_format_date():
    assert format_date(date(2026, 7, 30)) == "July 30, 2026"
    assert format_date("2026-07-30") == "July 30, 2026"
    assert format_date("") == ""
    assert format_date(None) == ""
    assert format_date("Q3 2026") == "Q3 2026"


def test_esc():
    assert esc('<a href="x">') == "&lt;a href=&quot;x&quot;&gt;"
    assert esc(None) == ""


def test_format_compact_currency_promotes_values_that_round_up():
    assert format_compact_currency(999_999_999) == "$1.0B"
    assert format_compact_currency(999_960) == "$1.0M"
    assert format_compact_currency(999.6) == "$1.0K"
    assert format_compact_currency(999_400) == "$999.4K"
