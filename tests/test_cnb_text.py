from __future__ import annotations

from datetime import date

import pytest

from fx_cnb.ingestion.cnb_text import CNBTextParser, parse_feed_header, parse_number
from fx_cnb.ingestion.models import UnitRateTable

SAMPLE_FEED = (
    "16.10.2026 #200\n"
    "země|měna|množství|kód|kurz\n"
    "Austrálie|dolar|1|AUD|15,123\n"
    "EMU|euro|1|EUR|24,310\n"
    "Japonsko|jen|100|JPY|15,480\n"
    "Maďarsko|forint|100|HUF|6,270\n"
    "USA|dolar|1|USD|22,905\n"
)


@pytest.fixture()
def parser() -> CNBTextParser:
    return CNBTextParser()


def test_parse_sample_feed_normalises_amounts(parser: CNBTextParser) -> None:
    table = parser.parse(SAMPLE_FEED)

    assert isinstance(table, UnitRateTable)
    assert sorted(table) == ["AUD", "EUR", "HUF", "JPY", "USD"]
    assert table["EUR"] == pytest.approx(24.31)
    assert table["JPY"] == pytest.approx(0.1548)
    assert table["HUF"] == pytest.approx(0.0627)


def test_parse_divides_rate_by_amount(parser: CNBTextParser) -> None:
    table = parser.parse("header\ncolumns\nJapan|yen|100|JPY|150.0\n")

    assert table == {"JPY": 1.5}


def test_parse_keeps_rate_when_amount_is_one_or_missing(parser: CNBTextParser) -> None:
    raw = "header\ncolumns\n..|..|1|EUR|25.0\n..|..||GBP|29,5\n..|..|abc|CHF|26,1\n"

    table = parser.parse(raw)

    assert table == {"EUR": 25.0, "GBP": 29.5, "CHF": 26.1}


def test_parse_skips_first_two_lines_unconditionally(parser: CNBTextParser) -> None:
    raw = "a|b|1|EUR|25,0\nc|d|1|USD|22,0\ne|f|1|GBP|29,0"

    assert parser.parse(raw) == {"GBP": 29.0}


@pytest.mark.parametrize(
    "line",
    [
        "..|..|1||25,0",
        "..|..|1|EUR|",
        "..|..|1|EUR|0",
        "..|..|1|EUR|0,000",
        "..|..|1|EUR|-3,5",
        "..|..|1|EUR|n/a",
        "..|..|1|EUR",
        "..|..",
        "",
    ],
)
def test_parse_discards_records_without_code_or_rate(parser: CNBTextParser, line: str) -> None:
    assert parser.parse(f"header\ncolumns\n{line}\n") == {}


def test_parse_empty_input_returns_empty_table(parser: CNBTextParser) -> None:
    assert parser.parse("") == {}
    assert parser.parse("only a header") == {}


def test_parse_strips_carriage_returns_and_upper_cases_codes(parser: CNBTextParser) -> None:
    table = parser.parse("header\r\ncolumns\r\nEMU|euro|1| eur |24,310\r\n")

    assert table == {"EUR": 24.31}


def test_parse_feed_exposes_header_and_records(parser: CNBTextParser) -> None:
    feed = parser.parse_feed(SAMPLE_FEED)

    assert feed.header is not None
    assert feed.header.published_on == date(2026, 10, 16)
    assert feed.header.sequence == 200
    jpy = next(record for record in feed.records if record.code == "JPY")
    assert jpy.country == "Japonsko"
    assert jpy.currency_name == "jen"
    assert jpy.amount == 100
    assert jpy.feed_rate == pytest.approx(15.48)
    assert len(feed.records) == len(feed.rates)


def test_parse_feed_later_duplicates_win(parser: CNBTextParser) -> None:
    raw = "header\ncolumns\n..|..|1|EUR|25,0\n..|..|1|EUR|24,0\n"

    assert parser.parse(raw) == {"EUR": 24.0}


def test_unit_rate_table_is_read_only(parser: CNBTextParser) -> None:
    table = parser.parse(SAMPLE_FEED)

    with pytest.raises(TypeError):
        table["EUR"] = 1.0  # type: ignore[index]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("25,345", 25.345),
        ("25.345", 25.345),
        (" 1 234,56 ", 1234.56),
        ("1 234,56", 1234.56),
        ("1.234,56", 1234.56),
        ("1,234.56", 1234.56),
        ("100", 100.0),
        (2, 2.0),
    ],
)
def test_parse_number_accepts_both_decimal_conventions(raw: object, expected: float) -> None:
    assert parse_number(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", [None, "", "   ", "abc", "nan", "inf", "1,2,3x"])
def test_parse_number_returns_none_for_garbage(raw: object) -> None:
    assert parse_number(raw) is None


def test_parse_feed_header_variants() -> None:
    header = parse_feed_header("02.01.2026 #1")
    assert header is not None
    assert header.published_on == date(2026, 1, 2)
    assert header.sequence == 1
    assert parse_feed_header("01.02.2026").sequence is None  # type: ignore[union-attr]
    assert parse_feed_header("země|měna|množství|kód|kurz") is None
    assert parse_feed_header("31.02.2026 #1") is None
