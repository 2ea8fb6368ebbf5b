"""Parse the CNB pipe-delimited daily feed into unit rates."""

from __future__ import annotations

import math
import re
from datetime import date

from fx_cnb.errors import MalformedRecordError
from fx_cnb.ingestion.models import CNBRateRecord, FeedHeader, ParsedFeed, UnitRateTable
from fx_cnb.utils.cnb import (
    AMOUNT_INDEX,
    CNB_FIELD_SEPARATOR,
    CNB_HEADER_LINES,
    CODE_INDEX,
    RATE_INDEX,
)
from fx_cnb.utils.logger import get_logger

LOGGER = get_logger(__name__)

_HEADER_PATTERN = re.compile(r"^\s*(\d{1,2})\.\s*(\d{1,2})\.\s*(\d{4})(?:\s*#\s*(\d+))?")
_SPACES = re.compile(r"\s+")


def parse_number(value: object | None) -> float | None:
    """Convert a feed number (``25,345`` or ``25.345``) into a float.

    When both separators are present the right-most one is the decimal mark and
    the other one groups thousands. Returns ``None`` for anything unparsable.
    """

    if value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else None
    cleaned = _SPACES.sub("", str(value))
    if not cleaned:
        return None
    comma, dot = cleaned.rfind(","), cleaned.rfind(".")
    if comma != -1 and dot != -1:
        if comma > dot:
            cleaned = cleaned.replace(".", "").replace(",", ".")
        else:
            cleaned = cleaned.replace(",", "")
    else:
        cleaned = cleaned.replace(",", ".")
    try:
        number = float(cleaned)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def parse_feed_header(line: str) -> FeedHeader | None:
    """Extract the publication date and sequence number from the first feed line."""

    match = _HEADER_PATTERN.match(line or "")
    if not match:
        return None
    day, month, year, sequence = match.groups()
    try:
        published_on = date(int(year), int(month), int(day))
    except ValueError:
        LOGGER.warning("Ignoring invalid feed date %r", match.group(0))
        return None
    return FeedHeader(published_on=published_on, sequence=int(sequence) if sequence else None)


def _field(fields: list[str], index: int) -> str:
    return fields[index].strip() if len(fields) > index else ""


class CNBTextParser:
    """Convert CNB ``denni_kurz.txt`` payloads into :class:`UnitRateTable` objects."""

    def __init__(self, *, separator: str = CNB_FIELD_SEPARATOR, header_lines: int = CNB_HEADER_LINES) -> None:
        self.separator = separator
        self.header_lines = header_lines

    def parse(self, raw_text: str) -> UnitRateTable:
        return self.parse_feed(raw_text).rates

    def parse_feed(self, raw_text: str) -> ParsedFeed:
        lines = (raw_text or "").split("\n")
        header = parse_feed_header(lines[0]) if raw_text else None
        records: list[CNBRateRecord] = []
        rates: dict[str, float] = {}
        for line_number, line in enumerate(lines):
            if line_number < self.header_lines:
                continue
            try:
                record = self._parse_record(line, line_number)
            except MalformedRecordError as exc:
                LOGGER.debug("%s", exc)
                continue
            records.append(record)
            rates[record.code] = record.unit_rate
        return ParsedFeed(header=header, records=records, rates=UnitRateTable(rates))

    def _parse_record(self, line: str, line_number: int) -> CNBRateRecord:
        fields = line.split(self.separator)
        code = _field(fields, CODE_INDEX).upper()
        if not code:
            raise MalformedRecordError(line_number, "missing currency code")
        rate = parse_number(_field(fields, RATE_INDEX))
        if not rate or rate <= 0:
            raise MalformedRecordError(line_number, f"no usable rate for {code}")
        return CNBRateRecord(
            code=code,
            feed_rate=rate,
            amount=parse_number(_field(fields, AMOUNT_INDEX)),
            country=_field(fields, 0),
            currency_name=_field(fields, 1),
        )


__all__ = ["CNBTextParser", "parse_feed_header", "parse_number"]
