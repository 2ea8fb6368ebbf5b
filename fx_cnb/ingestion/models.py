"""Data models shared across ingestion and conversion modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Iterator, Mapping

ConversionMatrix = dict[str, dict[str, float | None]]


@dataclass(slots=True)
class CNBRateRecord:
    """Representation of a single accepted line of the CNB daily feed."""

    code: str
    feed_rate: float
    amount: float | None = None
    country: str = ""
    currency_name: str = ""

    @property
    def unit_rate(self) -> float:
        """Rate for exactly one unit of ``code``, in CZK."""

        if self.amount is not None and self.amount > 1:
            return self.feed_rate / self.amount
        return self.feed_rate


@dataclass(frozen=True, slots=True)
class FeedHeader:
    """Metadata carried by the first feed line (``16.10.2026 #200``)."""

    published_on: date
    sequence: int | None = None


class UnitRateTable(Mapping[str, float]):
    """Immutable mapping of currency code to CZK per one unit of that currency."""

    __slots__ = ("_rates",)

    def __init__(self, rates: Mapping[str, float] | None = None) -> None:
        self._rates = MappingProxyType(dict(rates or {}))

    def __getitem__(self, code: str) -> float:
        return self._rates[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    def __repr__(self) -> str:
        return f"UnitRateTable({dict(self._rates)!r})"


@dataclass(slots=True)
class ParsedFeed:
    """Everything the parser extracted from one feed download."""

    header: FeedHeader | None
    records: list[CNBRateRecord]
    rates: UnitRateTable


@dataclass(slots=True)
class ConversionResult:
    """Outcome of a pipeline run: the matrix plus the diagnostics gathered on the way.

    An empty matrix with messages means nothing was updated; ``None`` cells mean
    the pair could not be quoted and a matching message exists.
    """

    matrix: ConversionMatrix = field(default_factory=dict)
    messages: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.matrix

    def missing_pairs(self) -> list[tuple[str, str]]:
        """Return ``(base, target)`` pairs that have no rate."""

        return [
            (base, target)
            for base, row in self.matrix.items()
            for target, rate in row.items()
            if rate is None
        ]


__all__ = [
    "CNBRateRecord",
    "ConversionMatrix",
    "ConversionResult",
    "FeedHeader",
    "ParsedFeed",
    "UnitRateTable",
]
