"""Abstractions for pluggable feed sources and conversion strategies."""

from __future__ import annotations

from typing import Mapping, Protocol


class FeedSource(Protocol):
    """Contract for retrieving raw feed text.

    Implementations must not raise on transport failures; an empty string
    signals that no data was received.
    """

    def fetch_text(self, url: str | None = None) -> str:
        ...  # pragma: no cover - protocol definition


class ConversionStrategy(Protocol):
    """Contract for deriving a rate between two currencies from a unit table."""

    def convert(self, currency_from: str, currency_to: str) -> float:
        ...  # pragma: no cover - protocol definition

    def rate(self, base: str, target: str, unit_rates: Mapping[str, float]) -> float | None:
        ...  # pragma: no cover - protocol definition


class NativeRelativeConversion:
    """Conversion for feeds that quote every currency against one native currency.

    The CNB feed never carries a rate between two foreign currencies, so the
    bilateral hook is the identity and the rate for ``base -> target`` is the
    unit rate of ``target``.
    """

    def convert(self, currency_from: str, currency_to: str) -> float:
        return 1.0

    def rate(self, base: str, target: str, unit_rates: Mapping[str, float]) -> float | None:
        value = unit_rates.get(target)
        if not value:
            return None
        return float(value)


__all__ = ["ConversionStrategy", "FeedSource", "NativeRelativeConversion"]
