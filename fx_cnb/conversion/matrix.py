"""Build the source -> target conversion matrix from CNB unit rates."""

from __future__ import annotations

from typing import Iterable, Mapping

from fx_cnb.errors import MissingQuoteError
from fx_cnb.ingestion.models import ConversionMatrix, ConversionResult
from fx_cnb.ingestion.strategy import ConversionStrategy, NativeRelativeConversion
from fx_cnb.utils.cnb import DEFAULT_RATE_PRECISION


def normalise_rate(value: float, precision: int = DEFAULT_RATE_PRECISION) -> float:
    """Round ``value`` to the fixed precision shared by every stored rate."""

    return round(float(value), precision)


class ConversionMatrixBuilder:
    """Fill a matrix row for every base currency.

    Identical codes go through the strategy's bilateral hook; a target with
    no quote gets ``None`` plus one message. Repeated targets are filled once.
    Rows are sorted by target code.
    """

    def __init__(
        self,
        *,
        strategy: ConversionStrategy | None = None,
        precision: int = DEFAULT_RATE_PRECISION,
    ) -> None:
        self.strategy = strategy or NativeRelativeConversion()
        self.precision = precision

    def build(
        self,
        bases: Iterable[str],
        targets: Iterable[str],
        unit_rates: Mapping[str, float],
    ) -> ConversionResult:
        target_codes = list(targets)
        matrix: ConversionMatrix = {}
        messages: list[str] = []
        for base in bases:
            row = matrix.setdefault(base, {})
            for target in target_codes:
                if target in row:
                    continue
                try:
                    row[target] = self._rate(base, target, unit_rates)
                except MissingQuoteError as exc:
                    messages.append(str(exc))
                    row[target] = None
            matrix[base] = dict(sorted(row.items()))
        return ConversionResult(matrix=matrix, messages=messages)

    def _rate(self, base: str, target: str, unit_rates: Mapping[str, float]) -> float:
        if base == target:
            return normalise_rate(self.strategy.convert(base, target), self.precision)
        value = self.strategy.rate(base, target, unit_rates)
        if not value:
            raise MissingQuoteError(base, target)
        return normalise_rate(value, self.precision)


__all__ = ["ConversionMatrixBuilder", "normalise_rate"]
