"""Exception hierarchy for the CNB rate import pipeline.

None of these escape :meth:`fx_cnb.importer.CNBRateImporter.run`; they mark the
seams where a failure is turned into a diagnostic message.
"""

from __future__ import annotations

from fx_cnb.utils.cnb import (
    CNB_NATIVE_CURRENCY,
    MESSAGE_DEFAULT_CURRENCY_MISMATCH,
    MESSAGE_DEFAULT_CURRENCY_NOT_SET,
    MESSAGE_FEED_NOT_RECEIVED,
    MESSAGE_MISSING_RATE,
)


class CNBImportError(Exception):
    """Base class for every failure raised by the import pipeline."""


class ConfigurationError(CNBImportError):
    """The base currencies supplied by the caller cannot be served by the feed."""

    def __init__(self, message: str, *, currency: str | None = None) -> None:
        self.currency = currency
        super().__init__(message)

    @classmethod
    def missing_default(cls) -> "ConfigurationError":
        return cls(MESSAGE_DEFAULT_CURRENCY_NOT_SET)

    @classmethod
    def unsupported_default(cls, currency: str) -> "ConfigurationError":
        return cls(
            MESSAGE_DEFAULT_CURRENCY_MISMATCH.format(native=CNB_NATIVE_CURRENCY),
            currency=currency,
        )


class TransportError(CNBImportError):
    """A single HTTP attempt against the feed failed."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Request to {url} failed: {reason}")


class DataUnavailableError(CNBImportError):
    """No feed text was received, even after retrying."""

    def __init__(self, message: str = MESSAGE_FEED_NOT_RECEIVED) -> None:
        super().__init__(message)


class MissingQuoteError(CNBImportError):
    """The feed carries no usable rate for a requested target currency."""

    def __init__(self, base: str, target: str) -> None:
        self.base = base
        self.target = target
        super().__init__(MESSAGE_MISSING_RATE.format(base=base, target=target))


class MalformedRecordError(CNBImportError):
    """A feed record lacks a currency code or a usable rate."""

    def __init__(self, line_number: int, reason: str) -> None:
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Skipping feed line {line_number}: {reason}")


__all__ = [
    "CNBImportError",
    "ConfigurationError",
    "DataUnavailableError",
    "MalformedRecordError",
    "MissingQuoteError",
    "TransportError",
]
