"""CNB-specific constants and message templates used across the package."""

from __future__ import annotations

from typing import Final

CNB_DAILY_RATES_URL: Final[str] = (
    "https://www.cnb.cz/cs/financni-trhy/devizovy-trh/kurzy-devizoveho-trhu/"
    "kurzy-devizoveho-trhu/denni_kurz.txt"
)
CNB_NATIVE_CURRENCY: Final[str] = "CZK"

# Feed layout: two metadata records, then ``country|currency|amount|code|rate``.
CNB_HEADER_LINES: Final[int] = 2
CNB_FIELD_SEPARATOR: Final[str] = "|"
AMOUNT_INDEX: Final[int] = 2
CODE_INDEX: Final[int] = 3
RATE_INDEX: Final[int] = 4

DEFAULT_TIMEOUT_SECONDS: Final[float] = 100.0
DEFAULT_MAX_ATTEMPTS: Final[int] = 2
DEFAULT_RATE_PRECISION: Final[int] = 12

MESSAGE_DEFAULT_CURRENCY_NOT_SET: Final[str] = "Default currency not set"
MESSAGE_DEFAULT_CURRENCY_MISMATCH: Final[str] = "Default currency should be {native}"
MESSAGE_FEED_NOT_RECEIVED: Final[str] = "Convert data from the CZ bank has not been received"
MESSAGE_MISSING_RATE: Final[str] = "We can't retrieve a rate from {base} for {target}."


__all__ = [
    "AMOUNT_INDEX",
    "CNB_DAILY_RATES_URL",
    "CNB_FIELD_SEPARATOR",
    "CNB_HEADER_LINES",
    "CNB_NATIVE_CURRENCY",
    "CODE_INDEX",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_RATE_PRECISION",
    "DEFAULT_TIMEOUT_SECONDS",
    "MESSAGE_DEFAULT_CURRENCY_MISMATCH",
    "MESSAGE_DEFAULT_CURRENCY_NOT_SET",
    "MESSAGE_FEED_NOT_RECEIVED",
    "MESSAGE_MISSING_RATE",
    "RATE_INDEX",
]
