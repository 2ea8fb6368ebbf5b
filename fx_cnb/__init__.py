"""Public interface for the fx_cnb package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata
from typing import Sequence

from fx_cnb.config import CNBSettings
from fx_cnb.conversion.matrix import ConversionMatrixBuilder, normalise_rate
from fx_cnb.errors import (
    CNBImportError,
    ConfigurationError,
    DataUnavailableError,
    MalformedRecordError,
    MissingQuoteError,
    TransportError,
)
from fx_cnb.importer import CNBRateImporter
from fx_cnb.ingestion.cnb_requests import CNBRequestsClient
from fx_cnb.ingestion.cnb_text import CNBTextParser, parse_feed_header, parse_number
from fx_cnb.ingestion.models import (
    CNBRateRecord,
    ConversionResult,
    FeedHeader,
    ParsedFeed,
    UnitRateTable,
)
from fx_cnb.ingestion.strategy import ConversionStrategy, FeedSource, NativeRelativeConversion
from fx_cnb.utils.cnb import CNB_DAILY_RATES_URL, CNB_NATIVE_CURRENCY

__all__ = [
    "__version__",
    "CNB_DAILY_RATES_URL",
    "CNB_NATIVE_CURRENCY",
    "CNBImportError",
    "CNBRateImporter",
    "CNBRateRecord",
    "CNBRequestsClient",
    "CNBSettings",
    "CNBTextParser",
    "ConfigurationError",
    "ConversionMatrixBuilder",
    "ConversionResult",
    "ConversionStrategy",
    "DataUnavailableError",
    "FeedHeader",
    "FeedSource",
    "MalformedRecordError",
    "MissingQuoteError",
    "NativeRelativeConversion",
    "ParsedFeed",
    "TransportError",
    "UnitRateTable",
    "fetch_conversion_matrix",
    "normalise_rate",
    "parse_feed_header",
    "parse_number",
]

try:
    __version__ = importlib_metadata.version("fx-cnb")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


def fetch_conversion_matrix(
    bases: Sequence[str],
    targets: Sequence[str],
    *,
    settings: CNBSettings | None = None,
    source: FeedSource | None = None,
) -> ConversionResult:
    """Download today's CNB feed and build the matrix for ``bases`` x ``targets``.

    Settings default to :meth:`CNBSettings.from_env` so deployments can point the
    importer at a mirror or tune the timeout without code changes.
    """

    resolved = settings or CNBSettings.from_env()
    if source is not None:
        return CNBRateImporter(settings=resolved, source=source).run(bases, targets)
    with CNBRequestsClient(settings=resolved) as client:
        return CNBRateImporter(settings=resolved, source=client).run(bases, targets)
