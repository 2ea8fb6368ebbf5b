"""Run the CNB feed through fetch, parse and matrix construction."""

from __future__ import annotations

from typing import Sequence

from fx_cnb.config import CNBSettings
from fx_cnb.conversion.matrix import ConversionMatrixBuilder
from fx_cnb.errors import ConfigurationError, DataUnavailableError
from fx_cnb.ingestion.cnb_requests import CNBRequestsClient
from fx_cnb.ingestion.cnb_text import CNBTextParser
from fx_cnb.ingestion.models import ConversionResult
from fx_cnb.ingestion.strategy import FeedSource
from fx_cnb.utils.cnb import CNB_NATIVE_CURRENCY
from fx_cnb.utils.logger import get_logger

LOGGER = get_logger(__name__)


class CNBRateImporter:
    """Produce a conversion matrix from the CNB daily feed.

    Failures never propagate out of :meth:`run`: they are reported through the
    ``messages`` of the returned :class:`ConversionResult`.
    """

    def __init__(
        self,
        *,
        settings: CNBSettings | None = None,
        source: FeedSource | None = None,
        parser: CNBTextParser | None = None,
        builder: ConversionMatrixBuilder | None = None,
    ) -> None:
        self.settings = settings or CNBSettings()
        self.source = source or CNBRequestsClient(settings=self.settings)
        self.parser = parser or CNBTextParser()
        self.builder = builder or ConversionMatrixBuilder(precision=self.settings.rate_precision)

    def run(self, bases: Sequence[str], targets: Sequence[str]) -> ConversionResult:
        try:
            self._validate_bases(bases)
            raw_text = self._fetch()
        except (ConfigurationError, DataUnavailableError) as exc:
            LOGGER.error("CNB rate import aborted: %s", exc)
            return ConversionResult(messages=[str(exc)])

        feed = self.parser.parse_feed(raw_text)
        if feed.header is not None:
            LOGGER.info(
                "Parsed %s CNB quotes published on %s",
                len(feed.rates),
                feed.header.published_on.isoformat(),
            )
        else:
            LOGGER.info("Parsed %s CNB quotes", len(feed.rates))

        result = self.builder.build(bases, targets, feed.rates)
        missing = result.missing_pairs()
        if missing:
            LOGGER.warning("No CNB rate for %s pair(s): %s", len(missing), missing)
        return result

    fetch_rates = run

    @staticmethod
    def _validate_bases(bases: Sequence[str]) -> None:
        if not bases:
            raise ConfigurationError.missing_default()
        for currency in bases:
            if currency != CNB_NATIVE_CURRENCY:
                raise ConfigurationError.unsupported_default(currency)

    def _fetch(self) -> str:
        raw_text = self.source.fetch_text(self.settings.feed_url)
        if not raw_text:
            raise DataUnavailableError()
        return raw_text


__all__ = ["CNBRateImporter"]
