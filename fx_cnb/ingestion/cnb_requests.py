"""requests-based downloader for the CNB daily exchange-rate feed."""

from __future__ import annotations

import time

import requests

from fx_cnb.config import CNBSettings
from fx_cnb.errors import TransportError
from fx_cnb.utils.logger import get_logger

LOGGER = get_logger(__name__)


class CNBRequestsClient:
    """Fetch the raw feed text with a bounded timeout and a fixed attempt budget."""

    def __init__(
        self,
        *,
        settings: CNBSettings | None = None,
        session: requests.Session | None = None,
        sleep=time.sleep,
    ) -> None:
        self.settings = settings or CNBSettings()
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = self.settings.user_agent
        else:
            session.headers.setdefault("User-Agent", self.settings.user_agent)
        self.session = session
        self._sleep = sleep

    @property
    def timeout(self) -> float:
        return self.settings.timeout

    @property
    def max_attempts(self) -> int:
        return self.settings.max_attempts

    def fetch_text(self, url: str | None = None) -> str:
        """Return the feed body, or ``""`` once every attempt has failed."""

        target = url or self.settings.feed_url
        for attempt in range(1, self.max_attempts + 1):
            try:
                text = self._get(target)
            except TransportError as exc:
                LOGGER.warning(
                    "Attempt %s/%s to download CNB rates failed: %s",
                    attempt,
                    self.max_attempts,
                    exc.reason,
                )
                if attempt < self.max_attempts and self.settings.backoff_seconds:
                    self._sleep(self.settings.backoff_seconds)
                continue
            LOGGER.info("Fetched CNB rates from %s", target)
            return text
        LOGGER.error("Giving up on %s after %s attempts", target, self.max_attempts)
        return ""

    def _get(self, url: str) -> str:
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise TransportError(url, str(exc) or type(exc).__name__) from exc
        return self._decode(response)

    @staticmethod
    def _decode(response: requests.Response) -> str:
        if not response.encoding:
            response.encoding = "utf-8"
        return response.text

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "CNBRequestsClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["CNBRequestsClient"]
