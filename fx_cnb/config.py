"""Runtime settings for talking to the CNB feed."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from fx_cnb.utils.cnb import (
    CNB_DAILY_RATES_URL,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_RATE_PRECISION,
    DEFAULT_TIMEOUT_SECONDS,
)

ENV_PREFIX = "FX_CNB_"
DEFAULT_USER_AGENT = "fx-cnb-ingestor/1.0"


@dataclass(frozen=True, slots=True)
class CNBSettings:
    """Read-only configuration shared by every stage of a pipeline run."""

    feed_url: str = CNB_DAILY_RATES_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    backoff_seconds: float = 0.0
    rate_precision: int = DEFAULT_RATE_PRECISION
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if not self.feed_url:
            raise ValueError("feed_url must not be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if not 1 <= self.max_attempts <= DEFAULT_MAX_ATTEMPTS:
            raise ValueError(f"max_attempts must be between 1 and {DEFAULT_MAX_ATTEMPTS}")
        if self.backoff_seconds < 0:
            raise ValueError("backoff_seconds must not be negative")
        if self.rate_precision < 0:
            raise ValueError("rate_precision must not be negative")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CNBSettings":
        """Build settings from ``FX_CNB_*`` environment variables.

        Unset variables keep their defaults. Values that cannot be converted
        raise ``ValueError`` so a misconfigured deployment fails loudly.
        """

        env = os.environ if environ is None else environ

        def _get(name: str) -> str | None:
            value = env.get(f"{ENV_PREFIX}{name}")
            if value is None or not value.strip():
                return None
            return value.strip()

        overrides: dict[str, object] = {}
        if (url := _get("FEED_URL")) is not None:
            overrides["feed_url"] = url
        if (timeout := _get("TIMEOUT")) is not None:
            overrides["timeout"] = float(timeout)
        if (attempts := _get("MAX_ATTEMPTS")) is not None:
            overrides["max_attempts"] = int(attempts)
        if (backoff := _get("BACKOFF_SECONDS")) is not None:
            overrides["backoff_seconds"] = float(backoff)
        if (precision := _get("RATE_PRECISION")) is not None:
            overrides["rate_precision"] = int(precision)
        if (agent := _get("USER_AGENT")) is not None:
            overrides["user_agent"] = agent
        return cls(**overrides)  # type: ignore[arg-type]


__all__ = ["CNBSettings", "DEFAULT_USER_AGENT", "ENV_PREFIX"]
