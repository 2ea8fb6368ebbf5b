"""Tests for the public package facade."""

from __future__ import annotations

import pytest

import fx_cnb
from fx_cnb import CNBSettings, ConversionResult, fetch_conversion_matrix


class _StubSource:
    def __init__(self, text: str) -> None:
        self.text = text
        self.urls: list[str | None] = []

    def fetch_text(self, url: str | None = None) -> str:
        self.urls.append(url)
        return self.text


def test_package_exposes_version_and_api() -> None:
    assert isinstance(fx_cnb.__version__, str)
    for name in fx_cnb.__all__:
        assert hasattr(fx_cnb, name), name


def test_fetch_conversion_matrix_uses_supplied_source() -> None:
    source = _StubSource("16.10.2026 #200\nheader\nEMU|euro|1|EUR|24,310\n")

    result = fetch_conversion_matrix(["CZK"], ["EUR", "CZK"], source=source)

    assert isinstance(result, ConversionResult)
    assert result.matrix == {"CZK": {"CZK": 1.0, "EUR": 24.31}}
    assert result.messages == []


def test_fetch_conversion_matrix_reads_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FX_CNB_FEED_URL", "https://mirror.test/feed.txt")
    source = _StubSource("")

    result = fetch_conversion_matrix(["CZK"], ["EUR"], source=source)

    assert source.urls == ["https://mirror.test/feed.txt"]
    assert result.messages == ["Convert data from the CZ bank has not been received"]


def test_fetch_conversion_matrix_prefers_explicit_settings() -> None:
    source = _StubSource("")
    settings = CNBSettings(feed_url="https://explicit.test/feed.txt")

    fetch_conversion_matrix(["CZK"], ["EUR"], settings=settings, source=source)

    assert source.urls == ["https://explicit.test/feed.txt"]


def test_fetch_conversion_matrix_closes_default_client(monkeypatch: pytest.MonkeyPatch) -> None:
    closed: list[bool] = []

    def _fake_fetch(self, url: str | None = None) -> str:
        return "16.10.2026 #200\nheader\nUSA|dolar|1|USD|22,905\n"

    monkeypatch.setattr("fx_cnb.ingestion.cnb_requests.CNBRequestsClient.fetch_text", _fake_fetch)
    monkeypatch.setattr(
        "fx_cnb.ingestion.cnb_requests.CNBRequestsClient.close", lambda self: closed.append(True)
    )

    result = fetch_conversion_matrix(["CZK"], ["USD"], settings=CNBSettings())

    assert result.matrix == {"CZK": {"USD": 22.905}}
    assert closed == [True]
