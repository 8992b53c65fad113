"""Shared fixtures for kubefilter tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Restore the default structlog configuration after every test.

    The CLI configures a level-filtering logger; leaving it in place would
    hide debug lines from ``capture_logs`` in later tests.
    """
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ADVANCED_FILTERS", raising=False)
    monkeypatch.delenv("KUBEFILTER_LOG_LEVEL", raising=False)
