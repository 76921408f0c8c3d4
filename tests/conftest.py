"""Pytest fixtures shared by the safeguards test-suite."""
from __future__ import annotations

import pytest

from safeguards import config
from safeguards.diagnostics import CollectingSink, reset_diagnostic_sink, use_diagnostic_sink


@pytest.fixture()
def sink():  # noqa: D401
    """Route every self-reported error into an in-memory sink."""
    collecting = CollectingSink()
    with use_diagnostic_sink(collecting):
        yield collecting


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):  # noqa: D401
    """Isolate tests from the caller's SAFEGUARDS_* environment."""
    monkeypatch.delenv(config.DIAGNOSTIC_SINK_ENV, raising=False)
    config.reload_settings()
    reset_diagnostic_sink()
    yield
    config.reload_settings()
    reset_diagnostic_sink()


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture()
def anyio_backend():  # noqa: D401
    """Force *anyio* tests to use the standard asyncio backend only."""
    return "asyncio"
