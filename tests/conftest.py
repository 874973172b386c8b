"""Shared pytest fixtures for the docsformat test suite."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def clear_docsformat_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host `DOCSFORMAT_*` variables from leaking into config resolution."""

    monkeypatch.delenv("DOCSFORMAT_MAX_LENGTH", raising=False)
    monkeypatch.delenv("DOCSFORMAT_LOG_EVENTS", raising=False)
