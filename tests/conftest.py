"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from date_tasks.config import default_local_zone


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep DATE_TASKS_* variables from the caller's shell out of tests."""
    for name in ("DATE_TASKS_LOCAL_TIMEZONE", "DATE_TASKS_LOG_LEVEL", "DATE_TASKS_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    default_local_zone.cache_clear()
    yield
    default_local_zone.cache_clear()
