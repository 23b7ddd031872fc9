"""Shared pytest fixtures for anydate tests."""

from __future__ import annotations

import os
from collections.abc import Generator

import pytest

from anydate.config.settings import AnydateSettings, get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Drop ``ANYDATE_*`` env vars and the cached settings around each test."""
    for name in list(os.environ):
        if name.startswith("ANYDATE_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> AnydateSettings:
    """Default settings, independent of the environment."""
    return AnydateSettings()
