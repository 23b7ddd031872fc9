"""Parser settings — env vars and TOML config in one frozen object.

Priority chain (highest to lowest):
  1. Init kwargs  — passed by the caller
  2. Env vars     — ``ANYDATE_*`` prefix
  3. TOML file    — explicit path or ``ANYDATE_CONFIG``
  4. Code defaults

Settings only tune decomposition (two-digit year pivot) and the naive
datetime policy. They never add or reorder layouts.
"""

from __future__ import annotations

import functools
import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from anydate.config.discovery import find_config, load_toml


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an ``anydate.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = load_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class AnydateSettings(BaseSettings):
    """Settings consulted by the parse entry points.

    Attributes:
        two_digit_year_pivot: ``%y`` values below this expand to 20xx,
            the rest to 19xx.
        assume_utc: Attach UTC to datetimes parsed without an offset.
        verbose: DEBUG logging for the ``anydate`` logger.
        log_json: JSON-lines log output instead of console rendering.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ANYDATE_",
    }

    two_digit_year_pivot: int = Field(default=69, ge=0, le=100)
    assume_utc: bool = False
    verbose: bool = False
    log_json: bool = False

    config_path: Path | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def load(cls, config_path: Path | str | None = None, **overrides: Any) -> AnydateSettings:
        """Construct settings, reading the TOML file found by :func:`find_config`.

        *overrides* take priority over env vars and the file.
        """
        toml_path = find_config(config_path)
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None


@functools.cache
def get_settings() -> AnydateSettings:
    """Process-wide settings, loaded once on first use."""
    return AnydateSettings.load()
