"""Config file discovery.

A library has no working directory of its own, so there is no walk-up
search: the TOML file is either passed explicitly or named by the
``ANYDATE_CONFIG`` env var.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_ENV_VAR = "ANYDATE_CONFIG"


def find_config(path: Path | str | None = None) -> Path | None:
    """Resolve the config file to load.

    An explicit *path* wins over ``ANYDATE_CONFIG``. Returns None if the
    chosen path does not name an existing file.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return None
        path = env_path

    p = Path(path)
    if p.is_file():
        return p
    return None


def load_toml(path: Path) -> dict[str, Any]:
    """Read *path* as TOML.

    Raises:
        ValueError: if the file is not valid TOML.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ValueError(msg) from exc
