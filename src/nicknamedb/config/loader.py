"""
Locate and read the nicknamedb TOML settings.

The file is found via ``NICKDB_CONFIG`` when set, otherwise ``config.toml``
in the working directory. Only the ``[nicknamedb]`` table is returned so a
host bot can keep its own settings in the same file.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

CONFIG_ENV = "NICKDB_CONFIG"
DEFAULT_CONFIG_PATH = Path("config.toml")


def config_path(path: str | Path | None = None) -> Path:
    if path is not None:
        return Path(path)
    env_path = os.getenv(CONFIG_ENV)
    return Path(env_path) if env_path else DEFAULT_CONFIG_PATH


def load_raw_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Return ``{"nicknamedb": {...}}`` from the config file, or ``{}``.

    A missing default file is normal; a missing file named explicitly or by
    ``NICKDB_CONFIG`` is logged since it usually means a typo.
    """
    target = config_path(path)
    if not target.is_file():
        if target != DEFAULT_CONFIG_PATH:
            logger.warning("nicknamedb config file %s not found; using environment", target)
        return {}

    with target.open("rb") as handle:
        raw = tomllib.load(handle)

    section = raw.get("nicknamedb")
    return {"nicknamedb": section} if isinstance(section, dict) else {}


__all__ = ["load_raw_config", "config_path", "CONFIG_ENV", "DEFAULT_CONFIG_PATH"]
