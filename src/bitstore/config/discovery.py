"""Config file location.

The config file lives in the user's home directory by default, like
``~/.netrc``.  ``BITSTORE_CONFIG`` and the ``--config`` CLI flag override it.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = ".bitstore"
CONFIG_ENV_VAR = "BITSTORE_CONFIG"


def default_config_path() -> Path:
    """Return the config path used when ``--config`` is not given.

    Checks BITSTORE_CONFIG first, then falls back to ``~/.bitstore``.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / CONFIG_FILENAME


def resolve_config_path(config_path: str | Path | None = None) -> Path:
    """Resolve an explicit *config_path* or fall back to the default."""
    if config_path:
        return Path(config_path).expanduser()
    return default_config_path()
