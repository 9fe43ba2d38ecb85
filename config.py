"""
config.py – Configuration persistence helpers.

Handles loading and saving the application's ``config.json`` file and exposes
:class:`CredentialStore`, the single-value store for the MDBList API key.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

CONFIG_DIR: str = os.path.join(os.path.dirname(__file__), "config")
CONFIG_FILE: str = os.path.join(CONFIG_DIR, "config.json")

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

PREFS_NAMESPACE: str = "MDBListPrefs"
API_KEY_NAME: str = "MDBListApiKey"

DEFAULT_CONFIG: dict[str, Any] = {
    PREFS_NAMESPACE: {},
}

# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from disk.

    If the config file does not exist it is created from :data:`DEFAULT_CONFIG`
    and a copy of that default dict is returned.  Missing keys in an existing
    file are filled in from :data:`DEFAULT_CONFIG`, including the keys of
    nested dictionaries.

    Args:
        path: Config file to read.  Defaults to :data:`CONFIG_FILE`.

    Returns:
        The configuration dictionary.
    """
    path = path or CONFIG_FILE
    if not os.path.exists(path):
        save_config(copy.deepcopy(DEFAULT_CONFIG), path)
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(path, "r") as fh:
            cfg: dict[str, Any] = json.load(fh)
        if not isinstance(cfg, dict):
            raise ValueError("config root must be a JSON object")

        for key, default_value in DEFAULT_CONFIG.items():
            cfg.setdefault(key, copy.deepcopy(default_value))
            if isinstance(default_value, dict) and isinstance(cfg[key], dict):
                for sub_key, sub_val in default_value.items():
                    cfg[key].setdefault(sub_key, sub_val)

        return cfg

    except Exception:
        # Corrupt or unreadable file: fall back to safe defaults
        logger.exception("Failed to read config file %r, using defaults", path)
        return copy.deepcopy(DEFAULT_CONFIG)


def save_config(config: dict[str, Any], path: str | None = None) -> None:
    """Persist *config* as pretty-printed JSON.

    Args:
        config: The configuration dictionary to write.
        path: Destination file.  Defaults to :data:`CONFIG_FILE`.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    path = path or CONFIG_FILE
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w") as fh:
        json.dump(config, fh, indent=4)


# ---------------------------------------------------------------------------
# Credential store
# ---------------------------------------------------------------------------


class CredentialStore:
    """Stores the MDBList API key under a fixed namespace/key pair.

    The value is kept unencrypted in the JSON config file.  Reading a key that
    was never saved returns ``None``; the store never deletes the value.
    """

    def __init__(self, path: str | None = None) -> None:
        self._path = path

    @property
    def path(self) -> str:
        return self._path or CONFIG_FILE

    def get(self) -> str | None:
        # Read-only: the file is only ever created by set()
        if not os.path.isfile(self.path):
            return None
        try:
            with open(self.path, "r") as fh:
                cfg = json.load(fh)
        except (OSError, ValueError):
            logger.exception("Failed to read config file %r", self.path)
            return None
        prefs = cfg.get(PREFS_NAMESPACE) if isinstance(cfg, dict) else None
        if not isinstance(prefs, dict):
            return None
        value = prefs.get(API_KEY_NAME)
        return value if isinstance(value, str) else None

    def set(self, value: str) -> None:
        cfg = load_config(self.path)
        prefs = cfg.get(PREFS_NAMESPACE)
        if not isinstance(prefs, dict):
            prefs = {}
            cfg[PREFS_NAMESPACE] = prefs
        prefs[API_KEY_NAME] = value
        save_config(cfg, self.path)
        logger.info("Saved MDBList API key to %r", self.path)
