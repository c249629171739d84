"""Local configuration (``~/.authormap/config.json``).

Keys:

- ``catalog``: default catalog source (directory, JSON file, or URL)

The ``AUTHORMAP_CATALOG`` environment variable takes priority over the file.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

CATALOG_ENV_VAR = "AUTHORMAP_CATALOG"


def _config_path() -> Path:
    return Path.home() / ".authormap" / "config.json"


def load_config() -> dict[str, Any]:
    """Load the local config, or ``{}`` if it is missing or unreadable."""
    path = _config_path()
    if path.exists():
        try:
            data = json.loads(path.read_text())
        except (json.JSONDecodeError, OSError):
            return {}
        return data if isinstance(data, dict) else {}
    return {}


def save_config(config: dict[str, Any]) -> None:
    """Persist config to ``~/.authormap/config.json``."""
    path = _config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2) + "\n")
    path.chmod(0o600)


def get_catalog_source() -> Optional[str]:
    """Read the catalog source from ``AUTHORMAP_CATALOG`` or the config file."""
    env_source = os.environ.get(CATALOG_ENV_VAR, "")
    if env_source:
        return env_source
    return load_config().get("catalog") or None
