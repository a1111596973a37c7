"""Application configuration helpers.

Settings are merged from three places, later ones winning:

  * built-in ``DEFAULT_CONFIG``
  * a JSON file, ``tcxkit_config.json`` in the working directory or its parent
  * ``TCXKIT_*`` environment variables (the CLI loads ``.env`` first)

No config file is required; the defaults are enough to run.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "debug": False,
    "data_folder": ".",
    "table_format": "simple",
    "warn_missing_nodes": True,
}

CONFIG_FILENAME = "tcxkit_config.json"

# Candidate JSON config file locations (searched in order)
_FILE_PATHS: list[Path] = [
    Path(CONFIG_FILENAME),
    Path("..") / CONFIG_FILENAME,
]

_ENV_VARS = {
    "debug": "TCXKIT_DEBUG",
    "data_folder": "TCXKIT_DATA_FOLDER",
    "table_format": "TCXKIT_TABLE_FORMAT",
    "warn_missing_nodes": "TCXKIT_WARN_MISSING_NODES",
}


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "y", "on")


def find_config_file() -> Optional[Path]:
    """Return the first existing config file path, or ``None``."""
    for path in _FILE_PATHS:
        if path.is_file():
            return path
    return None


def _load_file(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    unknown = set(data) - set(DEFAULT_CONFIG)
    if unknown:
        logger.warning("Ignoring unknown config keys in %s: %s", path, ", ".join(sorted(unknown)))
    return {key: value for key, value in data.items() if key in DEFAULT_CONFIG}


def load_config(path: Optional[Path] = None) -> dict[str, Any]:
    """Return the merged configuration dict."""
    config = copy.deepcopy(DEFAULT_CONFIG)

    path = path or find_config_file()
    if path is not None:
        config.update(_load_file(path))

    for key, env_var in _ENV_VARS.items():
        value = os.environ.get(env_var)
        if value is None or value == "":
            continue
        if isinstance(DEFAULT_CONFIG[key], bool):
            config[key] = _parse_bool(value)
        else:
            config[key] = value

    return config


def configure_logging(config: dict[str, Any]) -> None:
    """Apply the logging side of ``config`` for a CLI run."""
    logging.basicConfig(level=logging.DEBUG if config.get("debug") else logging.WARNING)
    if not config.get("warn_missing_nodes", True):
        logging.getLogger("tcxkit.formats.xmlnode").setLevel(logging.ERROR)
