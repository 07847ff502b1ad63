from __future__ import annotations

import json
from pathlib import Path

DEFAULT_CONFIG_NAME = ".git-migrate-info.json"

DEFAULTS: dict = {
    "above": "",
    "top": 5,
    "include": [],
    "exclude": [],
    "remote": "origin",
}


def load_config(config_path: Path) -> dict:
    if not config_path.exists():
        return {}
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise SystemExit(f"Invalid config file {config_path}: {e}")
    if not isinstance(data, dict):
        raise SystemExit(f"Invalid config file {config_path}: expected a JSON object")
    return data


def merged_config(config: dict) -> dict:
    """Built-in defaults overlaid with the recognized keys of `config`."""
    out = dict(DEFAULTS)
    for key in DEFAULTS:
        if key in config and config[key] is not None:
            out[key] = config[key]
    return out
