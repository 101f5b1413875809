"""3-layer configuration for quantum-audit.

Loads and merges configuration from:
1. Default settings (built-in)
2. Project config (.quantum-audit/config.yaml)
3. CLI parameters (override)

Configuration only affects presentation and exit behavior. Detection and
scoring are fixed.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Optional

import yaml

from .scoring import DEFAULT_FAIL_UNDER

CONFIG_DIR = ".quantum-audit"
CONFIG_FILE = "config.yaml"

OUTPUT_FORMATS = ("text", "json", "junit")

DEFAULT_CONFIG: dict = {
    "output": {
        "format": "text",
        "quiet": False,
    },
    "ci": {
        "fail_under": DEFAULT_FAIL_UNDER,
    },
}


def deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dicts. Arrays are replaced, not merged."""
    result = {}
    for key in base:
        result[key] = base[key]
    for key, value in override.items():
        base_value = result.get(key)
        if isinstance(base_value, dict) and isinstance(value, dict):
            result[key] = deep_merge(base_value, value)
        else:
            result[key] = value
    return result


def load_project_config(project_path: Path) -> dict:
    """Load project configuration from .quantum-audit/config.yaml."""
    config_path = project_path / CONFIG_DIR / CONFIG_FILE
    if not config_path.is_file():
        return {}
    try:
        content = config_path.read_text(encoding="utf-8-sig")  # utf-8-sig strips BOM
        loaded = yaml.safe_load(content)
    except (OSError, UnicodeDecodeError, yaml.YAMLError):
        return {}
    return loaded if isinstance(loaded, dict) else {}


def get_effective_config(
    project_path: Path,
    cli_overrides: Optional[dict] = None,
) -> dict:
    """Get the fully resolved configuration for a scan."""
    config = copy.deepcopy(DEFAULT_CONFIG)

    project_config = load_project_config(project_path)
    if project_config:
        config = deep_merge(config, project_config)

    if cli_overrides:
        config = deep_merge(config, cli_overrides)

    output = config.get("output")
    if not isinstance(output, dict):
        config["output"] = output = copy.deepcopy(DEFAULT_CONFIG["output"])
    if output.get("format") not in OUTPUT_FORMATS:
        output["format"] = DEFAULT_CONFIG["output"]["format"]

    ci = config.get("ci")
    if not isinstance(ci, dict):
        config["ci"] = ci = copy.deepcopy(DEFAULT_CONFIG["ci"])
    fail_under = ci.get("fail_under")
    if isinstance(fail_under, bool) or not isinstance(fail_under, int) or not 0 <= fail_under <= 100:
        ci["fail_under"] = DEFAULT_FAIL_UNDER

    return config
