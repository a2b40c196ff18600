"""Loads YAML/JSON configuration files and the worker's runtime settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..protocol.validation import RAGGED_POLICIES


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_meta_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the worker's default configuration."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "solver_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


META_CONFIG: Dict[str, Any] = load_meta_config()
RAGGED_POLICY: str = str(META_CONFIG.get("ragged_policy", "reject"))
_RESPONSE_CONF = META_CONFIG.get("response") or {}
INCLUDE_ERROR_FIELD: bool = bool(_RESPONSE_CONF.get("include_error", False))
_LOGGING_CONF = META_CONFIG.get("logging") or {}
LOG_LEVEL: str = str(_LOGGING_CONF.get("level", "INFO")).upper()
LOG_FILE: Optional[str] = _LOGGING_CONF.get("file")


def set_ragged_policy(value: str) -> None:
    """Override how ragged grids are handled ("reject" or "clamp")."""
    global RAGGED_POLICY
    if value not in RAGGED_POLICIES:
        raise ValueError(f"Unknown ragged policy: {value}")
    RAGGED_POLICY = value
    META_CONFIG["ragged_policy"] = value


def set_include_error_field(value: bool) -> None:
    """Enable or disable the ``error`` field on invalid-request responses."""
    global INCLUDE_ERROR_FIELD
    INCLUDE_ERROR_FIELD = value
    META_CONFIG.setdefault("response", {})["include_error"] = value


def set_log_level(value: str) -> None:
    global LOG_LEVEL
    LOG_LEVEL = value.upper()
    META_CONFIG.setdefault("logging", {})["level"] = LOG_LEVEL


def set_log_file(value: Optional[str]) -> None:
    global LOG_FILE
    LOG_FILE = value
    META_CONFIG.setdefault("logging", {})["file"] = value


def apply_config(config: Dict[str, Any]) -> None:
    """Apply settings from a loaded config mapping over the current values."""
    if not isinstance(config, dict):
        raise ValueError("Config must be a mapping of settings")
    if "ragged_policy" in config:
        set_ragged_policy(str(config["ragged_policy"]))
    response = config.get("response") or {}
    if "include_error" in response:
        set_include_error_field(bool(response["include_error"]))
    logging_conf = config.get("logging") or {}
    if "level" in logging_conf:
        set_log_level(str(logging_conf["level"]))
    if "file" in logging_conf:
        set_log_file(logging_conf["file"])


def runtime_config() -> Dict[str, Any]:
    """Return a summary of the current runtime configuration."""
    return {
        "ragged_policy": RAGGED_POLICY,
        "include_error": INCLUDE_ERROR_FIELD,
        "log_level": LOG_LEVEL,
        "log_file": LOG_FILE,
    }
