"""Configuration management for kn CLI."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SERVER = "http://localhost:8080"
DEFAULT_NAMESPACE = "default"
DEFAULT_TIMEOUT = 30.0

CONFIG_KEYS = ["server", "namespace", "token", "timeout"]

DEFAULT_CONFIG = {
    "server": DEFAULT_SERVER,
    "namespace": DEFAULT_NAMESPACE,
    "token": None,
    "timeout": DEFAULT_TIMEOUT,
}

# Environment variable for each config key
ENV_VARS = {
    "server": "KN_SERVER",
    "namespace": "KN_NAMESPACE",
    "token": "KN_TOKEN",
    "timeout": "KN_TIMEOUT",
}


def get_config_dir() -> Path:
    """Get config directory (~/.kn unless KN_CONFIG_DIR is set)."""
    return Path(os.environ.get("KN_CONFIG_DIR") or Path.home() / ".kn")


def get_config_path() -> Path:
    return get_config_dir() / "config.yaml"


def load_config() -> Dict[str, Any]:
    """Load config file merged over defaults."""
    config = dict(DEFAULT_CONFIG)
    path = get_config_path()
    if not path.exists():
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to read config file {path}: {e}")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Ignoring malformed config file: {path}")
        return config

    config.update({k: v for k, v in data.items() if k in CONFIG_KEYS})
    return config


def save_config(config: Dict[str, Any]) -> None:
    """Write config to disk, dropping unset values."""
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {k: v for k, v in config.items() if k in CONFIG_KEYS and v is not None}
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=True)
    logger.debug(f"Saved config to {path}")


def get_value(key: str) -> Any:
    """Resolve a config value: environment first, then config file."""
    env_value = os.environ.get(ENV_VARS[key])
    if env_value:
        return env_value
    return load_config().get(key)


def get_server() -> str:
    return get_value("server") or DEFAULT_SERVER


def get_namespace() -> str:
    return get_value("namespace") or DEFAULT_NAMESPACE


def get_token() -> Optional[str]:
    return get_value("token")


def get_timeout() -> float:
    value = get_value("timeout")
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid timeout {value!r}, using {DEFAULT_TIMEOUT}")
        return DEFAULT_TIMEOUT
