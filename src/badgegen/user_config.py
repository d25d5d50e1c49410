"""User-level configuration for badge defaults.

Reads from ~/.config/badgegen/config.yaml and provides defaults that are
applied when a CLI option or MCP argument is left unset.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from badgegen.models import BadgeUrlStrategy

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "badgegen"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

# Expected value types for known keys
_TYPED_FIELDS: dict[str, type] = {
    "color": str,
    "is_large": bool,
    "logo_color": str,
    "only_query_params": bool,
}


def get_config_path() -> Path:
    """Return the path to the user config file."""
    return CONFIG_FILE


def load_user_config() -> dict[str, Any]:
    """Load user configuration from disk.

    Returns an empty dict if the file doesn't exist or is invalid.
    """
    config_path = get_config_path()
    if not config_path.exists():
        return {}

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except Exception as e:
        logger.warning(f"Failed to load user config from {config_path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"User config is not a mapping: {config_path}")
        return {}

    validated: dict[str, Any] = {}
    for key, value in data.items():
        if value is None:
            continue
        if key == "strategy":
            try:
                strategy = BadgeUrlStrategy(value)
            except ValueError:
                valid = [s.value for s in BadgeUrlStrategy]
                logger.warning(
                    f"Invalid value '{value}' for 'strategy' in user config. Valid: {valid}"
                )
                continue
            validated.setdefault("only_query_params", strategy == BadgeUrlStrategy.PARAMS)
            continue
        expected = _TYPED_FIELDS.get(key)
        if expected is not None and not isinstance(value, expected):
            logger.warning(
                f"Invalid value '{value}' for '{key}' in user config. "
                f"Expected {expected.__name__}"
            )
            continue
        validated[key] = value

    return validated


def apply_user_defaults(options: dict[str, Any]) -> dict[str, Any]:
    """Fill unset badge options from the user config.

    Only keys whose value is ``None`` are filled; explicit values win.
    """
    user_cfg = load_user_config()
    if not user_cfg:
        return options

    result = options.copy()
    for key in _TYPED_FIELDS:
        if result.get(key) is None and key in user_cfg:
            result[key] = user_cfg[key]

    return result


def save_user_config(config: dict[str, Any]) -> Path:
    """Save configuration to the user config file.

    Returns the path written to.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)
    return config_path


def get_default_config_template() -> dict[str, Any]:
    """Return an example config for scaffolding."""
    return {
        "color": "blue",
        "is_large": False,
        "logo_color": "white",
        "strategy": "dash",
    }
