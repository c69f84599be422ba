# aclio_coach/config.py
# Description: Configuration management for the aclio_coach application.
#
# Imports
import copy
import os
import sys
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib
from pathlib import Path
from typing import Dict, Any, Optional
#
# Third-Party Imports
import toml
from loguru import logger
#
#######################################################################################################################
#
# Functions:

# --- Path to the user's configuration file ---
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "aclio_coach" / "config.toml"

# --- Default data location for the JSON storage backend ---
DEFAULT_STORAGE_PATH = Path.home() / ".local" / "share" / "aclio_coach" / "storage.json"

# Built-in defaults; the user file is deep-merged on top of these.
CONFIG_TOML_CONTENT = """
# Configuration for aclio_coach
[api]
base_url = "https://aclio-production.up.railway.app/api"
# Seconds before a chat request is abandoned
timeout = 60.0
# Number of previous turns sent along with a new message
history_limit = 4

[logging]
log_level = "INFO"
# Leave empty to log to stderr only
log_file = ""

[general]
# Seconds the loading screen is shown before the first real screen
loading_delay = 0.5
storage_path = ""
"""

DEFAULT_CONFIG_FROM_TOML: Dict[str, Any] = tomllib.loads(CONFIG_TOML_CONTENT)

# Environment variables that override individual settings: (section, key) -> env var
ENV_OVERRIDES = {
    ("api", "base_url"): "ACLIO_API_BASE_URL",
    ("logging", "log_level"): "ACLIO_LOG_LEVEL",
}

_SETTINGS_CACHE: Optional[Dict[str, Any]] = None


def get_config_path() -> Path:
    """Config file location, honouring ``ACLIO_CONFIG_PATH``."""
    env_path = os.getenv("ACLIO_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH


def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merge ``update`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge_dicts(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _get_typed_value(data_dict: Dict, key: str, default: Any, target_type: type = str) -> Any:
    """Fetch ``key`` from ``data_dict`` and coerce it, falling back to ``default``."""
    value = data_dict.get(key, default)
    if value is None:
        return default
    try:
        if target_type is bool and isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes", "on")
        return target_type(value)
    except (ValueError, TypeError):
        logger.warning(f"Could not convert config value '{key}'={value!r} to {target_type.__name__}. Using default: {default!r}")
        return default


def load_cli_config_and_ensure_existence(force_reload: bool = False) -> Dict[str, Any]:
    """
    Load the user's TOML config, writing the defaults to disk first if the
    file does not exist yet.
    """
    config_path = get_config_path()
    if not config_path.exists():
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                toml.dump(DEFAULT_CONFIG_FROM_TOML, f)
            logger.info(f"Created default configuration file at: {config_path}")
        except OSError as e:
            logger.error(f"Could not create default config file at {config_path}: {e}")
    return load_settings(force_reload=force_reload)


def load_settings(force_reload: bool = False) -> Dict[str, Any]:
    """
    Load the effective settings: built-in defaults, merged with the user's
    TOML file, then environment overrides. Cached after the first call.
    """
    global _SETTINGS_CACHE
    if _SETTINGS_CACHE is not None and not force_reload:
        return _SETTINGS_CACHE

    config_path = get_config_path()
    user_config_data: Dict[str, Any] = {}
    logger.debug(f"Attempting to load user TOML config from: {config_path}")
    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                user_config_data = tomllib.load(f)
            logger.info(f"Successfully loaded user TOML config from: {config_path}")
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Error decoding TOML config file {config_path}: {e}. Using defaults.")
        except OSError as e:
            logger.error(f"Could not read TOML config file {config_path}: {e}. Using defaults.")
    else:
        logger.debug(f"No user config at {config_path}; using built-in defaults.")

    settings = deep_merge_dicts(DEFAULT_CONFIG_FROM_TOML, user_config_data)

    for (section, key), env_var in ENV_OVERRIDES.items():
        env_value = os.getenv(env_var)
        if env_value:
            settings.setdefault(section, {})[key] = env_value
            logger.debug(f"Config [{section}].{key} overridden by ${env_var}")

    _SETTINGS_CACHE = settings
    return settings


def get_cli_setting(section: str, key: str, default: Any = None) -> Any:
    """Read a single setting from the effective configuration."""
    section_data = load_settings().get(section, {})
    if not isinstance(section_data, dict):
        return default
    return section_data.get(key, default)


def get_api_settings() -> Dict[str, Any]:
    api_section = load_settings().get("api", {})
    return {
        "base_url": str(api_section.get("base_url", DEFAULT_CONFIG_FROM_TOML["api"]["base_url"])).rstrip("/"),
        "timeout": _get_typed_value(api_section, "timeout", 60.0, float),
        "history_limit": _get_typed_value(api_section, "history_limit", 4, int),
    }


def get_storage_path() -> Path:
    configured = get_cli_setting("general", "storage_path", "")
    if configured:
        return Path(configured).expanduser()
    return DEFAULT_STORAGE_PATH


def reset_settings_cache() -> None:
    """Forget cached settings; the next read goes back to disk."""
    global _SETTINGS_CACHE
    _SETTINGS_CACHE = None

#
# End of config.py
#######################################################################################################################
