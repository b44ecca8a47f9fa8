"""Provides functions for loading and accessing configuration settings.

Supports loading from .env files, environment variables, and a dedicated
configuration file (``~/.anycache/config.yaml``). Recognised keys:

    cache.root     Directory holding all cache namespaces (platform cache dir if unset)
    logging.level  Log level name, e.g. DEBUG or INFO
    logging.file   Optional path to a log file
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import dotenv_values

logger = logging.getLogger(__name__)

# --- Configuration Constants ---
DEFAULT_CONFIG_DIR = Path.home() / ".anycache"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"
ENV_FILE_NAME = ".env"
ENV_PREFIX = "ANYCACHE_"

# --- Global Configuration Store ---
_config: Dict[str, Any] = {}
_dotenv_config: Dict[str, str] = {}  # ANYCACHE_* values read from .env
_overrides: Dict[str, Any] = {}  # Values set at runtime via set_config
_test_config: Dict[str, Any] = {}  # For testing purposes
_loaded = False

def load_configuration(config_file: Optional[Path] = None, env_file: Optional[Path] = None) -> None:
    """Loads configuration from environment, .env file, and YAML file.

    Priority order (highest to lowest):
    1. Environment Variables
    2. .env file
    3. YAML configuration file
    4. Default values passed to get_config

    Args:
        config_file: Path to the YAML configuration file (DEFAULT_CONFIG_FILE if None).
        env_file: Path to the .env file (searches upwards from cwd if None).

    Only ANYCACHE_* variables are taken from the .env file, and they are kept
    in this module rather than exported into os.environ.
    """
    global _config, _dotenv_config, _loaded
    if _loaded:
        logger.debug("Configuration already loaded.")
        return

    _config = {}
    _dotenv_config = {}
    config_file = config_file or DEFAULT_CONFIG_FILE

    # 1. Load from YAML file (Lowest priority)
    if config_file.exists():
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                yaml_config = yaml.safe_load(f)
            if isinstance(yaml_config, dict):
                _config.update(yaml_config)
                logger.info(f"Loaded configuration from YAML: {config_file}")
            elif yaml_config is not None:
                logger.warning(f"YAML config file {config_file} did not contain a dictionary.")
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load or parse YAML config {config_file}: {e}")
    else:
        logger.debug(f"YAML config file not found: {config_file}")

    # 2. Load from .env file (Medium priority)
    dotenv_path = env_file or find_dotenv_path()
    if dotenv_path:
        _dotenv_config = {
            k: v for k, v in dotenv_values(dotenv_path).items()
            if k.startswith(ENV_PREFIX) and v is not None
        }
        logger.info(f"Loaded {len(_dotenv_config)} settings from: {dotenv_path}")
    else:
        logger.debug("Skipping .env file loading (no file found).")

    # 3. Environment Variables (Highest priority) are handled in get_config
    _loaded = True

def reset_configuration() -> None:
    """Forgets loaded configuration so the next access reloads it."""
    global _config, _dotenv_config, _loaded
    _config = {}
    _dotenv_config = {}
    _overrides.clear()
    _loaded = False

def _env_var_name(key: str) -> str:
    return f"{ENV_PREFIX}{key.upper().replace('.', '_')}"

def _coerce(value: str) -> Any:
    """Converts common string forms of booleans and numbers."""
    if value.lower() == 'true':
        return True
    elif value.lower() == 'false':
        return False
    try:
        if '.' in value:
            return float(value)
        return int(value)
    except (ValueError, TypeError):
        return value

def _lookup_yaml(key: str) -> Any:
    """Looks up a dotted key as a flat key first, then through nested mappings."""
    if key in _config:
        return _config[key]
    node: Any = _config
    for part in key.split('.'):
        if not isinstance(node, dict) or part not in node:
            raise KeyError(key)
        node = node[part]
    return node

def get_config(key: str, default: Any = None, coerce: bool = True) -> Any:
    """Get a configuration value by key.

    Priority:
    1. Test configuration (if in testing mode)
    2. Values set via set_config
    3. Environment variable (``ANYCACHE_`` + key upper-cased, dots as underscores)
    4. .env file (same variable name)
    5. YAML config
    6. Default value

    Args:
        key: The configuration key, e.g. ``cache.root``
        default: Default value if the key is not found
        coerce: Convert environment strings like "true" or "3" to bool/number.
            Disable for keys whose value is always text, such as paths.

    Returns:
        The configuration value
    """
    if key in _test_config:
        return _test_config[key]

    if key in _overrides:
        return _overrides[key]

    if not _loaded:
        load_configuration()

    env_key = _env_var_name(key)
    raw = os.environ.get(env_key, _dotenv_config.get(env_key))
    if raw is not None:
        return _coerce(raw) if coerce else raw

    try:
        return _lookup_yaml(key)
    except KeyError:
        logger.debug(f"Config key '{key}' not found in environment or loaded config. Returning default: {default}")
        return default

def set_config(key: str, value: Any) -> None:
    """Sets a configuration value by key for the rest of the process.

    Args:
        key: Configuration key (e.g., 'logging.level')
        value: Value to set
    """
    logger.debug(f"Setting config: {key} = {value}")
    _overrides[key] = value

def find_dotenv_path() -> Optional[Path]:
    """Searches for the .env file upwards from the current directory."""
    cwd = Path.cwd()
    for path in [cwd] + list(cwd.parents):
        env_path = path / ENV_FILE_NAME
        if env_path.is_file():
            return env_path
    return None

# --- Convenience Functions ---

def get_cache_root() -> Optional[Path]:
    """Configured root directory for all cache namespaces, if any."""
    root = get_config('cache.root', coerce=False)
    if root is None or str(root) == '':
        return None
    return Path(str(root)).expanduser()

def get_log_level() -> int:
    """Configured log level, INFO if unset or unknown."""
    level_name = str(get_config('logging.level', 'INFO')).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        logger.warning(f"Unknown log level '{level_name}'. Defaulting to INFO.")
        return logging.INFO
    return level

def get_log_file() -> Optional[str]:
    """Configured log file path, if any."""
    log_file = get_config('logging.file')
    return str(log_file) if log_file else None

def set_config_for_testing(config_dict: Dict[str, Any]) -> None:
    """
    Set configuration values for testing purposes.
    These values will override any existing configuration.

    Args:
        config_dict: Dictionary of configuration values to set
    """
    _test_config.update(config_dict)
    logger.debug(f"Set testing configuration: {config_dict}")

def clear_test_config() -> None:
    """Clear all testing configuration values."""
    _test_config.clear()
    logger.debug("Cleared testing configuration")
