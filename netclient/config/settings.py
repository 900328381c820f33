"""
Configuration management for NetClient.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax.

Example ``~/.netclient/config.yaml``::

    base_url: ${API_BASE_URL:https://postman-echo.com}
    timeout: 15
    default_headers:
      User-Agent: my-app/1.0
    monitor:
      enabled: true
      probe_host: 1.1.1.1
      probe_port: 53
      interval: 10
    logging:
      level: INFO
      json_format: false
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from netclient.exceptions import InvalidConfigurationError
from netclient.logging_config import get_logger

logger = get_logger(__name__)

CONFIG_ENV_VAR = "NETCLIENT_CONFIG"
DEFAULT_CONFIG_PATH = "~/.netclient/config.yaml"


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}

    Args:
        value: Configuration value (string, dict, list, or other)

    Returns:
        Value with environment variables expanded

    Examples:
        "${API_BASE_URL}" -> value of API_BASE_URL env var
        "${API_BASE_URL:https://localhost}" -> value of API_BASE_URL or the default
    """
    if isinstance(value, str):
        # Pattern matches ${VAR} or ${VAR:default}
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


@dataclass
class MonitorSettings:
    """Reachability monitor configuration."""
    enabled: bool = True
    probe_host: str = "1.1.1.1"
    probe_port: int = 53
    interval: float = 10.0
    timeout: float = 3.0


@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: str = "INFO"
    file: Optional[str] = None
    json_format: bool = True


@dataclass
class ClientSettings:
    """Top-level NetClient configuration."""
    base_url: Optional[str] = None
    timeout: float = 30.0
    follow_redirects: bool = True
    default_headers: Dict[str, str] = field(default_factory=dict)
    monitor: MonitorSettings = field(default_factory=MonitorSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


def get_default_config_path() -> str:
    """Get the configuration path, honouring ``NETCLIENT_CONFIG``."""
    return os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)


def get_default_config() -> ClientSettings:
    """Get default configuration."""
    return ClientSettings()


def load_config(config_path: Optional[str] = None) -> ClientSettings:
    """
    Load configuration from YAML file with validation.

    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises InvalidConfigurationError.

    Args:
        config_path: Path to configuration file. If None, uses default path.

    Returns:
        ClientSettings: Loaded and validated configuration

    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
    """
    if config_path is None:
        config_path = get_default_config_path()

    config_path = os.path.expanduser(config_path)

    if not os.path.exists(config_path):
        logger.info(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        ) from e
    except OSError as e:
        logger.error(f"Failed to read configuration file '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        ) from e

    if config_data is None:
        logger.info(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()

    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Configuration file '{config_path}' must contain a mapping at the top level"
        )

    config_data = _expand_env_vars(config_data)

    try:
        config = _build_config_from_dict(config_data)
        _validate_config(config)
    except (TypeError, ValueError, InvalidConfigurationError) as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        ) from e

    logger.info(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _build_config_from_dict(config_data: Dict[str, Any]) -> ClientSettings:
    """Build ClientSettings from a parsed, env-expanded mapping."""
    defaults = get_default_config()

    monitor_data = config_data.get("monitor") or {}
    if not isinstance(monitor_data, dict):
        raise InvalidConfigurationError("monitor must be a mapping")
    monitor = MonitorSettings(
        enabled=_as_bool(monitor_data.get("enabled", defaults.monitor.enabled)),
        probe_host=str(monitor_data.get("probe_host", defaults.monitor.probe_host)),
        probe_port=int(monitor_data.get("probe_port", defaults.monitor.probe_port)),
        interval=float(monitor_data.get("interval", defaults.monitor.interval)),
        timeout=float(monitor_data.get("timeout", defaults.monitor.timeout)),
    )

    logging_data = config_data.get("logging") or {}
    if not isinstance(logging_data, dict):
        raise InvalidConfigurationError("logging must be a mapping")
    logging_settings = LoggingSettings(
        level=str(logging_data.get("level", defaults.logging.level)).upper(),
        file=logging_data.get("file", defaults.logging.file),
        json_format=_as_bool(logging_data.get("json_format", defaults.logging.json_format)),
    )

    headers = config_data.get("default_headers") or {}
    if not isinstance(headers, dict):
        raise InvalidConfigurationError("default_headers must be a mapping of strings")

    base_url = config_data.get("base_url") or None

    return ClientSettings(
        base_url=base_url,
        timeout=float(config_data.get("timeout", defaults.timeout)),
        follow_redirects=_as_bool(config_data.get("follow_redirects", defaults.follow_redirects)),
        default_headers={str(k): str(v) for k, v in headers.items()},
        monitor=monitor,
        logging=logging_settings,
    )


def _as_bool(value: Any) -> bool:
    # Env expansion yields strings such as "false".
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _validate_config(config: ClientSettings) -> None:
    """
    Validate configuration values.

    Raises:
        InvalidConfigurationError: If a value is out of range
    """
    if config.timeout <= 0:
        raise InvalidConfigurationError(f"timeout must be positive, got {config.timeout}")

    if config.base_url is not None and not re.match(r"^https?://", config.base_url):
        raise InvalidConfigurationError(
            f"base_url must start with http:// or https://, got '{config.base_url}'"
        )

    if config.monitor.interval <= 0:
        raise InvalidConfigurationError(
            f"monitor.interval must be positive, got {config.monitor.interval}"
        )

    if not 0 < config.monitor.probe_port < 65536:
        raise InvalidConfigurationError(
            f"monitor.probe_port must be a valid TCP port, got {config.monitor.probe_port}"
        )

    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if config.logging.level not in valid_levels:
        raise InvalidConfigurationError(
            f"logging.level must be one of {sorted(valid_levels)}, got '{config.logging.level}'"
        )
