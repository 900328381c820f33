"""
Configuration management for NetClient.

Handles loading and validation of configuration files.
"""

from netclient.config.settings import (
    ClientSettings,
    LoggingSettings,
    MonitorSettings,
    get_default_config,
    get_default_config_path,
    load_config,
)

__all__ = [
    "ClientSettings",
    "LoggingSettings",
    "MonitorSettings",
    "get_default_config",
    "get_default_config_path",
    "load_config",
]
