"""Core app services for settings and logging."""

from .config import AppConfig, config_path, load_config, save_config
from .logging_setup import configure_logging, get_logger, install_crash_hooks

__all__ = [
    "AppConfig",
    "config_path",
    "configure_logging",
    "get_logger",
    "install_crash_hooks",
    "load_config",
    "save_config",
]
