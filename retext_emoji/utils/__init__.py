"""
Общие утилиты: конфигурация, исключения, логирование
"""

from .config import Config, EmojiOptions, get_config, reload_config
from .exceptions import (
    RetextEmojiError,
    ConfigurationError,
    MissingConfigurationError,
    IllegalInvocationError,
    InvalidConfigValueError,
    DatasetError,
)
from .logging_config import setup_logging, setup_logging_from_config, get_module_logger

__all__ = [
    "Config",
    "EmojiOptions",
    "get_config",
    "reload_config",
    "RetextEmojiError",
    "ConfigurationError",
    "MissingConfigurationError",
    "IllegalInvocationError",
    "InvalidConfigValueError",
    "DatasetError",
    "setup_logging",
    "setup_logging_from_config",
    "get_module_logger",
]
