"""
Config Module - Black Box Interface

Purpose: Executor and logging configuration
Interface: EnvConfigProvider.get_executor_config(), get_logging_level()
Hidden: Environment parsing, defaults

Can be replaced with any provider implementing ConfigProvider.
"""

from .provider import (
    DEFAULT_COMMAND_TIMEOUT,
    DEFAULT_EXECUTABLE,
    ConfigProvider,
    EnvConfigProvider,
    ExecutorConfig,
)

__all__ = [
    "DEFAULT_COMMAND_TIMEOUT",
    "DEFAULT_EXECUTABLE",
    "ConfigProvider",
    "EnvConfigProvider",
    "ExecutorConfig",
]
