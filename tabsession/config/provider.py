"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Optional, Protocol

# Name of the tabcmd executable. Must be in the PATH.
DEFAULT_EXECUTABLE = "tabcmd"

# Default command execution timeout in seconds
DEFAULT_COMMAND_TIMEOUT = 15.0


def effective_timeout(timeout: Optional[float]) -> float:
    """Return the timeout to use, falling back to the default for 0/None."""
    if not timeout:
        return DEFAULT_COMMAND_TIMEOUT
    return float(timeout)


@dataclass
class ExecutorConfig:
    """tabcmd executor configuration."""
    timeout: float = DEFAULT_COMMAND_TIMEOUT
    executable: str = DEFAULT_EXECUTABLE

    def __post_init__(self):
        self.timeout = effective_timeout(self.timeout)
        if not self.executable:
            self.executable = DEFAULT_EXECUTABLE


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_executor_config(self) -> ExecutorConfig:
        """Get executor configuration."""
        ...

    def get_logging_level(self) -> str:
        """Get the logging level name."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_executor_config(self) -> ExecutorConfig:
        """Get executor configuration from environment variables."""
        raw_timeout = os.getenv("TABCMD_TIMEOUT", "0").strip() or "0"
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(
                f"TABCMD_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            )
        if timeout < 0:
            raise ValueError(f"TABCMD_TIMEOUT must not be negative, got {raw_timeout!r}")

        return ExecutorConfig(
            timeout=timeout,
            executable=os.getenv("TABCMD_EXECUTABLE", DEFAULT_EXECUTABLE),
        )

    def get_logging_level(self) -> str:
        """Get logging level from environment variables."""
        return os.getenv("LOG_LEVEL", "INFO").upper()
