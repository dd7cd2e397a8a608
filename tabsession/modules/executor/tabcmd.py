"""
tabcmd executor.

Runs the external tabcmd program, one process per call, and captures its
output streams. Standard output is returned on success; on failure the
standard error of the program is attached to the raised error.
"""

import logging
import subprocess
from typing import List, Optional, Sequence

from tabsession.config.provider import (
    DEFAULT_EXECUTABLE,
    ExecutorConfig,
    effective_timeout,
)
from tabsession.exceptions import (
    CommandFailedError,
    CommandTimeoutError,
    ProcessLaunchError,
)

logger = logging.getLogger(__name__)

# Flags whose following value must never be logged
SECRET_FLAGS = frozenset({"-p", "--password"})


def _redact(cmd: Sequence[str]) -> List[str]:
    """Return a copy of cmd with secret flag values masked."""
    redacted = list(cmd)
    for i, part in enumerate(redacted[:-1]):
        if part in SECRET_FLAGS:
            redacted[i + 1] = "********"
    return redacted


def _as_text(stream) -> str:
    """Normalize a captured stream to str (TimeoutExpired may hold bytes)."""
    if stream is None:
        return ""
    if isinstance(stream, bytes):
        return stream.decode("utf-8", errors="replace")
    return stream


class Tabcmd:
    """
    Wrapper around the tabcmd executable.

    Satisfies the TabRunner protocol. Not thread safe in the sense that the
    tabcmd program itself keeps a single session per user profile.
    """

    def __init__(self, timeout: Optional[float] = None, executable: str = DEFAULT_EXECUTABLE):
        """
        Initialize the executor.

        Args:
            timeout: Command timeout in seconds. 0 or None selects the default (15s).
            executable: Name or path of the tabcmd executable
        """
        self.timeout = effective_timeout(timeout)
        self.executable = executable or DEFAULT_EXECUTABLE

    @classmethod
    def from_config(cls, config: ExecutorConfig) -> "Tabcmd":
        """Create an executor from an ExecutorConfig."""
        return cls(timeout=config.timeout, executable=config.executable)

    def run(self, action: str, *args: str) -> str:
        """
        Execute tabcmd with the given action and args.

        Args:
            action: tabcmd action name
            *args: Action arguments

        Returns:
            Standard output of the program

        Raises:
            CommandFailedError: Non-zero exit, output is the program's stderr
            CommandTimeoutError: Program killed after the timeout elapsed
            ProcessLaunchError: Program could not be started
        """
        cmd = [self.executable, action, *args]

        logger.debug(f"Running: {' '.join(_redact(cmd))}")

        try:
            process = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            logger.warning(f"tabcmd {action} timed out after {self.timeout}s")
            raise CommandTimeoutError(
                f"tabcmd {action} timed out after {self.timeout}s",
                output=_as_text(e.stderr),
            ) from e
        except OSError as e:
            logger.error(f"Failed to start {self.executable}: {e}")
            raise ProcessLaunchError(f"failed to start {self.executable}: {e}") from e

        if process.returncode != 0:
            logger.warning(f"tabcmd {action} exited with status {process.returncode}")
            raise CommandFailedError(
                f"tabcmd {action} exited with status {process.returncode}",
                output=_as_text(process.stderr),
                returncode=process.returncode,
            )

        return _as_text(process.stdout)
