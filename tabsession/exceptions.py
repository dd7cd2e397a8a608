"""Errors raised by the executor and session modules."""


class TabsessionError(Exception):
    """
    Base error for all tabsession failures.

    Every error carries the textual output collected before the failure,
    so callers can show what tabcmd printed even when an operation fails.
    """

    def __init__(self, message: str, output: str = ""):
        super().__init__(message)
        self.output = output


class AlreadyLoggedInError(TabsessionError):
    """Login attempted on a session that is already logged in."""

    def __init__(self, output: str = ""):
        super().__init__("already logged in", output)


class NotLoggedInError(TabsessionError):
    """Operation requires a logged in session."""

    def __init__(self, output: str = ""):
        super().__init__("not logged in", output)


class EmptyDatasetError(TabsessionError):
    """Extract refresh requested without any datasource names."""

    def __init__(self, output: str = ""):
        super().__init__("empty dataset, nothing to do", output)


class CommandFailedError(TabsessionError):
    """tabcmd exited with a non-zero status."""

    def __init__(self, message: str, output: str = "", returncode: int = -1):
        super().__init__(message, output)
        self.returncode = returncode


class CommandTimeoutError(CommandFailedError):
    """tabcmd did not finish before the configured timeout."""


class ProcessLaunchError(TabsessionError):
    """tabcmd could not be started (not found on PATH, not executable)."""
