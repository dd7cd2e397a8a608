"""Executor interfaces following Black Box Design principles."""
from typing import Protocol


class TabRunner(Protocol):
    """Protocol for tabcmd runners - allows swappable implementations."""

    def run(self, action: str, *args: str) -> str:
        """
        Run a tabcmd action.

        Args:
            action: tabcmd action name (login, logout, refreshextracts)
            *args: Action arguments, in order

        Returns:
            Standard output of the command

        Raises:
            TabsessionError: With the command's standard error as output
        """
        ...
