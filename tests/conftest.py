"""
Shared pytest fixtures for tabsession tests.

This module provides common fixtures including:
- TabcmdMocker: Mock tabcmd subprocess calls with canned responses
- FakeRunner: In-memory TabRunner recording requested actions
"""

import os
import subprocess
import sys
from dataclasses import dataclass
from typing import List, Optional, Pattern, Union
from unittest.mock import MagicMock, patch

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tabsession.exceptions import CommandFailedError


# =============================================================================
# tabcmd Mocking Infrastructure
# =============================================================================

@dataclass
class TabcmdResponse:
    """Represents a mocked tabcmd command response."""
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0

    def to_completed_process(self) -> MagicMock:
        """Convert to a subprocess.CompletedProcess-like mock."""
        result = MagicMock()
        result.stdout = self.stdout
        result.stderr = self.stderr
        result.returncode = self.returncode
        return result


@dataclass
class TabcmdCall:
    """Record of a tabcmd call made during testing."""
    command: List[str]
    timeout: Optional[float]
    matched_pattern: Optional[str] = None


class TabcmdMocker:
    """
    Mock tabcmd subprocess calls with pattern-matched responses.

    Usage:
        def test_login(tabcmd_mocker):
            tabcmd_mocker.register("login", TabcmdResponse(stdout="ok"))
            Tabcmd().run("login", "-s", "https://x")
            assert tabcmd_mocker.was_called_with("login -s https://x")
    """

    def __init__(self):
        self._responses: List[tuple] = []
        self._call_history: List[TabcmdCall] = []
        self._default_response = TabcmdResponse(
            stderr="Error: mock not configured for this command",
            returncode=1
        )

    def register(
        self,
        pattern: Union[str, Pattern],
        response: Union[TabcmdResponse, BaseException],
    ) -> "TabcmdMocker":
        """
        Register a response (or an exception to raise) for matching commands.

        Args:
            pattern: String (substring match) or regex pattern
            response: TabcmdResponse to return, or exception to raise

        Returns:
            self for chaining
        """
        self._responses.append((pattern, response))
        return self

    def mock_run(
        self,
        cmd: List[str],
        capture_output: bool = True,
        text: bool = True,
        timeout: Optional[float] = None,
        **kwargs
    ) -> MagicMock:
        """Mock implementation of subprocess.run, used as a side_effect."""
        args = " ".join(cmd[1:])
        matched_pattern = None
        response = self._default_response

        for pattern, resp in self._responses:
            if isinstance(pattern, str):
                if pattern in args:
                    matched_pattern = pattern
                    response = resp
                    break
            elif pattern.search(args):
                matched_pattern = pattern.pattern
                response = resp
                break

        self._call_history.append(
            TabcmdCall(command=list(cmd), timeout=timeout, matched_pattern=matched_pattern)
        )

        if isinstance(response, BaseException):
            raise response
        return response.to_completed_process()

    @property
    def calls(self) -> List[TabcmdCall]:
        """Get all tabcmd calls made during the test."""
        return self._call_history

    @property
    def call_count(self) -> int:
        return len(self._call_history)

    def was_called_with(self, pattern: str) -> bool:
        """Check if any call's arguments contained the given pattern."""
        return any(pattern in " ".join(call.command[1:]) for call in self._call_history)


@pytest.fixture
def tabcmd_mocker():
    """Fixture that provides a TabcmdMocker with subprocess.run patched."""
    mocker = TabcmdMocker()
    with patch("subprocess.run", side_effect=mocker.mock_run):
        yield mocker


# =============================================================================
# Runner Test Double
# =============================================================================

class FakeRunner:
    """
    TabRunner used for session tests.

    Every call is appended to ``requested`` (action followed by its args).
    Returns ``return_out`` or, when unset, an asterisk so the number of
    executions can be counted from the accumulated output.
    """

    def __init__(self, return_out: str = "", fail: bool = False, fail_out: str = ""):
        self.requested: List[str] = []
        self.calls = 0
        self.return_out = return_out
        self.fail = fail
        self.fail_out = fail_out

    def run(self, action: str, *args: str) -> str:
        self.requested.append(action)
        self.requested.extend(args)
        self.calls += 1

        out = self.return_out or "*"
        if self.fail:
            raise CommandFailedError(f"tabcmd {action} failed", output=self.fail_out or out, returncode=1)
        return out


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def failing_runner():
    return FakeRunner(fail=True)


# =============================================================================
# Test Markers Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "tabcmd_mock: Tests using mocked tabcmd subprocess calls"
    )
