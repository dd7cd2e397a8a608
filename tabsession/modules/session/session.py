"""
Tableau session management.

A Tableau instance keeps the current connection parameters and delegates
every action to a TabRunner. It holds no lock: concurrent use of one
instance is unsupported, and with the real Tabcmd runner it is certainly
unsafe since tabcmd keeps one session per user profile.
"""

import logging
from typing import List, Optional

from tabsession.config.provider import ExecutorConfig
from tabsession.exceptions import (
    AlreadyLoggedInError,
    EmptyDatasetError,
    NotLoggedInError,
    TabsessionError,
)
from tabsession.modules.executor import Tabcmd, TabRunner

logger = logging.getLogger(__name__)

# tabcmd actions
ACT_LOGIN = "login"
ACT_LOGOUT = "logout"
ACT_REFRESH_EXTRACTS = "refreshextracts"

HTTP = "http://"
HTTPS = "https://"

# Tableau Online pods tried in order by login_online, taken from
# https://onlinehelp.tableau.com/current/pro/desktop/en-us/publish_tableau_online_ip_authorization.htm
ONLINE_SERVERS = (
    "dub01.online.tableau.com",
    "eu-west-1a.online.tableau.com",
    "10ax.online.tableau.com",
    "10ay.online.tableau.com",
    "10az.online.tableau.com",
    "us-east-1.online.tableau.com",
    "us-west-2b.online.tableau.com",
)


def add_https(uri: str) -> str:
    """Return uri with an https:// scheme, replacing http:// if present."""
    if uri.startswith(HTTP):
        return HTTPS + uri[len(HTTP):]
    if not uri.startswith(HTTPS):
        return HTTPS + uri
    return uri


class Tableau:
    """Login state for one Tableau server connection."""

    def __init__(self, runner: TabRunner):
        """
        Initialize a logged out session.

        Args:
            runner: Executor used for every tabcmd action
        """
        self._runner = runner
        self._logged_in = False
        self._user = ""
        self._server = ""

    def __str__(self) -> str:
        return f"Tableau: {self._user}@{self._server}"

    def __enter__(self) -> "Tableau":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.logout()
            return
        # the body's error takes precedence over a failed logout
        try:
            self.logout()
        except TabsessionError as e:
            logger.warning(f"logout after failure also failed: {e}")

    @property
    def logged_in(self) -> bool:
        return self._logged_in

    @property
    def user(self) -> str:
        return self._user

    @property
    def server(self) -> str:
        return self._server

    def login(self, server: str, user: str, password: str) -> str:
        """
        Log in to the given server.

        The server is normalized to an https:// URI. The user and server are
        recorded even when the login fails.

        Returns:
            tabcmd output

        Raises:
            AlreadyLoggedInError: The session is already logged in
            TabsessionError: tabcmd failed, output carries its stderr
        """
        if self._logged_in:
            raise AlreadyLoggedInError()

        self._server = add_https(server)
        self._user = user

        logger.info(f"attempting to log in as {self}")

        out = self._runner.run(ACT_LOGIN, "-s", self._server, "-u", user, "-p", password)
        self._logged_in = True
        return out

    def login_online(self, user: str, password: str) -> str:
        """
        Log in to Tableau Online.

        Tries every server in ONLINE_SERVERS in order until one login
        succeeds. The outputs of all attempts are concatenated.

        Returns:
            Accumulated tabcmd output of all attempts

        Raises:
            TabsessionError: The last error, if every server failed, with
                output set to the accumulated text of all attempts
        """
        outputs: List[str] = []
        last_error: Optional[TabsessionError] = None

        for server in ONLINE_SERVERS:
            try:
                out = self.login(server, user, password)
            except TabsessionError as e:
                outputs.append(e.output)
                last_error = e
            else:
                outputs.append(out)
                return "".join(outputs)

        last_error.output = "".join(outputs)
        raise last_error

    def logout(self) -> str:
        """
        Log out of the current server.

        Does nothing when not logged in. On failure the session stays
        logged in.

        Returns:
            tabcmd output, empty when not logged in
        """
        logger.info("logout")
        if not self._logged_in:
            return ""

        out = self._runner.run(ACT_LOGOUT)
        self._logged_in = False
        return out

    def refresh_extracts(self, *datasets: str) -> str:
        """
        Launch an extract refresh of one or more datasources.

        Datasources are refreshed in order; the first failure stops the
        remaining refreshes.

        Returns:
            Accumulated tabcmd output

        Raises:
            NotLoggedInError: The session is not logged in
            EmptyDatasetError: No datasources were given
            TabsessionError: tabcmd failed, output carries everything
                accumulated up to and including the failing refresh
        """
        if not self._logged_in:
            raise NotLoggedInError()
        if not datasets:
            raise EmptyDatasetError()

        outputs: List[str] = []
        for ds in datasets:
            logger.info(f"starting refresh of dataset {ds}")
            try:
                outputs.append(self._runner.run(ACT_REFRESH_EXTRACTS, "--datasource", ds))
            except TabsessionError as e:
                outputs.append(e.output)
                e.output = "".join(outputs)
                raise
        return "".join(outputs)


def create_tableau(config: Optional[ExecutorConfig] = None) -> Tableau:
    """Create a session backed by the real tabcmd executor."""
    config = config or ExecutorConfig()
    return Tableau(Tabcmd.from_config(config))
