import logging
import sys

import click
from dotenv import load_dotenv

from tabsession.config import ConfigProvider, EnvConfigProvider, ExecutorConfig
from tabsession.exceptions import TabsessionError
from tabsession.logging_config import configure_logging
from tabsession.modules.session import ONLINE_SERVERS, create_tableau

logger = logging.getLogger("tabsession.cli")


@click.group()
def main():
    """Drive tabcmd to manage Tableau sessions and extract refreshes."""
    load_dotenv()
    configure_logging(EnvConfigProvider().get_logging_level())


@main.command()
@click.argument("datasources", nargs=-1, required=True)
@click.option("--server", "server", envvar="TABLEAU_SERVER", default=None,
              help="Tableau server; Tableau Online pods are tried when omitted.")
@click.option("--user", "user", envvar="TABLEAU_USER", required=True)
@click.option("--password", "password", envvar="TABLEAU_PASSWORD", required=True)
@click.option("--timeout", "timeout", type=click.FloatRange(min=0), default=None,
              help="tabcmd timeout in seconds (default: TABCMD_TIMEOUT or 15).")
def refresh(datasources, server, user, password, timeout):
    """Log in, refresh DATASOURCES in order, and log out."""
    provider: ConfigProvider = EnvConfigProvider()
    try:
        config = provider.get_executor_config()
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="TABCMD_TIMEOUT")
    if timeout is not None:
        config = ExecutorConfig(timeout=timeout, executable=config.executable)

    tableau = create_tableau(config)
    try:
        with tableau:
            if server:
                click.echo(tableau.login(server, user, password), nl=False)
            else:
                click.echo(tableau.login_online(user, password), nl=False)
            click.echo(tableau.refresh_extracts(*datasources), nl=False)
    except TabsessionError as e:
        logger.error(f"{tableau}: {e}")
        if e.output:
            click.echo(e.output, err=True, nl=False)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
def servers():
    """List the Tableau Online servers tried when no server is given."""
    for server in ONLINE_SERVERS:
        click.echo(server)


if __name__ == "__main__":
    main()
