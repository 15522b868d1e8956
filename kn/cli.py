"""Main CLI entry point."""

import click

from . import __version__
from .commands.config import config_cmd
from .commands.service import service_cmd
from .log import setup_logging
from .params import KnParams

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="kn")
@click.option("-s", "--server", envvar="KN_SERVER", help="API server URL")
@click.option("-t", "--token", envvar="KN_TOKEN", help="Auth token")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, server: str, token: str, verbose: bool):
    """kn - manage Knative serving resources.

    \b
    Quick start:
      kn config set server http://localhost:8080
      kn service describe my-service
      kn service describe my-service -n production -o json

    \b
    Environment variables:
      KN_SERVER    - API server URL
      KN_NAMESPACE - Default namespace
      KN_TOKEN     - Auth token
      KN_TIMEOUT   - Request timeout in seconds
    """
    if verbose:
        setup_logging(verbose=True)
    params = ctx.ensure_object(KnParams)
    params.initialize(server=server, token=token)


# Register commands
cli.add_command(service_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    setup_logging()
    cli(obj=KnParams())


if __name__ == "__main__":
    main()
