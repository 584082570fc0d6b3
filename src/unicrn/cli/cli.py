import logging
import os

import click

from unicrn import __version__
from unicrn.cli.commands.add import add_cmd
from unicrn.cli.commands.init import init_cmd
from unicrn.cli.commands.installed import installed_cmd
from unicrn.cli.commands.list_cmd import list_cmd
from unicrn.cli.commands.remove import remove_cmd
from unicrn.cli.commands.theme import theme_cmd, themes_cmd
from unicrn.cli.error_boundary import cli_error_boundary
from unicrn.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_LOG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"

TRUTHY_ENV_VALUES = frozenset({"1", "true", "yes", "on"})


def env_flag_enabled(name: str) -> bool:
    """Return True only for an explicit truthy value (1, true, yes, on)."""
    return os.getenv(name, "").strip().lower() in TRUTHY_ENV_VALUES


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Log source resolution and file writes")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """UNICRN CLI - Unistyles + Components + React Native."""
    debug = debug or env_flag_enabled("UNICRN_DEBUG")
    if debug:
        logging.basicConfig(level=logging.DEBUG, format=DEBUG_LOG_FORMAT)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)


cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(remove_cmd)
cli.add_command(remove_cmd, name="rm")  # alias
cli.add_command(list_cmd)
cli.add_command(installed_cmd)
cli.add_command(theme_cmd)
cli.add_command(themes_cmd)


def main() -> None:
    """CLI entry point used by the `unicrn` console script."""
    cli_error_boundary(cli)()


if __name__ == "__main__":
    main()
