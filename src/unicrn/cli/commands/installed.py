"""Installed command for listing entries present in the project."""

import click

from unicrn.cli.output import machine_output, user_output
from unicrn.core.catalog_ops import list_installed
from unicrn.core.config import load_config
from unicrn.core.context import UnicrnContext


@click.command("installed")
@click.pass_obj
def installed_cmd(ctx: UnicrnContext) -> None:
    """List components and hooks whose files are all present.

    Prints one name per line on stdout, so the output can be piped back
    into `unicrn add` to refresh everything.
    """
    config = load_config(ctx.cwd)
    entries = list_installed(ctx, config)
    if not entries:
        user_output("No components installed")
        return

    for entry in entries:
        machine_output(entry.key)
