"""Theme commands: apply a theme and list available themes."""

import click
from rich.table import Table

from unicrn.cli.output import display_path, failure, stderr_console, success, user_output
from unicrn.core.catalog_ops import apply_theme
from unicrn.core.config import load_config
from unicrn.core.context import UnicrnContext
from unicrn.core.errors import EntryNotFoundError


@click.command("theme")
@click.argument("name")
@click.pass_obj
def theme_cmd(ctx: UnicrnContext, name: str) -> None:
    """Set the active theme by refreshing unistyles.ts.

    The theme file is always fetched fresh and overwrites the local copy.
    """
    config = load_config(ctx.cwd)
    try:
        result = apply_theme(ctx, config, name)
    except EntryNotFoundError as e:
        user_output(failure(f'{e.kind_label} "{name}" not found.'))
        user_output(f"Available themes: {', '.join(e.available)}")
        raise SystemExit(1) from None

    if not result.file.ok:
        user_output(failure("Failed to set theme"))
        user_output(f"   {result.file.error}")
        raise SystemExit(1)

    user_output(success(f'Set theme to "{result.theme.name}"'))
    user_output(f"📁 Updated: {display_path(result.file.destination, ctx.cwd)}")


@click.command("themes")
@click.pass_obj
def themes_cmd(ctx: UnicrnContext) -> None:
    """List all available themes."""
    table = Table(title="🎨 Themes", show_header=True, header_style="bold", title_justify="left")
    table.add_column("name", style="cyan", no_wrap=True)
    table.add_column("display")
    table.add_column("primary")
    table.add_column("background")

    for key, theme in ctx.themes.items():
        primary = theme.colors.get("primary", "-")
        background = theme.colors.get("background", "-")
        table.add_row(key, theme.name, primary, background)

    stderr_console().print(table)
    user_output("\n💡 Usage: unicrn theme <theme-name>")
