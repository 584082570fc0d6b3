"""List command for showing the component and hook catalog."""

import click
from rich.table import Table

from unicrn.cli.output import stderr_console, user_output
from unicrn.core.context import UnicrnContext
from unicrn.core.registry import CatalogEntry, EntryKind


def _catalog_table(title: str, entries: list[CatalogEntry]) -> Table:
    table = Table(title=title, show_header=True, header_style="bold", title_justify="left")
    table.add_column("name", style="cyan", no_wrap=True)
    table.add_column("description")
    table.add_column("dependencies", style="dim")
    for entry in entries:
        table.add_row(entry.key, entry.description, ", ".join(entry.dependencies) or "-")
    return table


@click.command("list")
@click.pass_obj
def list_cmd(ctx: UnicrnContext) -> None:
    """List all available components and hooks."""
    console = stderr_console()
    console.print(_catalog_table("📦 Components", ctx.registry.of_kind(EntryKind.COMPONENT)))
    console.print()
    console.print(_catalog_table("🪝 Hooks", ctx.registry.of_kind(EntryKind.HOOK)))
    user_output("\n💡 Usage: unicrn add <name>")
