"""Remove command for deleting components and hooks from the project."""

import click

from unicrn.cli.output import display_path, failure, success, user_output
from unicrn.core.catalog_ops import remove_entry
from unicrn.core.config import load_config
from unicrn.core.context import UnicrnContext
from unicrn.core.errors import EntryNotFoundError


@click.command("remove")
@click.argument("names", nargs=-1, required=True)
@click.pass_obj
def remove_cmd(ctx: UnicrnContext, names: tuple[str, ...]) -> None:
    """Remove components or hooks from your project.

    Deletes the entry's files if present and regenerates the affected index
    files. Files that are already gone are not an error.

    Examples:

        unicrn remove badge
    """
    config = load_config(ctx.cwd)

    failed = False
    for name in names:
        try:
            result = remove_entry(ctx, config, name)
        except EntryNotFoundError as e:
            user_output(failure(f'{e.kind_label} "{name}" not found.'))
            user_output(f"Available components: {', '.join(e.available)}")
            failed = True
            continue

        deleted = [removed for removed in result.files if removed.existed and not removed.error]
        for removed in result.files:
            if removed.error is not None:
                user_output(failure(removed.error))
                failed = True

        if not deleted and result.succeeded:
            user_output(f"{result.entry.name} was not installed; index files resynced")
            continue

        user_output(success(f"Removed {result.entry.name}"))
        for removed in deleted:
            user_output(f"  deleted {display_path(removed.destination, ctx.cwd)}")

    if failed:
        raise SystemExit(1)
