"""Add command for copying components and hooks into the project."""

import click

from unicrn.cli.ensure import Ensure
from unicrn.cli.output import display_path, failure, success, user_output, warning
from unicrn.core.catalog_ops import AddResult, add_entry, is_project_initialized
from unicrn.core.config import load_config
from unicrn.core.context import UnicrnContext
from unicrn.core.errors import EntryNotFoundError
from unicrn.core.sources import describe_source


@click.command("add")
@click.argument("names", nargs=-1, required=True)
@click.pass_obj
def add_cmd(ctx: UnicrnContext, names: tuple[str, ...]) -> None:
    """Add components or hooks to your project.

    Each name is processed independently; a failure on one does not stop the
    rest. Re-adding an entry overwrites its files, including local edits.

    Examples:

        unicrn add button

        unicrn add card input usedisclose
    """
    config = load_config(ctx.cwd)
    Ensure.invariant(
        is_project_initialized(ctx.cwd, config),
        "Project not initialized. Run 'unicrn init' first.",
    )

    failed = False
    for name in names:
        try:
            result = add_entry(ctx, config, name)
        except EntryNotFoundError as e:
            user_output(failure(f'{e.kind_label} "{name}" not found.'))
            user_output(f"Available components: {', '.join(e.available)}")
            failed = True
            continue

        _report(ctx, result)
        if not result.succeeded:
            failed = True

    if failed:
        raise SystemExit(1)


def _report(ctx: UnicrnContext, result: AddResult) -> None:
    entry = result.entry
    user_output(f"📦 Adding {entry.name}...")

    for outcome in result.files:
        target = display_path(outcome.destination, ctx.cwd)
        if outcome.ok and outcome.source is not None:
            user_output(f"  {target} ← {describe_source(outcome.source)}")
        else:
            user_output(warning(f"Could not obtain {outcome.registry_path}"))
            user_output(f"   {outcome.error}")

    if result.succeeded:
        user_output(success(f"Added {entry.name}"))
    elif any(outcome.ok for outcome in result.files):
        user_output(warning(f"{entry.name} partially added; copy the missing files manually"))
    else:
        user_output(warning(f"{entry.name} files need manual copying"))

    if entry.dependencies:
        user_output(f"📋 Dependencies needed: {', '.join(entry.dependencies)}")
        user_output(f"💡 Run: npm install {' '.join(entry.dependencies)}")
