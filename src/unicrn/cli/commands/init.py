"""Init command for setting up unicrn in a React Native project."""

import click

from unicrn.cli.output import display_path, success, user_output, warning
from unicrn.core.catalog_ops import init_project
from unicrn.core.config import normalize_components_folder
from unicrn.core.context import UnicrnContext
from unicrn.core.entry_point import ENTRY_FILENAME, EntryPointStatus


def _validate_folder(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is None:
        return None
    try:
        return normalize_components_folder(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.command("init")
@click.option(
    "--components-folder",
    default=None,
    metavar="DIR",
    callback=_validate_folder,
    help="Project-relative folder for ui/ and hooks/ (default: components)",
)
@click.pass_obj
def init_cmd(ctx: UnicrnContext, components_folder: str | None) -> None:
    """Initialize unicrn in your React Native project.

    Safe to run repeatedly; only missing pieces are created.

    What gets created:
    - unicrn.json: Project configuration (componentsFolder)
    - <folder>/ui/index.ts and <folder>/hooks/index.ts: Barrel exports
    - index.ts: Expo entry point importing unistyles.ts
    - unistyles.ts: Theme configuration
    """
    user_output("🚀 Initializing unicrn in your project...")
    result = init_project(ctx, components_folder)

    for path in result.created:
        suffix = "/" if path.is_dir() else ""
        user_output(f"  Created {display_path(path, ctx.cwd)}{suffix}")

    if result.entry_point == EntryPointStatus.CREATED:
        user_output(f"  Created {ENTRY_FILENAME} entry point")
    elif result.entry_point == EntryPointStatus.UPDATED:
        user_output(f"  Updated {ENTRY_FILENAME} entry point")

    if result.theme_file is not None and not result.theme_file.ok:
        user_output(warning("Could not download unistyles.ts automatically."))
        user_output(f"   {result.theme_file.error}")
        raise SystemExit(1)

    if not result.changed:
        user_output(success("Already initialized; nothing to do"))
        return

    folder = result.config.components_folder
    user_output("")
    user_output(success("Project initialized successfully!"))
    user_output("")
    user_output("📋 Next steps:")
    user_output(
        "1. Install dependencies: "
        "npm install react-native-unistyles react-native-reanimated expo-router"
    )
    user_output("2. Add components: unicrn add button card")
    user_output(f'3. Import in your app: import {{ Button }} from "@/{folder}/ui"')
    user_output(f'4. Make sure your package.json main field points to "{ENTRY_FILENAME}"')
