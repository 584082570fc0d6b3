"""Barrel index generation.

An index is derived entirely from the files present in its directory, never
from what was previously written. Regenerating after every add/remove keeps
it exact, and running it twice with no filesystem change yields identical
bytes.
"""

import logging
from pathlib import Path

from unicrn.core.index_kind import IndexKind

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.ts"

COMPONENT_EXPORTS: dict[str, str] = {
    f"{name}.tsx": f"export * from './{name}';"
    for name in (
        "Avatar",
        "Badge",
        "Button",
        "Card",
        "Checkbox",
        "Dialog",
        "Input",
        "OTPInput",
        "Radio",
        "Switch",
        "SwitchThumb",
        "Typography",
    )
}

HOOK_EXPORTS: dict[str, str] = {
    f"{name}.ts": f"export {{ default as {name} }} from './{name}';"
    for name in ("useDisclose",)
}

EXPORT_TABLES: dict[IndexKind, dict[str, str]] = {
    IndexKind.COMPONENTS: COMPONENT_EXPORTS,
    IndexKind.HOOKS: HOOK_EXPORTS,
}

HEADERS: dict[IndexKind, tuple[str, str]] = {
    IndexKind.COMPONENTS: (
        "// UNICRN Component Library",
        "// Components are automatically exported when added via: npx unicrn add <component>",
    ),
    IndexKind.HOOKS: (
        "// UNICRN Hooks",
        "// Hooks are automatically exported when added via: npx unicrn add <hook>",
    ),
}


def exported_files(directory: Path, kind: IndexKind) -> list[str]:
    """Names of files in directory that belong in the index, sorted."""
    if not directory.is_dir():
        return []
    return sorted(
        entry.name
        for entry in directory.iterdir()
        if entry.is_file() and entry.name.endswith(kind.suffix) and entry.name != INDEX_FILENAME
    )


def render_index(filenames: list[str], kind: IndexKind) -> str:
    """Render index content for a directory listing.

    Filenames missing from the export table are skipped without error.
    """
    table = EXPORT_TABLES[kind]
    statements = [table[name] for name in filenames if name in table]
    return "\n".join([*HEADERS[kind], *statements]) + "\n"


def regenerate_index(directory: Path, kind: IndexKind) -> str:
    """Rewrite directory/index.ts to export exactly the mapped files on disk.

    Creates the directory if it does not exist.

    Returns:
        The content written
    """
    content = render_index(exported_files(directory, kind), kind)
    directory.mkdir(parents=True, exist_ok=True)
    index_path = directory / INDEX_FILENAME
    index_path.write_text(content, encoding="utf-8")
    logger.debug("Regenerated %s (%d lines)", index_path, content.count("\n"))
    return content
