"""Maintenance of the project's root index.ts (the Expo entry point).

unistyles.ts must be imported right after expo-router's entry so themes are
registered before any screen renders.
"""

from enum import Enum
from pathlib import Path

ENTRY_FILENAME = "index.ts"
EXPO_ROUTER_IMPORT = "import 'expo-router/entry';"
UNISTYLES_IMPORT = "import './unistyles.ts';"


class EntryPointStatus(Enum):
    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


def with_required_imports(content: str) -> str:
    """Return content with both required imports present, others preserved."""
    updated = content
    if EXPO_ROUTER_IMPORT not in updated:
        updated = f"{EXPO_ROUTER_IMPORT}\n{updated}"

    if UNISTYLES_IMPORT not in updated:
        updated = updated.replace(
            EXPO_ROUTER_IMPORT, f"{EXPO_ROUTER_IMPORT}\n{UNISTYLES_IMPORT}", 1
        )
    return updated


def ensure_entry_point(project_dir: Path) -> EntryPointStatus:
    """Create or patch the root index.ts so it loads expo-router and unistyles.

    Raises:
        OSError: If the file cannot be read or written
    """
    entry_path = project_dir / ENTRY_FILENAME
    if not entry_path.exists():
        entry_path.write_text(f"{EXPO_ROUTER_IMPORT}\n{UNISTYLES_IMPORT}\n", encoding="utf-8")
        return EntryPointStatus.CREATED

    existing = entry_path.read_text(encoding="utf-8")
    updated = with_required_imports(existing)
    if updated == existing:
        return EntryPointStatus.UNCHANGED

    entry_path.write_text(updated, encoding="utf-8")
    return EntryPointStatus.UPDATED
