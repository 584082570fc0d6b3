"""Mapping of registry-relative paths onto the consumer project layout."""

from pathlib import Path

from unicrn.core.config import ProjectConfig
from unicrn.core.index_kind import IndexKind

UI_PREFIX = "lib/components/ui/"
HOOKS_PREFIX = "lib/hooks/"

_PREFIX_TO_SUBDIR = {
    UI_PREFIX: IndexKind.COMPONENTS,
    HOOKS_PREFIX: IndexKind.HOOKS,
}


def resolve_destination(registry_path: str, config: ProjectConfig) -> str:
    """Rewrite a registry path to its project-relative destination.

    `lib/components/ui/X` becomes `{componentsFolder}/ui/X` and `lib/hooks/X`
    becomes `{componentsFolder}/hooks/X`. Other paths (unistyles.ts) pass
    through unchanged.

    The folder is not inspected, so a folder of `src/ui` yields
    `src/ui/ui/Button.tsx`.
    """
    for prefix, kind in _PREFIX_TO_SUBDIR.items():
        if registry_path.startswith(prefix):
            rest = registry_path[len(prefix) :]
            return f"{config.components_folder}/{kind.subdir}/{rest}"
    return registry_path


def destination_path(project_dir: Path, registry_path: str, config: ProjectConfig) -> Path:
    return project_dir / resolve_destination(registry_path, config)


def index_kind_for(registry_path: str) -> IndexKind | None:
    """Return the barrel index a registry path feeds, if any."""
    for prefix, kind in _PREFIX_TO_SUBDIR.items():
        if registry_path.startswith(prefix):
            return kind
    return None


def index_directory(project_dir: Path, config: ProjectConfig, kind: IndexKind) -> Path:
    return project_dir / config.components_folder / kind.subdir
