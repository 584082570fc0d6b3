"""Catalog operations: add, remove, theme, init and installed.

Every file is handled independently: one failed download never stops its
siblings, and indexes are regenerated afterwards from whatever actually
landed on disk.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from unicrn.core.config import (
    DEFAULT_COMPONENTS_FOLDER,
    ProjectConfig,
    config_path,
    load_config,
    normalize_components_folder,
    save_config,
)
from unicrn.core.context import UnicrnContext
from unicrn.core.entry_point import EntryPointStatus, ensure_entry_point
from unicrn.core.errors import MaterializeError, SourceUnavailableError
from unicrn.core.index_kind import IndexKind
from unicrn.core.index_sync import INDEX_FILENAME, regenerate_index
from unicrn.core.materialize import materialize
from unicrn.core.paths import destination_path, index_directory, index_kind_for
from unicrn.core.registry import THEME_FILE, CatalogEntry, ThemeEntry, require_theme
from unicrn.core.sources import SourceRef, locate_source, remote_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileOutcome:
    """Result of materializing one registry file."""

    registry_path: str
    destination: Path
    source: SourceRef | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class RemovedFile:
    """Result of deleting one registry file from the project."""

    registry_path: str
    destination: Path
    existed: bool
    error: str | None = None


@dataclass(frozen=True)
class AddResult:
    entry: CatalogEntry
    files: list[FileOutcome]
    indexes: list[IndexKind]

    @property
    def succeeded(self) -> bool:
        return all(outcome.ok for outcome in self.files)


@dataclass(frozen=True)
class RemoveResult:
    entry: CatalogEntry
    files: list[RemovedFile]
    indexes: list[IndexKind]

    @property
    def succeeded(self) -> bool:
        return all(removed.error is None for removed in self.files)


@dataclass(frozen=True)
class ThemeResult:
    theme: ThemeEntry
    file: FileOutcome


@dataclass(frozen=True)
class InitResult:
    """What init created or changed.

    Attributes:
        config: Effective project configuration
        created: Paths created by this run, in creation order
        entry_point: What happened to the root index.ts
        theme_file: Outcome for unistyles.ts, or None if it already existed
    """

    config: ProjectConfig
    created: list[Path]
    entry_point: EntryPointStatus
    theme_file: FileOutcome | None

    @property
    def changed(self) -> bool:
        return bool(self.created) or self.entry_point != EntryPointStatus.UNCHANGED

    @property
    def succeeded(self) -> bool:
        return self.theme_file is None or self.theme_file.ok


def materialize_file(ctx: UnicrnContext, registry_path: str, destination: Path) -> FileOutcome:
    """Locate and materialize a single file, capturing failure as an outcome."""
    try:
        source = locate_source(registry_path, ctx.sources)
    except SourceUnavailableError as e:
        return FileOutcome(registry_path, destination, None, _with_remedy(ctx, registry_path, e))

    try:
        materialize(source, destination, ctx.fetcher)
    except MaterializeError as e:
        logger.debug("Materializing %s failed: %s", registry_path, e)
        return FileOutcome(registry_path, destination, source, _with_remedy(ctx, registry_path, e))

    return FileOutcome(registry_path, destination, source)


def _with_remedy(ctx: UnicrnContext, registry_path: str, error: Exception) -> str:
    return f"{error}. Copy it manually from: {remote_url(registry_path, ctx.base_url)}"


def affected_indexes(entry: CatalogEntry) -> list[IndexKind]:
    """Index kinds fed by an entry's files, in first-seen order."""
    kinds: list[IndexKind] = []
    for path in entry.files:
        kind = index_kind_for(path)
        if kind is not None and kind not in kinds:
            kinds.append(kind)
    return kinds


def regenerate_indexes(project_dir: Path, config: ProjectConfig, kinds: list[IndexKind]) -> None:
    for kind in kinds:
        regenerate_index(index_directory(project_dir, config, kind), kind)


def add_entry(ctx: UnicrnContext, config: ProjectConfig, name: str) -> AddResult:
    """Copy or download every file of a component or hook, then resync indexes.

    Existing files are overwritten, including local edits.

    Raises:
        EntryNotFoundError: If name is not a known component or hook
    """
    entry = ctx.registry.require(name)
    outcomes = [
        materialize_file(ctx, path, destination_path(ctx.cwd, path, config))
        for path in entry.files
    ]
    kinds = affected_indexes(entry)
    regenerate_indexes(ctx.cwd, config, kinds)
    return AddResult(entry=entry, files=outcomes, indexes=kinds)


def remove_entry(ctx: UnicrnContext, config: ProjectConfig, name: str) -> RemoveResult:
    """Delete every file of a component or hook that is present, then resync indexes.

    Raises:
        EntryNotFoundError: If name is not a known component or hook
    """
    entry = ctx.registry.require(name)
    removed: list[RemovedFile] = []
    for path in entry.files:
        destination = destination_path(ctx.cwd, path, config)
        if not destination.exists():
            removed.append(RemovedFile(path, destination, existed=False))
            continue
        try:
            destination.unlink()
        except OSError as e:
            message = f"Could not delete {destination}: {e.strerror or e}"
            removed.append(RemovedFile(path, destination, existed=True, error=message))
            continue
        logger.debug("Deleted %s", destination)
        removed.append(RemovedFile(path, destination, existed=True))

    kinds = affected_indexes(entry)
    regenerate_indexes(ctx.cwd, config, kinds)
    return RemoveResult(entry=entry, files=removed, indexes=kinds)


def apply_theme(ctx: UnicrnContext, config: ProjectConfig, name: str) -> ThemeResult:
    """Fetch unistyles.ts fresh for the named theme, overwriting the local copy.

    Raises:
        EntryNotFoundError: If name is not a known theme
    """
    theme = require_theme(ctx.themes, name)
    outcome = materialize_file(ctx, THEME_FILE, destination_path(ctx.cwd, THEME_FILE, config))
    return ThemeResult(theme=theme, file=outcome)


def init_project(ctx: UnicrnContext, components_folder: str | None = None) -> InitResult:
    """Set up unicrn in a project. Safe to run repeatedly.

    Creates, only where absent: unicrn.json, the ui/ and hooks/ directories
    with their index files, and unistyles.ts. Patches the root index.ts.
    An existing unicrn.json wins over components_folder.

    Raises:
        ValueError: If components_folder is empty, absolute or escapes the project
        OSError: If the config or root index.ts cannot be written
    """
    project_dir = ctx.cwd
    created: list[Path] = []

    if config_path(project_dir).exists():
        config = load_config(project_dir)
    else:
        folder = normalize_components_folder(components_folder or DEFAULT_COMPONENTS_FOLDER)
        config = ProjectConfig(components_folder=folder)
        created.append(save_config(project_dir, config))

    for kind in IndexKind:
        directory = index_directory(project_dir, config, kind)
        if not directory.exists():
            directory.mkdir(parents=True)
            created.append(directory)
        if not (directory / INDEX_FILENAME).exists():
            regenerate_index(directory, kind)
            created.append(directory / INDEX_FILENAME)

    entry_status = ensure_entry_point(project_dir)

    theme_outcome: FileOutcome | None = None
    theme_path = destination_path(project_dir, THEME_FILE, config)
    if not theme_path.exists():
        theme_outcome = materialize_file(ctx, THEME_FILE, theme_path)
        if theme_outcome.ok:
            created.append(theme_path)

    return InitResult(
        config=config, created=created, entry_point=entry_status, theme_file=theme_outcome
    )


def is_project_initialized(project_dir: Path, config: ProjectConfig) -> bool:
    return (
        config_path(project_dir).exists()
        or index_directory(project_dir, config, IndexKind.COMPONENTS).exists()
        or (project_dir / THEME_FILE).exists()
    )


def list_installed(ctx: UnicrnContext, config: ProjectConfig) -> list[CatalogEntry]:
    """Entries whose files are all present in the project."""
    return [
        entry
        for entry in ctx.registry
        if all(destination_path(ctx.cwd, path, config).exists() for path in entry.files)
    ]
