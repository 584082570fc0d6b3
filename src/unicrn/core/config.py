"""Project configuration stored in unicrn.json at the project root.

The loader never fails a command: a missing file yields the defaults silently,
and a malformed one yields the defaults with a warning.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

import click

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "unicrn.json"
DEFAULT_COMPONENTS_FOLDER = "components"


@dataclass(frozen=True)
class ProjectConfig:
    """Immutable project configuration.

    Attributes:
        components_folder: Project-relative directory holding ui/ and hooks/
    """

    components_folder: str = DEFAULT_COMPONENTS_FOLDER


def config_path(project_dir: Path) -> Path:
    return project_dir / CONFIG_FILENAME


def load_config(project_dir: Path) -> ProjectConfig:
    """Load unicrn.json from the project directory.

    Args:
        project_dir: Project root directory

    Returns:
        ProjectConfig with values from the file, or defaults when the file is
        missing or cannot be parsed
    """
    path = config_path(project_dir)
    if not path.exists():
        return ProjectConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        return _fallback(path, f"could not parse: {e}")

    if not isinstance(data, dict):
        return _fallback(path, "expected a JSON object")

    folder = data.get("componentsFolder", DEFAULT_COMPONENTS_FOLDER)
    if not isinstance(folder, str):
        return _fallback(path, "'componentsFolder' must be a string")

    try:
        return ProjectConfig(components_folder=normalize_components_folder(folder))
    except ValueError as e:
        return _fallback(path, str(e))


def normalize_components_folder(value: str) -> str:
    """Normalize a componentsFolder value and require it to stay inside the project.

    Surrounding whitespace, trailing slashes and `.` segments are dropped.

    Raises:
        ValueError: If the result is empty, absolute, or contains a `..` segment
    """
    stripped = value.strip().rstrip("/")
    if not stripped:
        raise ValueError("'componentsFolder' must be a non-empty relative path")
    folder = PurePosixPath(stripped)
    if folder.is_absolute():
        raise ValueError(f"'componentsFolder' must be relative to the project: {value}")
    if ".." in folder.parts:
        raise ValueError(f"'componentsFolder' must not contain '..': {value}")
    return str(folder)


def save_config(project_dir: Path, config: ProjectConfig) -> Path:
    """Write unicrn.json to the project directory.

    Returns:
        Path to the written config file
    """
    path = config_path(project_dir)
    payload = {"componentsFolder": config.components_folder}
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    return path


def _fallback(path: Path, reason: str) -> ProjectConfig:
    logger.debug("Config %s rejected: %s", path, reason)
    click.echo(f"Warning: Ignoring {path.name} ({reason}); using defaults", err=True)
    return ProjectConfig()
