"""Locating the authoritative bytes for a registry file.

Resolution is an ordered list of strategies, each returning a SourceRef or
None. The first match wins:

1. InstalledPackageSource: the installed unicrn package directory
2. DevTreeSource: a development checkout of this repository
3. RemoteSource: the raw GitHub URL (no client-side existence check)
"""

import importlib.util
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from unicrn.core.errors import SourceUnavailableError

logger = logging.getLogger(__name__)

BASE_URL = "https://raw.githubusercontent.com/periabyte/unicrn/main"


@dataclass(frozen=True)
class LocalPackage:
    """File shipped inside the installed unicrn package."""

    path: Path


@dataclass(frozen=True)
class LocalDevTree:
    """File present in a development checkout of unicrn."""

    path: Path


@dataclass(frozen=True)
class Remote:
    """File to be downloaded from the remote base URL."""

    url: str


SourceRef = LocalPackage | LocalDevTree | Remote


class SourceStrategy(ABC):
    """One step in the source resolution chain."""

    @abstractmethod
    def locate(self, registry_path: str) -> SourceRef | None:
        """Return a reference to registry_path, or None if unavailable here."""
        ...


class InstalledPackageSource(SourceStrategy):
    """Resolve files from the installed unicrn package directory."""

    def __init__(self, package_root: Path | None) -> None:
        self._package_root = package_root

    def locate(self, registry_path: str) -> SourceRef | None:
        if self._package_root is None:
            return None
        candidate = self._package_root / registry_path
        if candidate.is_file():
            return LocalPackage(candidate)
        return None


class DevTreeSource(SourceStrategy):
    """Resolve files from a development checkout (the repository root)."""

    def __init__(self, checkout_root: Path) -> None:
        self._checkout_root = checkout_root

    def locate(self, registry_path: str) -> SourceRef | None:
        candidate = self._checkout_root / registry_path
        if candidate.is_file():
            return LocalDevTree(candidate)
        return None


class RemoteSource(SourceStrategy):
    """Always resolves; the download itself decides whether the file exists."""

    def __init__(self, base_url: str = BASE_URL) -> None:
        self._base_url = base_url.rstrip("/")

    def locate(self, registry_path: str) -> SourceRef | None:
        return Remote(remote_url(registry_path, self._base_url))


def remote_url(registry_path: str, base_url: str = BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/{registry_path}"


def locate_source(registry_path: str, strategies: tuple[SourceStrategy, ...]) -> SourceRef:
    """Find where the bytes for registry_path currently live.

    Args:
        registry_path: Registry-relative file path (e.g. "lib/hooks/useDisclose.ts")
        strategies: Ordered strategies; the first non-None result wins

    Returns:
        The first matching SourceRef

    Raises:
        SourceUnavailableError: If no strategy can provide the file
    """
    for strategy in strategies:
        ref = strategy.locate(registry_path)
        if ref is not None:
            logger.debug("Located %s via %s: %s", registry_path, type(strategy).__name__, ref)
            return ref
        logger.debug("%s has no %s", type(strategy).__name__, registry_path)
    raise SourceUnavailableError(registry_path)


def find_installed_package_root() -> Path | None:
    """Return the installed unicrn package directory via the import system."""
    spec = importlib.util.find_spec("unicrn")
    if spec is None or spec.origin is None:
        return None
    return Path(spec.origin).resolve().parent


def find_checkout_root() -> Path:
    """Return the directory above src/ when running from a source checkout."""
    return Path(__file__).resolve().parents[3]


def default_source_strategies(base_url: str = BASE_URL) -> tuple[SourceStrategy, ...]:
    return (
        InstalledPackageSource(find_installed_package_root()),
        DevTreeSource(find_checkout_root()),
        RemoteSource(base_url),
    )


def describe_source(ref: SourceRef) -> str:
    """Short human label for where a file came from."""
    match ref:
        case LocalPackage(path=path):
            return f"installed package ({path})"
        case LocalDevTree(path=path):
            return f"local checkout ({path})"
        case Remote(url=url):
            return url
