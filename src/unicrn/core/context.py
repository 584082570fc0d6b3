"""Application context with dependency injection.

The UnicrnContext dataclass holds all dependencies (fetcher, source strategies,
catalog) and is created once at CLI entry point, then threaded through the
application.
"""

from dataclasses import dataclass
from pathlib import Path

from unicrn.core.registry import CATALOG, THEMES, Registry, ThemeEntry
from unicrn.core.sources import (
    BASE_URL,
    RemoteSource,
    SourceStrategy,
    default_source_strategies,
)
from unicrn.integrations.fetcher.abc import Fetcher


@dataclass(frozen=True)
class UnicrnContext:
    """Immutable context holding all dependencies for unicrn operations.

    Created at CLI entry point via create_context() and threaded through
    the application via Click's context system. Frozen to prevent accidental
    modification at runtime.

    Attributes:
        fetcher: Remote file retrieval used by the last source strategy
        sources: Ordered source strategies; the first match wins
        registry: Catalog of components and hooks
        themes: Theme registry keyed by lowercase name
        cwd: Project directory the command operates on
        base_url: Remote base URL, shown in manual-copy hints
        debug: Whether debug logging is enabled
    """

    fetcher: Fetcher
    sources: tuple[SourceStrategy, ...]
    registry: Registry
    themes: dict[str, ThemeEntry]
    cwd: Path
    base_url: str
    debug: bool

    @staticmethod
    def for_test(
        fetcher: Fetcher | None = None,
        sources: tuple[SourceStrategy, ...] | None = None,
        registry: Registry | None = None,
        themes: dict[str, ThemeEntry] | None = None,
        cwd: Path | None = None,
        base_url: str = BASE_URL,
        debug: bool = False,
    ) -> "UnicrnContext":
        """Create test context with optional pre-configured implementations.

        Uses FakeFetcher and a remote-only strategy list by default so tests
        never read the real package directory or touch the network.

        Args:
            fetcher: Optional Fetcher. If None, creates an empty FakeFetcher.
            sources: Optional strategies. If None, uses only RemoteSource(base_url).
            registry: Optional Registry. If None, uses the built-in catalog.
            themes: Optional theme registry. If None, uses the built-in themes.
            cwd: Project directory (defaults to Path("/fake/project"))
            base_url: Remote base URL
            debug: Whether to enable debug mode (default False)

        Example:
            >>> fetcher = FakeFetcher(files={f"{BASE_URL}/unistyles.ts": b"..."})
            >>> ctx = UnicrnContext.for_test(fetcher=fetcher, cwd=tmp_path)
        """
        from unicrn.integrations.fetcher.fake import FakeFetcher

        resolved_fetcher: Fetcher = fetcher if fetcher is not None else FakeFetcher()
        resolved_sources = sources if sources is not None else (RemoteSource(base_url),)

        return UnicrnContext(
            fetcher=resolved_fetcher,
            sources=resolved_sources,
            registry=registry if registry is not None else CATALOG,
            themes=themes if themes is not None else THEMES,
            cwd=cwd if cwd is not None else Path("/fake/project"),
            base_url=base_url,
            debug=debug,
        )


def create_context(*, debug: bool) -> UnicrnContext:
    """Create production context with real implementations.

    Called once at CLI entry point to create the context for the entire
    command execution.

    Args:
        debug: Whether debug logging is enabled

    Returns:
        UnicrnContext with the httpx fetcher and default source strategies
    """
    from unicrn.integrations.fetcher.real import HttpxFetcher

    return UnicrnContext(
        fetcher=HttpxFetcher(),
        sources=default_source_strategies(BASE_URL),
        registry=CATALOG,
        themes=THEMES,
        cwd=Path.cwd(),
        base_url=BASE_URL,
        debug=debug,
    )
