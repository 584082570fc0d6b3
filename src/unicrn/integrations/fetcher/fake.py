"""Fake fetcher for testing.

FakeFetcher is an in-memory implementation that serves pre-configured bodies
and records every URL requested.
"""

from unicrn.core.errors import FetchError
from unicrn.integrations.fetcher.abc import Fetcher


class FakeFetcher(Fetcher):
    """In-memory fake implementation of remote fetching.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments. URLs with no configured body or status return 404.
    """

    def __init__(
        self,
        *,
        files: dict[str, bytes] | None = None,
        statuses: dict[str, int] | None = None,
    ) -> None:
        """Create FakeFetcher with pre-configured responses.

        Args:
            files: Mapping of URL -> response body served with status 200
            statuses: Mapping of URL -> error status code, checked before files
        """
        self._files = files or {}
        self._statuses = statuses or {}
        self._requested_urls: list[str] = []

    @property
    def requested_urls(self) -> list[str]:
        """Read-only access to requested URLs for test assertions."""
        return self._requested_urls

    def get(self, url: str) -> bytes:
        self._requested_urls.append(url)
        if url in self._statuses:
            raise FetchError(url, self._statuses[url], "Error")
        if url not in self._files:
            raise FetchError(url, 404, "Not Found")
        return self._files[url]
