"""Abstract interface for fetching remote files."""

from abc import ABC, abstractmethod


class Fetcher(ABC):
    """Abstract interface for a single best-effort HTTP GET.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def get(self, url: str) -> bytes:
        """Download a URL and return the full response body.

        Args:
            url: Absolute URL to fetch

        Returns:
            Response body bytes, fully buffered

        Raises:
            FetchError: On a non-2xx status, a timeout or a transport failure
        """
        ...
