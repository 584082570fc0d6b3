"""Production fetcher using httpx."""

import logging

import httpx

from unicrn.core.errors import FetchError
from unicrn.integrations.fetcher.abc import Fetcher

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class HttpxFetcher(Fetcher):
    """Fetch files over HTTPS with a bounded timeout and no retries."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    def get(self, url: str) -> bytes:
        logger.debug("GET %s (timeout=%ss)", url, self._timeout)
        timeout = httpx.Timeout(self._timeout)
        try:
            with httpx.Client(
                timeout=timeout, follow_redirects=True, transport=self._transport
            ) as client:
                response = client.get(url)
        except httpx.TimeoutException as e:
            raise FetchError(url, None, f"timed out after {self._timeout}s") from e
        except httpx.RequestError as e:
            raise FetchError(url, None, str(e) or type(e).__name__) from e

        if not response.is_success:
            raise FetchError(url, response.status_code, response.reason_phrase)

        logger.debug("GET %s -> %d (%d bytes)", url, response.status_code, len(response.content))
        return response.content
