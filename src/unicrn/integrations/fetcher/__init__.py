"""Remote file retrieval.

Architecture:
- Fetcher: Abstract base class defining the interface
- HttpxFetcher: Production implementation using httpx
- FakeFetcher: In-memory implementation for tests
"""

from unicrn.integrations.fetcher.abc import Fetcher
from unicrn.integrations.fetcher.real import DEFAULT_TIMEOUT_SECONDS, HttpxFetcher

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "Fetcher",
    "HttpxFetcher",
]
