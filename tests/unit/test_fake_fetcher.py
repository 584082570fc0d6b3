"""Tests for FakeFetcher."""

import pytest

from unicrn.core.errors import FetchError
from unicrn.integrations.fetcher.fake import FakeFetcher

URL = "https://example.test/unistyles.ts"


def test_serves_configured_body() -> None:
    fetcher = FakeFetcher(files={URL: b"body"})

    assert fetcher.get(URL) == b"body"
    assert fetcher.requested_urls == [URL]


def test_unknown_url_is_404() -> None:
    fetcher = FakeFetcher()

    with pytest.raises(FetchError) as exc_info:
        fetcher.get(URL)

    assert exc_info.value.status_code == 404
    assert fetcher.requested_urls == [URL]


def test_status_takes_precedence_over_body() -> None:
    fetcher = FakeFetcher(files={URL: b"body"}, statuses={URL: 503})

    with pytest.raises(FetchError) as exc_info:
        fetcher.get(URL)

    assert exc_info.value.status_code == 503
