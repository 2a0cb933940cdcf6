from __future__ import annotations

import asyncio
import logging

import httpx
import pytest

from post_preview.config import Settings
from post_preview.services.crawler import CrawlerClassifier
from post_preview.services.metadata import PostMetadataClient
from post_preview.services.responder import (
    Delegate,
    PreviewResponder,
    PreviewResult,
    Respond,
)

CRAWLER = "facebookexternalhit/1.1"
BROWSER = "Mozilla/5.0 (X11; Linux x86_64) Gecko/20100101 Firefox/121.0"


def _respond(
    settings: Settings,
    transport: httpx.MockTransport,
    path: str,
    user_agent: str | None,
) -> PreviewResult:
    async def _run() -> PreviewResult:
        async with httpx.AsyncClient(transport=transport) as client:
            responder = PreviewResponder(
                settings,
                CrawlerClassifier(settings.crawler_signatures),
                PostMetadataClient(client, settings.api_base, settings.fetch_timeout),
            )
            return await responder.respond(path, user_agent)

    return asyncio.run(_run())


@pytest.mark.parametrize("path", ["/", "/about", "/posts/abc", "/post/"])
def test_unmatched_paths_delegate_without_fetch(
    settings: Settings, make_transport, json_handler, path: str
) -> None:
    transport = make_transport(json_handler({"title": "x"}))

    result = _respond(settings, transport, path, CRAWLER)

    assert result == Delegate("no-match")
    assert transport.requests == []


@pytest.mark.parametrize("user_agent", [None, "", BROWSER])
def test_regular_visitors_delegate_without_fetch(
    settings: Settings, make_transport, json_handler, user_agent: str | None
) -> None:
    transport = make_transport(json_handler({"title": "x"}))

    result = _respond(settings, transport, "/post/abc123", user_agent)

    assert result == Delegate("not-crawler")
    assert transport.requests == []


@pytest.mark.parametrize("status_code", [404, 500])
def test_upstream_failure_delegates(
    settings: Settings, make_transport, json_handler, status_code: int
) -> None:
    transport = make_transport(json_handler({}, status_code=status_code))

    result = _respond(settings, transport, "/post/abc123", CRAWLER)

    assert result == Delegate("fetch-failed")
    assert len(transport.requests) == 1


def test_crawler_gets_preview(settings: Settings, make_transport, json_handler) -> None:
    transport = make_transport(
        json_handler({"title": "Exam Tips", "description": "Study smart"})
    )

    result = _respond(settings, transport, "/post/abc%20123", "WHATSAPP/2.0")

    assert isinstance(result, Respond)
    assert result.status_code == 200
    assert result.headers["cache-control"] == "public, max-age=300"
    assert result.headers["content-type"] == "text/html; charset=UTF-8"
    assert '<meta property="og:title" content="Exam Tips">' in result.html
    assert str(transport.requests[0].url) == "https://api.example.test/posts/post/abc%20123"


def test_custom_signatures_and_prefix(make_transport, json_handler) -> None:
    settings = Settings(
        _env_file=None,
        crawler_signatures=("PreviewBot",),
        preview_path_prefix="/p/",
        cache_max_age=60,
    )
    transport = make_transport(json_handler({"title": "T"}))

    assert _respond(settings, transport, "/p/1", CRAWLER) == Delegate("not-crawler")

    result = _respond(settings, transport, "/p/1", "previewbot/1.0")
    assert isinstance(result, Respond)
    assert result.headers["cache-control"] == "public, max-age=60"


@pytest.mark.parametrize(
    "body",
    [
        {"title": "Exam Tips", "createdBy": "64f0c0ffee"},
        {"title": "Exam Tips", "image": "https://x/y.png"},
        {"title": "Exam Tips", "image": [], "createdBy": {"name": "Jane"}},
    ],
)
def test_crawler_gets_preview_despite_malformed_nested_fields(
    settings: Settings, make_transport, json_handler, body: object
) -> None:
    result = _respond(settings, make_transport(json_handler(body)), "/post/abc", CRAWLER)

    assert isinstance(result, Respond)
    assert '<meta property="og:title" content="Exam Tips">' in result.html
    assert '<meta property="og:image" content="https://example.test/logo.png">' in result.html


def test_delegations_are_logged(
    settings: Settings, make_transport, json_handler, caplog: pytest.LogCaptureFixture
) -> None:
    transport = make_transport(json_handler({}, status_code=404))

    with caplog.at_level(logging.DEBUG, logger="post_preview.services.responder"):
        _respond(settings, transport, "/post/abc", BROWSER)
        _respond(settings, transport, "/post/abc", CRAWLER)

    assert "not a crawler" in caplog.text
    assert "No preview data for post abc" in caplog.text
