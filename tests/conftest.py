"""Shared pytest fixtures for the preview service tests."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from post_preview.config import Settings

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        api_base_url="https://api.example.test",
        site_base_url="https://example.test",
        site_name="DuoCortex",
        default_image_url="https://example.test/logo.png",
        favicon_url="https://example.test/logo.png",
        fallback_title="DuoCortex Post",
        fallback_author="DuoCortex User",
    )


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers the requests it served."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def make_transport() -> Callable[[Handler], RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def json_handler() -> Callable[..., Handler]:
    """Build a transport handler that always answers with ``payload``."""

    def _build(payload: object, status_code: int = 200) -> Handler:
        def _handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=payload)

        return _handler

    return _build
