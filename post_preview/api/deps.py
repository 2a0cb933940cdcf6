from functools import lru_cache

import httpx
from fastapi import Depends, Request

from post_preview.config import Settings, get_settings
from post_preview.services.crawler import CrawlerClassifier
from post_preview.services.metadata import PostMetadataClient
from post_preview.services.responder import PreviewResponder


@lru_cache()
def _classifier_for(signatures: tuple[str, ...]) -> CrawlerClassifier:
    return CrawlerClassifier(signatures)


def get_classifier(settings: Settings = Depends(get_settings)) -> CrawlerClassifier:
    return _classifier_for(tuple(settings.crawler_signatures))


async def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


async def get_metadata_client(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> PostMetadataClient:
    return PostMetadataClient(client, settings.api_base, settings.fetch_timeout)


async def get_responder(
    settings: Settings = Depends(get_settings),
    classifier: CrawlerClassifier = Depends(get_classifier),
    metadata_client: PostMetadataClient = Depends(get_metadata_client),
) -> PreviewResponder:
    return PreviewResponder(settings, classifier, metadata_client)
