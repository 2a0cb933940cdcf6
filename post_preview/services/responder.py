import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from post_preview.config import Settings
from post_preview.services.crawler import CrawlerClassifier
from post_preview.services.matcher import match_post_path
from post_preview.services.metadata import PostMetadataClient
from post_preview.services.renderer import (
    build_preview,
    preview_headers,
    render_preview_html,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Delegate:
    """Hand the request to the default page handler unchanged."""

    reason: str = ""


@dataclass(frozen=True)
class Respond:
    html: str
    headers: dict[str, str] = field(default_factory=dict)
    status_code: int = 200


PreviewResult = Union[Delegate, Respond]


class PreviewResponder:
    """Decides between a crawler preview page and the default page."""

    def __init__(
        self,
        settings: Settings,
        classifier: CrawlerClassifier,
        metadata_client: PostMetadataClient,
    ) -> None:
        self._settings = settings
        self._classifier = classifier
        self._metadata_client = metadata_client

    async def respond(self, path: str, user_agent: Optional[str]) -> PreviewResult:
        post_id = match_post_path(path, self._settings.preview_path_prefix)
        if post_id is None:
            logger.debug("No post id in %s", path)
            return Delegate("no-match")

        if not self._classifier.is_crawler(user_agent):
            logger.debug("User agent %r is not a crawler", user_agent)
            return Delegate("not-crawler")

        payload = await self._metadata_client.fetch_post(post_id)
        if payload is None:
            logger.debug("No preview data for post %s", post_id)
            return Delegate("fetch-failed")

        preview = build_preview(payload, post_id, self._settings)
        logger.info("Serving preview for post %s to %r", post_id, user_agent)
        return Respond(
            html=render_preview_html(preview, self._settings),
            headers=preview_headers(self._settings),
        )
