import logging
from typing import Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from post_preview.schemas import PostPayload

logger = logging.getLogger(__name__)


class PostMetadataClient:
    """Fetches post metadata from the posts API."""

    def __init__(
        self, client: httpx.AsyncClient, api_base_url: str, timeout: float
    ) -> None:
        self._client = client
        self._api_base_url = api_base_url.rstrip("/")
        self._timeout = timeout

    def post_url(self, post_id: str) -> str:
        return f"{self._api_base_url}/posts/post/{quote(post_id, safe='')}"

    async def fetch_post(self, post_id: str) -> Optional[PostPayload]:
        """Return the post payload, or None when it cannot be used."""
        url = self.post_url(post_id)
        try:
            response = await self._client.get(url, timeout=self._timeout)
        except httpx.HTTPError as exc:
            logger.error("Error fetching post %s: %s", post_id, exc)
            return None

        if not response.is_success:
            logger.warning(
                "Posts API returned status %s for post %s",
                response.status_code,
                post_id,
            )
            return None

        try:
            return PostPayload.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.error("Malformed payload for post %s: %s", post_id, exc)
            return None
