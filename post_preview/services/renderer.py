"""Map post payloads to previews and render the crawler HTML page."""

import re
from html import escape
from typing import Optional
from urllib.parse import quote

from post_preview.config import Settings
from post_preview.schemas import PostPayload, PostPreview

ELLIPSIS = "..."

_WHITESPACE = re.compile(r"\s+")


def truncate_text(text: Optional[str], max_length: int) -> str:
    """Collapse whitespace and cut ``text`` to ``max_length`` with an ellipsis."""
    if not text:
        return ""
    text = _WHITESPACE.sub(" ", text).strip()
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def escape_html(text: Optional[str]) -> str:
    """Escape ``& < > " '`` for use in text nodes and quoted attributes."""
    if not text:
        return ""
    return escape(text, quote=True).replace("&#x27;", "&#039;")


def canonical_post_url(site_base_url: str, post_id: str) -> str:
    return f"{site_base_url.rstrip('/')}/post/{quote(post_id, safe='')}"


def build_preview(payload: PostPayload, post_id: str, settings: Settings) -> PostPreview:
    title = payload.title if payload.title and payload.title.strip() else None
    description = truncate_text(
        payload.description, settings.description_max_length
    ) or truncate_text(settings.fallback_description, settings.description_max_length)

    image_url = payload.image.url if payload.image and payload.image.url else None
    author = (
        payload.created_by.name
        if payload.created_by and payload.created_by.name
        else None
    )

    return PostPreview(
        title=title
        or truncate_text(payload.description, settings.title_max_length)
        or settings.fallback_title,
        description=description,
        image_url=image_url or settings.default_image_url,
        canonical_url=canonical_post_url(settings.site_base, post_id),
        author_name=author or settings.fallback_author,
    )


def render_preview_html(preview: PostPreview, settings: Settings) -> str:
    title = escape_html(preview.title)
    description = escape_html(preview.description)
    image = escape_html(preview.image_url)
    url = escape_html(preview.canonical_url)
    author = escape_html(preview.author_name)
    site_name = escape_html(settings.site_name)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">

  <title>{title} | {site_name}</title>
  <meta name="description" content="{description}">

  <!-- Open Graph -->
  <meta property="og:type" content="article">
  <meta property="og:site_name" content="{site_name}">
  <meta property="og:title" content="{title}">
  <meta property="og:description" content="{description}">
  <meta property="og:image" content="{image}">
  <meta property="og:image:width" content="{settings.image_width}">
  <meta property="og:image:height" content="{settings.image_height}">
  <meta property="og:url" content="{url}">
  <meta property="article:author" content="{author}">

  <!-- Twitter Card -->
  <meta name="twitter:card" content="summary_large_image">
  <meta name="twitter:site" content="{escape_html(settings.twitter_site)}">
  <meta name="twitter:title" content="{title}">
  <meta name="twitter:description" content="{description}">
  <meta name="twitter:image" content="{image}">

  <meta http-equiv="refresh" content="0;url={url}">

  <link rel="icon" href="{escape_html(settings.favicon_url)}" type="image/png">
</head>
<body>
  <h1>{title}</h1>
  <p>{description}</p>
  <p>Posted by {author} on {site_name}</p>
  <img src="{image}" alt="Post image">
  <a href="{url}">View on {site_name}</a>
</body>
</html>
"""


def preview_headers(settings: Settings) -> dict[str, str]:
    return {
        "content-type": "text/html; charset=UTF-8",
        "cache-control": f"public, max-age={settings.cache_max_age}",
    }
