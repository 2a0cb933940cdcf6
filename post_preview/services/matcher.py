from typing import Optional
from urllib.parse import unquote


def match_post_path(path: str, prefix: str = "/post/") -> Optional[str]:
    """Return the post identifier for a preview-enabled path, or None.

    The identifier is everything after ``prefix``, URL-decoded and otherwise
    left opaque.
    """
    if not path.startswith(prefix):
        return None

    post_id = unquote(path[len(prefix):].rstrip("/"))
    return post_id or None
