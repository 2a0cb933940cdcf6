from post_preview.schemas.post import PostAuthor, PostImage, PostPayload, PostPreview

__all__ = [
    "PostAuthor",
    "PostImage",
    "PostPayload",
    "PostPreview",
]
