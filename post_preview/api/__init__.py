from fastapi import APIRouter

from post_preview.api.routes import posts

api_router = APIRouter()
api_router.include_router(posts.router)

__all__ = ["api_router"]
