from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from post_preview.api import api_router
from post_preview.config import settings
from post_preview.log_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    configure_logging(settings.log_level)
    app.state.http_client = httpx.AsyncClient(
        timeout=settings.fetch_timeout,
        headers={"Accept": "application/json"},
    )
    yield
    # Shutdown
    await app.state.http_client.aclose()


app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.include_router(api_router)


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    return {"status": "ok", "app": settings.app_name}


if settings.static_dir is not None and settings.static_dir.is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="spa")
