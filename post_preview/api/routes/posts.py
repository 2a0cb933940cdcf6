from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import FileResponse, Response

from post_preview.api.deps import get_responder
from post_preview.config import Settings, get_settings, settings
from post_preview.services.responder import PreviewResponder, Respond

# Routing uses the prefix loaded at import; overriding get_settings does not move the route
router = APIRouter(prefix=settings.preview_path_prefix.rstrip("/"), tags=["preview"])


def _request_path(request: Request) -> str:
    # raw_path keeps percent-encoding; some clients append the query string
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return raw_path.decode("latin-1").split("?", 1)[0]
    return request.url.path


def serve_default_page(settings: Settings) -> Response:
    """Serve the client app entry document unmodified."""
    index = settings.spa_entry_document
    if index is None or not index.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return FileResponse(index, media_type="text/html")


@router.api_route("/{post_ref:path}", methods=["GET", "HEAD"])
async def post_preview(
    request: Request,
    responder: Annotated[PreviewResponder, Depends(get_responder)],
    app_settings: Annotated[Settings, Depends(get_settings)],
) -> Response:
    """Preview page for crawlers, the default page for everybody else."""
    result = await responder.respond(
        _request_path(request), request.headers.get("user-agent")
    )
    if isinstance(result, Respond):
        return Response(
            content=result.html,
            status_code=result.status_code,
            headers=result.headers,
        )
    return serve_default_page(app_settings)
