from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from markupsafe import escape

from talksite.api.metrics import router as metrics_router
from talksite.api.talks import router as talks_router
from talksite.config import get_settings
from talksite.content import load_talks
from talksite.errors import PostNotFound, RenderingError
from talksite.observability.logging import configure_logging
from talksite.observability.middleware import RequestContextMiddleware
from talksite.state import AppContext, build_context

logger = structlog.get_logger(__name__)

_ERROR_PAGE = "<!DOCTYPE html><html><head><title>{title}</title></head><body><h1>{title}</h1><p>{detail}</p></body></html>"


def _error_page(title: str, detail: str, status_code: int) -> HTMLResponse:
    content = _ERROR_PAGE.format(title=escape(title), detail=escape(detail))
    return HTMLResponse(content=content, status_code=status_code)


async def _post_not_found(request: Request, exc: PostNotFound) -> HTMLResponse:
    return _error_page("Not found", f"No talk named {exc.name!r}.", 404)


async def _rendering_failed(request: Request, exc: RenderingError) -> HTMLResponse:
    logger.error("render.failed", template=exc.template, error=str(exc))
    return _error_page("Internal server error", "The page could not be rendered.", 500)


def create_app(context: AppContext | None = None) -> FastAPI:
    """Build the FastAPI app.

    With no ``context`` the content set is loaded from ``TALKS_FILE`` on startup.
    """

    app = FastAPI(title="Talks", version="0.1.0")
    app.add_middleware(RequestContextMiddleware)
    app.add_exception_handler(PostNotFound, _post_not_found)
    app.add_exception_handler(RenderingError, _rendering_failed)
    app.include_router(talks_router)
    app.include_router(metrics_router)

    if context is not None:
        app.state.context = context
    else:

        @app.on_event("startup")
        def _startup() -> None:
            settings = get_settings()
            configure_logging(settings)
            talks = load_talks(settings.talks_path)
            app.state.context = build_context(settings, talks)
            logger.info("startup.ready", talk_count=len(talks))

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
