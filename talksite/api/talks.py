from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from talksite.handlers.talks import serve_index, serve_post
from talksite.state import AppContext, get_context

router = APIRouter(prefix="/talks", tags=["talks"])


@router.get("", response_class=HTMLResponse)
async def talk_index(ctx: AppContext = Depends(get_context)) -> HTMLResponse:
    return HTMLResponse(content=serve_index(ctx))


@router.get("/{name}", response_class=HTMLResponse)
async def talk_post(name: str, ctx: AppContext = Depends(get_context)) -> HTMLResponse:
    return HTMLResponse(content=serve_post(ctx, name))
