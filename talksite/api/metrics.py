from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from talksite.state import AppContext, get_context

router = APIRouter(tags=["metrics"])


@router.get("/metrics")
async def metrics(ctx: AppContext = Depends(get_context)) -> Response:
    if not ctx.settings.enable_metrics_endpoint:
        raise HTTPException(status_code=404, detail="Not found")
    return Response(content=generate_latest(ctx.registry), media_type=CONTENT_TYPE_LATEST)
