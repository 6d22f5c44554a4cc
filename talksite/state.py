from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from fastapi import Request
from prometheus_client import CollectorRegistry

from talksite.config import Settings
from talksite.models.schemas import Talk
from talksite.observability.metrics import HitCounter, HttpMetrics
from talksite.rendering import TemplateRenderer


@dataclass(frozen=True)
class AppContext:
    """Shared, read-only state handed to every request handler."""

    settings: Settings
    talks: tuple[Talk, ...]
    renderer: TemplateRenderer
    registry: CollectorRegistry
    hits: HitCounter
    http_metrics: HttpMetrics = field(repr=False)


def build_context(
    settings: Settings,
    talks: Iterable[Talk],
    renderer: TemplateRenderer | None = None,
    registry: CollectorRegistry | None = None,
) -> AppContext:
    registry = registry if registry is not None else CollectorRegistry()
    return AppContext(
        settings=settings,
        talks=tuple(talks),
        renderer=renderer or TemplateRenderer(site_title=settings.site_title),
        registry=registry,
        hits=HitCounter(registry),
        http_metrics=HttpMetrics(registry),
    )


def get_context(request: Request) -> AppContext:
    return request.app.state.context
