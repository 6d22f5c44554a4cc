from __future__ import annotations

import io
from collections.abc import Iterable

import structlog
from markupsafe import Markup

from talksite.errors import PostNotFound
from talksite.models.schemas import Talk
from talksite.state import AppContext

TALK_LINK_PREFIX = "talks/"

logger = structlog.get_logger(__name__)


def serve_index(ctx: AppContext) -> bytes:
    result = io.BytesIO()
    ctx.renderer.render_index(result, ctx.talks)
    return result.getvalue()


def find_talk(talks: Iterable[Talk], name: str) -> Talk | None:
    """Return the last talk whose link is ``talks/<name>``.

    The whole sequence is scanned: with duplicate links the later record wins.
    """

    target = f"{TALK_LINK_PREFIX}{name}"
    want: Talk | None = None
    for talk in talks:
        if talk.link == target:
            want = talk
    return want


def serve_post(ctx: AppContext, name: str) -> bytes:
    talk = find_talk(ctx.talks, name)
    if talk is None:
        logger.info("talk.not_found", name=name)
        raise PostNotFound(name)

    # Counted before rendering; a failed render still registers the hit.
    ctx.hits.increment(name)
    logger.info("talk.view", name=name, link=talk.link)

    body = Markup(talk.body_html)
    result = io.BytesIO()
    ctx.renderer.render_post(result, talk, body)
    return result.getvalue()
