from __future__ import annotations

from collections.abc import AsyncIterator, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from talksite.config import get_settings
from talksite.main import create_app
from talksite.models.schemas import Talk
from talksite.state import AppContext, build_context


def _talk(slug: str, title: str, **fields) -> Talk:
    fields.setdefault("body_html", f"<p>{title} body</p>")
    return Talk(title=title, link=f"talks/{slug}", **fields)


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("TALKS_FILE", str(tmp_path / "talks.jsonl"))
    monkeypatch.setenv("SITE_TITLE", "Test Talks")
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest.fixture
def make_context() -> Callable[..., AppContext]:
    def _make(talks: list[Talk], **kwargs) -> AppContext:
        return build_context(get_settings(), talks, **kwargs)

    return _make


@pytest.fixture
def talks() -> list[Talk]:
    return [_talk("a", "A"), _talk("b", "B")]


@pytest.fixture
def context(make_context, talks) -> AppContext:
    return make_context(talks)


@pytest.fixture
async def api_client(context: AppContext) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=create_app(context))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
