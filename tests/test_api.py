from httpx import ASGITransport, AsyncClient

from talksite.main import create_app
from talksite.models.schemas import Talk
from talksite.observability.metrics import hit_count
from talksite.rendering import TemplateRenderer


def _broken_renderer(tmp_path, template: str) -> TemplateRenderer:
    (tmp_path / template).write_text('{% include "missing.html" %}', encoding="utf-8")
    return TemplateRenderer(directory=tmp_path)


async def test_responses_include_x_request_id(api_client) -> None:
    resp = await api_client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert resp.headers.get("x-request-id")


async def test_talk_index_returns_html_listing(api_client) -> None:
    resp = await api_client.get("/talks")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert resp.text.index(">A</a>") < resp.text.index(">B</a>")
    assert "Test Talks" in resp.text


async def test_talk_page_is_served_and_counted(api_client, context) -> None:
    resp = await api_client.get("/talks/a")
    assert resp.status_code == 200
    assert "<h1>A</h1>" in resp.text
    assert hit_count(context.registry, "a") == 1


async def test_unknown_talk_returns_404_without_counting(api_client, context) -> None:
    resp = await api_client.get("/talks/c")
    assert resp.status_code == 404
    assert resp.headers["content-type"].startswith("text/html")
    assert "Not found" in resp.text
    assert "&#39;c&#39;" in resp.text
    assert context.registry.get_sample_value("talks_hits_total", {"name": "c"}) is None


async def test_post_rendering_failure_returns_500(make_context, tmp_path) -> None:
    ctx = make_context(
        [Talk(title="A", link="talks/a", body_html="<p>a</p>")],
        renderer=_broken_renderer(tmp_path, "talkpost.html"),
    )

    transport = ASGITransport(app=create_app(ctx))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/talks/a")

    assert resp.status_code == 500
    assert "could not be rendered" in resp.text
    assert "<p>a</p>" not in resp.text
    assert hit_count(ctx.registry, "a") == 1


async def test_index_rendering_failure_returns_500(make_context, tmp_path) -> None:
    ctx = make_context(
        [Talk(title="A", link="talks/a", body_html="<p>a</p>")],
        renderer=_broken_renderer(tmp_path, "talkindex.html"),
    )

    transport = ASGITransport(app=create_app(ctx))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/talks")

    assert resp.status_code == 500
    assert "could not be rendered" in resp.text
    assert ctx.registry.get_sample_value("talks_hits_total", {"name": "a"}) is None
