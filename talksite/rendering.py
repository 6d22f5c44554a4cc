"""HTML rendering for the talk pages.

Both render functions stream a Jinja2 template into a caller-provided binary
sink. Template failures surface as ``RenderingError``.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError
from markupsafe import Markup

from talksite.errors import RenderingError
from talksite.models.schemas import Talk

TEMPLATES_DIR = Path(__file__).parent / "templates"


class TemplateRenderer:
    def __init__(self, site_title: str = "Talks", directory: str | Path = TEMPLATES_DIR) -> None:
        self.site_title = site_title
        self.templates = Jinja2Templates(directory=str(directory))

    def render_index(self, sink: BinaryIO, talks: Sequence[Talk]) -> None:
        self._render(sink, "talkindex.html", {"talks": talks})

    def render_post(self, sink: BinaryIO, talk: Talk, body: Markup) -> None:
        self._render(sink, "talkpost.html", {"talk": talk, "body": body})

    def _render(self, sink: BinaryIO, name: str, context: dict) -> None:
        try:
            template = self.templates.get_template(name)
            for chunk in template.generate(site_title=self.site_title, **context):
                sink.write(chunk.encode("utf-8"))
        except TemplateError as exc:
            raise RenderingError(name, exc.message or type(exc).__name__) from exc
