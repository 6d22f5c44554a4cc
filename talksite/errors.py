from __future__ import annotations

from pathlib import Path


class TalkSiteError(Exception):
    """Base class for errors raised by talksite."""


class PostNotFound(TalkSiteError):
    def __init__(self, name: str) -> None:
        super().__init__(f"post not found: {name}")
        self.name = name


class RenderingError(TalkSiteError):
    def __init__(self, template: str, reason: str) -> None:
        super().__init__(f"failed to render {template}: {reason}")
        self.template = template


class ContentLoadError(TalkSiteError):
    def __init__(self, path: Path, line_no: int, reason: str) -> None:
        super().__init__(f"{path}:{line_no}: {reason}")
        self.path = path
        self.line_no = line_no
