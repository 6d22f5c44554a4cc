from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict


class Talk(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    link: str
    body_html: str
    body: str = ""
    summary: str | None = None
    date: datetime.date | None = None
    slides: str | None = None
    video: str | None = None
