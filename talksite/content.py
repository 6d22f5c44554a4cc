from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from talksite.errors import ContentLoadError
from talksite.models.schemas import Talk

logger = logging.getLogger(__name__)


def load_talks(path: str | Path) -> tuple[Talk, ...]:
    """Load the content set from a JSON Lines file, one talk per line.

    File order is kept and duplicate links are not rejected.
    """

    path = Path(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    talks: list[Talk] = []
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            payload = json.loads(line)
        except json.JSONDecodeError as exc:
            raise ContentLoadError(path, line_no, f"invalid JSON: {exc.msg}") from exc
        try:
            talks.append(Talk.model_validate(payload))
        except ValidationError as exc:
            raise ContentLoadError(path, line_no, str(exc)) from exc

    logger.info("content.loaded", extra={"path": str(path), "talk_count": len(talks)})
    return tuple(talks)
