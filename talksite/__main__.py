from __future__ import annotations

import argparse

import uvicorn

from talksite.config import get_settings
from talksite.observability.logging import configure_logging


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Serve the talks pages")
    parser.add_argument("--talks", default=None, help="Path to the talks JSONL file (overrides TALKS_FILE)")
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    args = parser.parse_args()

    if args.talks:
        settings.talks_file = args.talks

    configure_logging(settings)
    uvicorn.run("talksite.main:app", host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
