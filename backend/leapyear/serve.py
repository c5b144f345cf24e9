"""Serve — run the FastAPI app under uvicorn.

Usage:
    leapyear-serve               # settings.host:settings.port
    python -m leapyear.serve

Invariants:
    - Bind address comes from settings (HOST / PORT env vars), never hardcoded here
    - Logging configured by the app lifespan, not by uvicorn (log_config=None)
"""

import sys

import uvicorn

from leapyear.config import get_settings

APP_PATH = "leapyear.main:app"


def main() -> int:
    settings = get_settings()
    uvicorn.run(
        APP_PATH,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
