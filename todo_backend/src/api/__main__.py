"""
Run the todo backend with uvicorn.

Usage:
    python -m src.api

Listens on 0.0.0.0:$PORT (default 8080) until interrupted.
"""
from __future__ import annotations

import uvicorn
from loguru import logger

from .settings import get_settings


def main() -> None:
    settings = get_settings()
    logger.info("Backend running on port {}", settings.port)
    # log_config=None keeps uvicorn from replacing the loguru interception.
    uvicorn.run("src.api.main:app", host="0.0.0.0", port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
