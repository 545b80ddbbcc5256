"""Serve the quiz API with Uvicorn.

Host and port come from ``Settings`` (``HOST`` / ``PORT`` in the
environment or ``.env``), defaulting to ``0.0.0.0:3000``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from app.core.config import settings
from app.main import app

logger = logging.getLogger("run")


async def main() -> None:
    config = Config(app=app, host=settings.HOST, port=settings.PORT, reload=False, log_level=settings.LOG_LEVEL.lower())
    server = Server(config)
    logger.info("Quiz API running at http://%s:%s", settings.HOST, settings.PORT)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
