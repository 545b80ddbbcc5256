"""
Logging setup for the API.

``setup_logging`` attaches a console handler to the root logger with a
``timestamp [LEVEL] logger: message`` format. It only configures the
root logger once, so building several apps in one process (as the tests
do) does not duplicate output.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger unless it already has handlers.

    ``level`` is a logging level name such as ``"DEBUG"``, case
    insensitive; unknown names fall back to ``INFO``.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
