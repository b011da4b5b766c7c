# utils/logger.py
import logging
import os
import sys
from config.paths import LOG_PATH

# Loggers of the packages that log through the service handlers
PACKAGE_LOGGERS = ("cover", "core", "utils", "api")

LOG_LEVEL = os.getenv("COVER_LOG_LEVEL", "INFO").upper()


def _build_handlers():
    LOG_PATH.parent.mkdir(parents=True, exist_ok=True)

    # Full records go to the run log
    file_handler = logging.FileHandler(LOG_PATH, encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    # Short records on stdout (docker logs)
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    return [file_handler, stream_handler]


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """
    Attach the file and stdout handlers to every package logger once.

    Module loggers (`logging.getLogger(__name__)`) propagate to these, so a
    message from `cover.cycles` lands in the run log without extra setup.
    Returns the top-level "cover" logger.
    """
    handlers = None
    for name in PACKAGE_LOGGERS:
        package_logger = logging.getLogger(name)
        package_logger.setLevel(level)
        if package_logger.handlers:
            continue
        handlers = handlers or _build_handlers()
        for handler in handlers:
            package_logger.addHandler(handler)
    return logging.getLogger("cover")


logger = configure_logging()
