"""
Logging setup using Loguru.

Loguru does not do printf-style formatting, log with f-strings:

    logger.info(f"Updated post slug={slug}")

Configuration:
- LOG_LEVEL controls the console level (default: INFO)
- LOG_FILE, when set, adds a rotating file sink at DEBUG level
"""

import sys

from loguru import logger  # type: ignore

from blogadmin.core.config import settings

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_configured = False


def setup_logger() -> None:
    """Configure logger sinks. Only configures once even if called multiple times."""
    global _configured
    if _configured:
        return

    log_level = (settings.LOG_LEVEL or "INFO").upper()
    if log_level not in _VALID_LEVELS:
        log_level = "INFO"

    logger.remove()

    # uvicorn's reloader imports the app under __main__/__mp_main__
    def filter_reloader_logs(record):
        return record.get("name", "") not in ("__main__", "__mp_main__")

    logger.add(
        sys.stdout,
        colorize=True,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=log_level,
        filter=filter_reloader_logs,
    )

    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            rotation="100 MB",
            retention="30 days",
            compression="zip",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",
        )

    _configured = True


setup_logger()

__all__ = ["logger", "setup_logger"]
