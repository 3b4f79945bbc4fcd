"""loguru setup for uitest-store.

The store logs through ``loguru.logger`` everywhere. A host that
wants the store's output shaped by ``StoreConfig.logging`` calls
``configure_logging`` once, or lets ``open_store`` do it.
"""

import logging
import sys
from typing import Any

from loguru import logger

from uitest_store.config.models import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class _InterceptHandler(logging.Handler):
    """Forward stdlib log records (aiosqlite, asyncio) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Point loguru at the code that logged, not at the logging module.
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _sink_options(config: LoggingConfig) -> dict[str, Any]:
    """Options shared by the stderr and file sinks."""
    serialize = config.format == "json"
    return {
        "format": "{message}" if serialize else CONSOLE_FORMAT,
        "level": config.level,
        "serialize": serialize,
    }


def configure_logging(config: LoggingConfig) -> None:
    """
    Replace loguru's sinks with the configured ones.

    Always logs to stderr; adds a rotating, gzip-compressed file sink
    when ``config.file`` is set. Stdlib logging is routed into loguru.

    Args:
        config: Logging level, format and optional file settings.
    """
    options = _sink_options(config)

    logger.remove()
    logger.add(sys.stderr, colorize=not options["serialize"], **options)
    if config.file:
        logger.add(
            config.file,
            rotation=config.rotation,
            retention=config.retention,
            compression="gz",
            **options,
        )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    logger.debug("Logging configured: level={} format={}", config.level, config.format)
