"""loguru sinks for the CLI commands and the webhook server.

Modules log through ``get_logger(__name__)``. Structured fields are passed as
keyword arguments and end up in ``record["extra"]``.
"""

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from loguru import Logger

from src.models.config import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logging(config: LoggingConfig, verbose: bool = False) -> None:
    """
    Replace all loguru handlers with a stderr sink and a rotating file sink.

    ``verbose`` forces DEBUG on both sinks regardless of ``config.level``.
    """
    level = "DEBUG" if verbose else config.level

    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=config.colorize)

    log_path = Path(config.file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_path,
        level=level,
        format=FILE_FORMAT,
        rotation=config.rotation,
        retention=config.retention,
        compression=config.compression,
        serialize=config.serialize,
        enqueue=True,
    )

    logger.debug("Logging configured", level=level, file=str(log_path))


def get_logger(name: str) -> "Logger":
    """Get a logger bound to a module name (typically ``__name__``)."""
    return logger.bind(name=name)
