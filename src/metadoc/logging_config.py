"""structlog setup shared by applications embedding metadoc."""
import logging

import structlog

from .config import LoggingConfig


def configure_logging(config: LoggingConfig) -> None:
    handlers = None
    if config.file is not None:
        handlers = [logging.FileHandler(config.file, encoding="utf-8")]

    logging.basicConfig(
        level=getattr(logging, config.level.upper()),
        format="%(message)s",
        handlers=handlers,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.format_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.dev.ConsoleRenderer(colors=False) if config.format.lower() == "console"
            else structlog.processors.JSONRenderer(sort_keys=True)
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    structlog.get_logger(__name__).debug(
        "Logging configured.", logging_level=config.level, logging_format=config.format
    )
