"""
Logging configuration for formmaker using structlog.

Configures structlog with:
- Pretty console output (human-readable, colored)
- Optional JSON file output (machine-readable, structured)
- Daily log file rotation (UTC)

Library modules only call ``structlog.get_logger(__name__)``; host
applications that already configure structlog do not need this.
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional, Union

import structlog

LOG_FILE_NAME = "formmaker.jsonl"


def _shared_processors():
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def setup_logging(
    log_dir: Optional[Union[str, Path]] = None,
    level: int = logging.INFO,
    colors: bool = True,
) -> logging.Logger:
    """
    Configure structlog with pretty console and optional JSON file output.

    Args:
        log_dir: Directory for the rotating JSON log file; no file when None
        level: Console log level
        colors: Colored console output

    Returns:
        The configured ``formmaker`` stdlib logger
    """
    shared_processors = _shared_processors()

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    package_logger = logging.getLogger("formmaker")
    package_logger.setLevel(logging.DEBUG)
    package_logger.handlers.clear()
    package_logger.propagate = False

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=colors),
        foreign_pre_chain=shared_processors,
    ))
    package_logger.addHandler(console_handler)

    if log_dir is not None:
        logs_dir = Path(log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)

        file_handler = TimedRotatingFileHandler(
            filename=logs_dir / LOG_FILE_NAME,
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
            utc=True,
        )
        file_handler.suffix = "%Y-%m-%d.jsonl"
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=shared_processors,
        ))
        package_logger.addHandler(file_handler)

    return package_logger
