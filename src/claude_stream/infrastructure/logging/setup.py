# File: src/claude_stream/infrastructure/logging/setup.py
# Purpose: Structured logging setup that keeps stdout free for streamed text
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import structlog
from pythonjsonlogger import jsonlogger


def setup_logging(
    log_level: str = "WARNING",
    log_dir: Optional[str] = None,
    app_name: str = "claude-stream",
    json_logs: bool = True
) -> structlog.BoundLogger:
    """
    Setup structured logging for the stream renderer:
    - structlog on top of stdlib logging
    - JSON formatting via python-json-logger (or structlog's console renderer)
    - Console output on stderr, since stdout carries the assistant's text
    - Optional rotating log files when ``log_dir`` is given

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files; None or "" disables file logging
        app_name: Application name for logger identification
        json_logs: Render JSON when True, human-readable lines otherwise

    Returns:
        Configured structlog logger instance
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level.upper())

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    json_formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(name)s %(levelname)s %(message)s",
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger"
        }
    )
    formatter = json_formatter if json_logs else logging.Formatter("%(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        # Application log (rotated daily, keep 7 days)
        app_handler = logging.handlers.TimedRotatingFileHandler(
            filename=log_path / f"{app_name}.log",
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8"
        )
        app_handler.setFormatter(json_formatter)
        app_handler.suffix = "%Y-%m-%d"
        root_logger.addHandler(app_handler)

        # Error log (rotated by size, keep 5 files)
        error_handler = logging.handlers.RotatingFileHandler(
            filename=log_path / f"{app_name}_error.log",
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=5,
            encoding="utf-8"
        )
        error_handler.setFormatter(json_formatter)
        error_handler.setLevel(logging.ERROR)
        root_logger.addHandler(error_handler)

    logger = structlog.get_logger(app_name)
    logger.debug(
        "logging_initialized",
        log_level=log_level,
        log_dir=log_dir or None,
        json_logs=json_logs
    )
    return logger


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """Get a structlog logger instance."""
    return structlog.get_logger(name)
