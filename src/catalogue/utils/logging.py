"""Logging setup for the storefront.

Called once when ``catalogue.domain`` is imported. Stdlib handlers write the
records (stdout, ``<prefix>.log`` and ``<prefix>_error.log`` under the log
directory); structlog formats them. Modules log through
``structlog.get_logger(__name__)``.

Environment:
    LOG_LEVEL     overrides every other level choice
    LOG_DIR       overrides the ``log_dir`` argument
    ENVIRONMENT   ``production``/``staging`` switch the renderer to JSON
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

import structlog

LEVEL_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


def get_log_level() -> str:
    """Level for the current environment, read from ENV, ENVIRONMENT or PROTEAN_ENV."""
    env = (os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()
    return os.getenv("LOG_LEVEL", LEVEL_BY_ENV.get(env, "INFO"))


def _rotating(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging(
    level: str | None = None,
    log_dir: str | Path = "logs",
    log_file_prefix: str = "storefront",
) -> Path:
    """Replace the root logger's handlers. Returns the log directory used."""
    log_level = os.getenv("LOG_LEVEL") or level or get_log_level()

    log_path = Path(os.getenv("LOG_DIR", log_dir))
    log_path.mkdir(parents=True, exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = [
        console,
        _rotating(log_path / f"{log_file_prefix}.log", log_level),
        _rotating(log_path / f"{log_file_prefix}_error.log", logging.ERROR),
    ]

    # Framework chatter stays out of cart and checkout logs
    logging.getLogger("protean").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    return log_path


def setup_structlog() -> None:
    env = os.getenv("ENVIRONMENT", "development").lower()

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.contextvars.merge_contextvars,
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
    ]

    if env in ("production", "staging"):
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=True, max_frames=2),
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(
    level: str | None = None,
    log_dir: str | Path = "logs",
    log_file_prefix: str = "storefront",
) -> Path:
    log_path = setup_stdlib_logging(level=level, log_dir=log_dir, log_file_prefix=log_file_prefix)
    setup_structlog()
    return log_path
