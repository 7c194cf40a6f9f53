"""Process-wide logging for the Nexora contexts.

stdlib handlers (stdout plus rotating files under LOG_DIR) carry the output;
structlog renders it, as JSON in production and staging and as console lines
elsewhere. Every line logged by a context carries a `domain` key.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

import structlog

QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "httpx", "httpcore", "redis", "asyncio")
LEVELS = {"production": "INFO", "staging": "INFO", "development": "DEBUG", "test": "WARNING"}
ROTATE_BYTES = 10 * 1024 * 1024


def environment() -> str:
    return (os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def log_level() -> str:
    return os.getenv("LOG_LEVEL", LEVELS.get(environment(), "INFO")).upper()


def _rotating(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(path, maxBytes=ROTATE_BYTES, backupCount=5, encoding="utf-8")
    handler.setLevel(level)
    return handler


def _renderer():
    if environment() in ("production", "staging"):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stdout.isatty(),
        exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=4),
    )


def configure_logging(force: bool = False) -> None:
    """Install handlers and the structlog pipeline once per process.

    Each context's domain module calls this on import; only the first call
    (or one with `force=True`) does any work.
    """
    if structlog.is_configured() and not force:
        return

    level = log_level()
    log_dir = Path(os.getenv("LOG_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    stdout = logging.StreamHandler(sys.stdout)
    stdout.setLevel(level)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [
        stdout,
        _rotating(log_dir / "nexora.log", level),
        _rotating(log_dir / "nexora_error.log", logging.ERROR),
    ]
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

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
            _renderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, domain: str | None = None) -> structlog.stdlib.BoundLogger:
    logger = structlog.get_logger(name)
    return logger.bind(domain=domain) if domain else logger


def domain_log_context(domain: str):
    """Tag every line logged inside the block with `domain`, e.g. for one request."""
    return structlog.contextvars.bound_contextvars(domain=domain)
