import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path
from contextvars import ContextVar

NO_CORRELATION_ID = "NO Correlation ID"
DEFAULT_LOG_FORMAT = (
    "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s"
)

# Context variable to store correlation ID across async/thread boundaries
correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default=NO_CORRELATION_ID
)


class CorrelationIdFilter(logging.Filter):
    """Logging filter to add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that ensures correlation_id always exists."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = NO_CORRELATION_ID
        return super().format(record)


def _has_handler(root: logging.Logger, handler_type: type) -> bool:
    return any(type(h) is handler_type for h in root.handlers)


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    log_format: str = DEFAULT_LOG_FORMAT,
):
    root = logging.getLogger()
    root.setLevel(logging.WARNING)  # Set root to WARNING to avoid too much noise
    formatter = SafeFormatter(log_format)

    # create_fastapi_app() may run more than once per process (tests)
    if not _has_handler(root, logging.StreamHandler):
        logger_handler = logging.StreamHandler(sys.stdout)
        logger_handler.setFormatter(formatter)
        logger_handler.addFilter(CorrelationIdFilter())
        root.addHandler(logger_handler)

    # Set up file logging if log_file provided with rotation
    if log_file and not _has_handler(root, RotatingFileHandler):
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(CorrelationIdFilter())
        root.addHandler(file_handler)

    logging.getLogger("chatroom").setLevel(
        getattr(logging, level.upper(), logging.INFO)
    )
    logging.getLogger(__name__).info(
        "Logging is set up: level=%s, log_file=%s", level, log_file
    )

    return root
