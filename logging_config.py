"""
Centralized logging configuration for the Photo Print Station.

Print attempts run on Flask request threads, and two kiosks may print to
different printers at the same time. Every record therefore carries the
name of the thread that produced it.

Features:
    - Thread name in every log message
    - Console output (always enabled)
    - Rotating file logs (optional, for production kiosks)
    - Separate error log for ERROR/CRITICAL messages

Log Format:
    2026-03-02 09:12:04 [INFO    ] [MainThread] photo_print_station.app - Starting
    2026-03-02 09:12:09 [INFO    ] [Thread-3 (process_request_thread)] photo_print_station.services.print_service - [HP_LaserJet] Submitted

Usage:
    # At application startup
    from logging_config import setup_logging, get_logger

    setup_logging(log_level=logging.INFO, enable_file_logging=True)

    # In modules
    logger = get_logger(__name__)

"""

import logging
import sys
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


APP_LOGGER_NAME = "photo_print_station"

LOG_FORMAT = "%(asctime)s [%(levelname)-8s] [%(thread_name)s] %(name)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_LOG_BYTES = 5 * 1024 * 1024  # 5 MB per file
LOG_BACKUP_COUNT = 3


# =============================================================================
# THREAD CONTEXT FILTER
# =============================================================================

class ThreadContextFilter(logging.Filter):
    """
    Logging filter that stamps thread context onto each record.

    Adds:
        - thread_name: Name of the current thread (e.g., "MainThread")
        - thread_id: Numeric ID of the current thread
    """

    def filter(self, record: logging.LogRecord) -> bool:
        current_thread = threading.current_thread()
        record.thread_name = current_thread.name
        record.thread_id = threading.get_ident()
        return True


# =============================================================================
# LOGGING SETUP
# =============================================================================

def _make_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    handler.addFilter(ThreadContextFilter())
    return handler


def setup_logging(
    app_name: str = APP_LOGGER_NAME,
    log_level: int = logging.INFO,
    log_dir: Optional[Path] = None,
    enable_file_logging: bool = False,
) -> logging.Logger:
    """
    Configure application logging with thread context.

    Sets up a console handler and, when enabled, a rotating application log
    plus an ERROR-only log in log_dir. Calling it again replaces the
    handlers, so tests and the app factory can reconfigure freely.

    Args:
        app_name: Name of the application logger
        log_level: Minimum log level (default: INFO)
        log_dir: Directory for log files (default: ./logs next to this file)
        enable_file_logging: Whether to write log files (default: False)

    Returns:
        Configured application logger
    """
    logger = logging.getLogger(app_name)
    logger.setLevel(log_level)
    logger.propagate = False
    logger.handlers.clear()

    logger.addHandler(_make_handler(logging.StreamHandler(sys.stdout), log_level))

    if enable_file_logging:
        if log_dir is None:
            log_dir = Path(__file__).parent / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)

        app_log_file = log_dir / f"{app_name}.log"
        logger.addHandler(_make_handler(
            RotatingFileHandler(
                filename=app_log_file,
                maxBytes=MAX_LOG_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8"
            ),
            log_level,
        ))

        # Failed prints and cleanup warnings are easiest to audit in isolation
        logger.addHandler(_make_handler(
            RotatingFileHandler(
                filename=log_dir / f"{app_name}_error.log",
                maxBytes=MAX_LOG_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8"
            ),
            logging.ERROR,
        ))

        logger.info(f"File logging enabled: {app_log_file}")

    logger.info(f"Logging configured at level {logging.getLevelName(log_level)}")
    return logger


# =============================================================================
# LOGGER FACTORY FUNCTIONS
# =============================================================================

def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger under the application namespace.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger inheriting the configuration from setup_logging()

    Example:
        # In services/print_service.py
        logger = get_logger(__name__)
        # Logger name: "photo_print_station.services.print_service"
    """
    if not name.startswith(APP_LOGGER_NAME):
        name = f"{APP_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
