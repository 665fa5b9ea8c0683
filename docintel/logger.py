"""
Application-wide logging configuration.
Uses rich for pretty console logging and standard file logging for persistence.
"""
import logging
from logging.handlers import RotatingFileHandler
from rich.logging import RichHandler
from .config import settings

def setup_logging():
    """Configure logging for the application."""
    settings.ensure_directories()

    logger = logging.getLogger("docintel")
    logger.setLevel(logging.DEBUG)

    # Remove existing handlers
    logger.handlers = []

    # Console Handler (Rich)
    console_handler = RichHandler(
        rich_tracebacks=True,
        show_time=True,
        show_path=False
    )
    console_handler.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    console_handler.setFormatter(logging.Formatter("%(message)s"))

    # File Handler
    log_file = settings.logs_dir / "app.log"
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    ))

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger

logger = setup_logging()
