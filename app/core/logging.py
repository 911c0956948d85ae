"""Logging configuration."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys

from app.core.config import get_settings
from app.core.log_filter import SensitiveDataFilter


def setup_logging() -> None:
    """Configure application logging with stdout and optional rotating file handlers."""
    settings = get_settings()

    handlers: list[logging.Handler] = [
        # Stdout handler for console output
        logging.StreamHandler(sys.stdout),
    ]

    if settings.log_to_file:
        logs_dir = Path(settings.log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)
        # Rotating file handler (10MB, 5 backups)
        handlers.append(
            RotatingFileHandler(
                logs_dir / "app.log",
                maxBytes=10 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8",
            )
        )

    if settings.enable_log_redaction:
        log_filter = SensitiveDataFilter(secrets=[settings.api_key] if settings.api_key else [])
        for handler in handlers:
            handler.addFilter(log_filter)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )
