"""Logging setup"""
from pathlib import Path
import logging

from formgateway.config import Settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(settings: Settings) -> None:
    """
    Configure the root logger for the process

    Console output is kept outside production. When a log directory is
    configured, error.log receives ERROR records and combined.log
    receives everything from INFO up.
    """
    handlers: list[logging.Handler] = []

    if not settings.is_production:
        handlers.append(logging.StreamHandler())

    if settings.log_dir:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        error_handler = logging.FileHandler(log_dir / "error.log")
        error_handler.setLevel(logging.ERROR)
        handlers.append(error_handler)
        handlers.append(logging.FileHandler(log_dir / "combined.log"))

    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
