import logging
import sys
from typing import Optional

from ..config import settings


def setup_logging(log_level: Optional[str] = None) -> None:
    """Setup application logging configuration."""

    # Determine log level
    if log_level is None:
        log_level = settings.log_level or ("DEBUG" if settings.debug else "INFO")

    level = getattr(logging, log_level.upper())

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("tranche_optimizer").setLevel(level)

    logging.info(f"Logging setup complete - Level: {log_level}")


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the application package."""
    if not name.startswith("tranche_optimizer"):
        name = f"tranche_optimizer.{name}"
    return logging.getLogger(name)
