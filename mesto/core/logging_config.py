# Standard library imports
import logging
import sys
from pathlib import Path

# Local application imports
from .config import get_settings

REQUEST_LOGGER_NAME = "mesto.request"
ERROR_LOGGER_NAME = "mesto.error"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging() -> logging.Logger:
    """
    Configure application logging.

    - Console output for every logger at the configured level
    - With LOG_DIR set: request.log for the request logger and
      error.log for everything at ERROR and above
    """
    settings = get_settings()
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)

    # Drop handlers left over from a previous setup (tests, reloads)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if settings.log_dir:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        request_handler = logging.FileHandler(log_dir / "request.log", mode="a", encoding="utf-8")
        request_handler.setFormatter(formatter)
        request_logger = logging.getLogger(REQUEST_LOGGER_NAME)
        request_logger.handlers.clear()
        request_logger.addHandler(request_handler)

        error_handler = logging.FileHandler(log_dir / "error.log", mode="a", encoding="utf-8")
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        root_logger.addHandler(error_handler)

    # uvicorn's access log duplicates the request logger
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return root_logger
