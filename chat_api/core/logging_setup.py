import logging
import sys
from typing import Optional

from chat_api.core.config import settings as default_settings


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None):
    """Configures logging to write to the console and, if set, a file."""
    level = level or default_settings.log_level
    log_file = default_settings.log_file if log_file is None else log_file

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))

    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )
    # Ensure specific loggers are also propagating or handled
    logging.getLogger("uvicorn").handlers = []  # Avoid double logging if uvicorn sets its own
    logging.getLogger("uvicorn").propagate = True
