"""
Logging setup for the card service.

Card creations and deletions are logged at INFO by the store, rejected
requests at WARNING by the error handlers.  ``setup_logging`` sends
them to stderr and, when ``LOG_FILE`` is set, to that file as well.
"""

import logging
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger unless something already did.

    ``level`` is a level name such as ``"debug"``; unknown names fall
    back to INFO.  A root logger that already has handlers is left
    alone, so repeated ``create_app`` calls and test runners neither
    stack handlers nor open the log file twice.
    """
    if logging.getLogger().handlers:
        return

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, datefmt=DATE_FORMAT, handlers=handlers)
