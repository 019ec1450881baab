# app/core/logging.py
import logging
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Union[str, int] = logging.INFO) -> None:
    """
    Configure root logging for the service.

    Accepts either a level name ("DEBUG", "info") or a numeric level.
    Unknown names fall back to INFO.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    # requests/urllib3 log every connection at DEBUG; keep them quieter than our own modules
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))
