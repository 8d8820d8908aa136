import os
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from loguru import logger

LOG_LEVEL_ENV = "ENS_SEARCH_LOG_LEVEL"
LOG_DIR_ENV = "ENS_SEARCH_LOG_DIR"
DEFAULT_LOG_LEVEL = "WARNING"


def configure_logging(environ=None) -> None:
    """(Re)install the loguru sinks from ENS_SEARCH_LOG_LEVEL / ENS_SEARCH_LOG_DIR.

    With no ``environ``, a ``.env`` file in the working directory is loaded first.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    log_level = (environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()
    log_dir = (environ.get(LOG_DIR_ENV) or "").strip()

    # stdout carries batch results, so every sink stays off it.
    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format="<level>{level: <8}</level> | {message}",
    )

    if log_dir:
        logger.add(
            Path(log_dir) / "ens_search_{time}.log",
            rotation="64 MB",
            retention="10 days",
            compression="zip",
            encoding="utf-8",
            level="DEBUG",
        )


configure_logging()
