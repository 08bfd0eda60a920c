import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO", fmt: Optional[str] = None) -> None:
    """
    Configure logging globally with support for ENV override.
    """
    env_level = os.getenv("KGTOOLS_LOG_LEVEL")
    resolved_level = (env_level or level or "INFO").upper()

    logging.basicConfig(
        level=getattr(logging, resolved_level, logging.INFO),
        format=fmt or LOG_FORMAT,
    )
