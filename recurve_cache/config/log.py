"""Logging setup for applications and scripts embedding the cache."""

import logging
import sys
from typing import Optional

from .settings import settings


def setup_logging(debug: Optional[bool] = None) -> None:
    """
    Configure root logging for recurve-cache output.

    Args:
        debug: Force DEBUG level. Defaults to settings.DEBUG; when neither
               is set, settings.LOG_LEVEL is used.
    """
    if debug is None:
        debug = settings.DEBUG
    level = logging.DEBUG if debug else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )
