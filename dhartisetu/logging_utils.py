"""
Console logging setup for applications embedding the client.
The library itself only logs through module-level loggers.
"""

import logging
import os
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL_ENV = "DHARTISETU_LOG_LEVEL"


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure root logging so `[API]` request lines reach the console.

    Args:
        level: Logging level as int or name (default: $DHARTISETU_LOG_LEVEL or INFO)
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
