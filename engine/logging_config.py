"""
Logging setup for hosts embedding the engine.

Engine modules only create module-level loggers; this helper applies the
configured level once, the way an application factory would.
"""

import logging
from typing import Optional

from engine.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

ENGINE_LOGGERS = ("engine", "application")


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure engine loggers from settings.

    Adds a stream handler to the root logger only if none is installed yet,
    so hosts that already configure logging keep their handlers.

    Args:
        settings: Optional Settings instance. Defaults to get_settings().
    """
    if settings is None:
        settings = get_settings()

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)

    for name in ENGINE_LOGGERS:
        logging.getLogger(name).setLevel(settings.log_level)
