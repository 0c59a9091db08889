"""Logging setup for the API and the setup tool."""

import logging

LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"

# Driver loggers that are noisy at INFO.
_QUIET_LOGGERS = ("pymongo", "httpx", "hpack")


def configure_logging(level: int | str = logging.INFO) -> None:
    """Attach one stream handler to the ``artvault`` logger.

    Calling it again only updates the level.
    """
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger("artvault")
    logger.setLevel(level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
