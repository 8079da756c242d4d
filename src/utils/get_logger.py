import logging
import os
from datetime import UTC, datetime

import pytz

# Log timestamps follow the audience of the feeds (Brazil) unless overridden
TIMEZONE = pytz.timezone(os.getenv("LOG_TIMEZONE", "America/Sao_Paulo"))

"""
Module loggers for the proxy functions.
Console only; Cloud Functions ships stdout to Cloud Logging.
"""

Logger_Cache: dict[str, logging.Logger] = {}
Default_Level = logging.INFO


class LocalTimeFormatter(logging.Formatter):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.local_tz = TIMEZONE

    def format(self, record):
        utc_dt = datetime.fromtimestamp(record.created, UTC)
        local_time = utc_dt.astimezone(self.local_tz)

        record.local_time = local_time.strftime("%H:%M:%S")
        record.name = record.name[0:24]
        if record.levelno == logging.WARNING:
            self._style._fmt = "%(local_time)-9s %(name)-24s:%(levelname)-8s =====> %(message)s"
        elif record.levelno >= logging.ERROR:
            self._style._fmt = (
                "\n%(local_time)-9s %(name)-24s =====> ERROR \n%(message)s\n---END ERROR ---\n"
            )
        else:
            self._style._fmt = "%(local_time)-9s %(name)-24s:%(levelname)-8s %(message)s"

        return super().format(record)


def get_logger(name: str, level=None) -> logging.Logger:
    """Return a cached console logger with the specified name."""
    if name in Logger_Cache:
        return Logger_Cache[name]

    if level is None:
        level = Default_Level
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if isinstance(handler, logging.StreamHandler):
            logger.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(LocalTimeFormatter())
    logger.addHandler(ch)

    # Keep records off the root logger so Cloud Logging does not see them twice
    logger.propagate = False

    Logger_Cache[name] = logger

    return logger
