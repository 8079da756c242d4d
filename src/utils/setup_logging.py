"""
Root logging setup for the Firebase Cloud Functions runtime.

Deployed functions have stdout captured by Cloud Logging, so records are
written with print(). The local emulator gets a plain stream handler.

Call setup_cloud_logging() once from main.py before the handlers are built.
"""

import logging
import os
import sys

_configured = False


class CloudLoggingHandler(logging.Handler):
    """Write formatted records to stdout for Cloud Logging to pick up."""

    def emit(self, record):
        try:
            msg = self.format(record)
            print(msg, file=sys.stdout, flush=True)
        except Exception:
            self.handleError(record)


class CloudLoggingFormatter(logging.Formatter):
    """Prefix every message with its level name."""

    def format(self, record):
        message = super().format(record)
        return f"{record.levelname}: {message}"


def is_emulator() -> bool:
    return bool(
        os.getenv("FUNCTIONS_EMULATOR")
        or os.getenv("FIRESTORE_EMULATOR_HOST")
        or os.getenv("FIREBASE_AUTH_EMULATOR_HOST")
    )


def setup_cloud_logging(level: int | str | None = None) -> logging.Logger:
    """
    Configure the root logger for the current runtime.

    Args:
        level: Log level; defaults to the LOG_LEVEL environment variable or INFO.

    Returns:
        The root logger.
    """
    global _configured

    root_logger = logging.getLogger()
    if _configured:
        return root_logger

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler: logging.Handler
    if is_emulator():
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(levelname)-8s %(name)s: %(message)s"))
    else:
        handler = CloudLoggingHandler()
        handler.setFormatter(CloudLoggingFormatter("%(name)s: %(message)s"))

    handler.setLevel(level)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    _configured = True

    root_logger.info(
        "Logging configured for %s", "emulator" if is_emulator() else "Cloud Functions"
    )
    return root_logger
