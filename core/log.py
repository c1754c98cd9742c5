"""Logging helpers."""

import logging


def get_logger(name):
    """Return the module logger; handlers are configured by the application."""
    return logging.getLogger(name)


def configure_logging(level="WARNING"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
