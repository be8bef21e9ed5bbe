"""
Logging setup shared by the json_to_php modules.
"""

import logging

import click

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class ClickEchoHandler(logging.Handler):
    """Send log records to stderr through click, resolving the stream at emit time."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a json_to_php module."""
    return logging.getLogger(name)


def setup_logging(verbose: bool = False) -> None:
    """Configure the json_to_php logger.

    Warnings and errors are always shown; ``verbose`` lowers the threshold to DEBUG.
    """
    logger = logging.getLogger("json_to_php")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not logger.handlers:
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
