"""Console logging for the command line interface."""

from __future__ import annotations

import logging

import click

ROOT_LOGGER_NAME = "simple_http_tester"

_LEVEL_STYLES = {
    logging.DEBUG: {"dim": True},
    logging.WARNING: {"fg": "yellow", "bold": True},
    logging.ERROR: {"fg": "red", "bold": True},
    logging.CRITICAL: {"fg": "red", "bold": True},
}
_LEVEL_PREFIXES = {
    logging.DEBUG: "* ",
    logging.WARNING: "warning: ",
    logging.ERROR: "error: ",
    logging.CRITICAL: "error: ",
}


class ClickEchoHandler(logging.Handler):
    """Writes log records to stderr through click, colored on request."""

    def __init__(self, *, color: bool) -> None:
        super().__init__()
        self.color = color

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            prefix = _LEVEL_PREFIXES.get(record.levelno, "")
            style = _LEVEL_STYLES.get(record.levelno)
            if prefix and style:
                prefix = click.style(prefix, **style)
            click.echo(f"{prefix}{message}", err=True, color=self.color)
        except Exception:  # pylint: disable=broad-exception-caught
            self.handleError(record)


def configure_cli_logging(*, color: bool, verbose: bool) -> logging.Logger:
    """Install the console handler on the package logger, replacing a previous one."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, ClickEchoHandler):
            logger.removeHandler(handler)
    logger.addHandler(ClickEchoHandler(color=color))
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
