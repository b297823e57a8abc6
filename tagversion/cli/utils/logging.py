import logging
import sys

import click


logger = logging.getLogger("tagversion")


class ConsoleFormatter(logging.Formatter):
    """Bare messages, warnings highlighted in yellow."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno == logging.WARNING:
            return click.style(message, fg="yellow")
        return message


def configure_logging(debug: bool):
    """
    Configures the logging system based on the debug flag.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ConsoleFormatter("%(message)s"))

    log_level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(log_level)

    if not logger.hasHandlers():
        logger.addHandler(handler)
