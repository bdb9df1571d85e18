"""
Console logging with colorama colours.

Logs always go to stderr so they never end up inside a report that is
written to stdout.
"""
import logging
import sys

from colorama import Fore, Style


ROOT_LOGGER = 'pinfo'

LEVEL_COLORS = {
    'DEBUG': Fore.CYAN,
    'INFO': Fore.GREEN,
    'WARNING': Fore.YELLOW,
    'ERROR': Fore.RED,
    'CRITICAL': Fore.MAGENTA
}

LEVEL_PREFIXES = {
    'DEBUG': '[.]',
    'INFO': '[*]',
    'WARNING': '[!]',
    'ERROR': '[!]',
    'CRITICAL': '[!]'
}


class ColorFormatter(logging.Formatter):
    """Formats records as `[*] message` in the colour of their level."""

    def format(self, record):
        color = LEVEL_COLORS.get(record.levelname, '')
        prefix = LEVEL_PREFIXES.get(record.levelname, '[?]')
        message = f"{color}{prefix} {record.getMessage()}{Style.RESET_ALL}"
        if record.exc_info:
            message += '\n' + self.formatException(record.exc_info)
        return message


def get_logger(name):
    """Return a logger below the pinfo namespace."""
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def setup_logging(level='INFO', stream=None):
    """Install one coloured stderr handler on the pinfo root logger."""
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ColorFormatter())
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
