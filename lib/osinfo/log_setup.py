"""Logging for the osinfo command. Library modules only log through their
module loggers; handlers are attached here, and only by the command line entry
point."""

import logging
import sys

from . import config

YAPSY_FORMAT = "\x1b[31m{asctime} yapsy: {message}\x1b[0m"


def setup_loggers(verbose=False, quiet=False, err_out=sys.stderr) -> bool:
    """Send osinfo's log messages to stderr.

    The level is DEBUG with verbose, ERROR with quiet, and otherwise
    OSINFO_LOG_LEVEL (WARNING by default). Plugin loading messages from yapsy
    get their own handler, in red.

    :param bool verbose: Log everything.
    :param bool quiet: Only log errors.
    :param IO[str] err_out: The stream to log to, for tests.
    """

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = config.log_level()

    root_logger = logging.getLogger()
    # Filtering happens in the handlers.
    root_logger.setLevel(logging.DEBUG)

    handler = logging.StreamHandler(err_out)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT, style='{'))
    root_logger.addHandler(handler)

    yapsy_handler = logging.StreamHandler(err_out)
    yapsy_handler.setFormatter(logging.Formatter(YAPSY_FORMAT, style='{'))
    yapsy_logger = logging.getLogger('yapsy')
    yapsy_logger.setLevel(logging.ERROR if quiet else logging.WARNING)
    yapsy_logger.addHandler(yapsy_handler)
    yapsy_logger.propagate = False

    return True
