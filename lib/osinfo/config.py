"""Runtime settings for osinfo. Everything here comes from the process
environment, and is looked up when asked for rather than at import time, so
that changes to the environment (in tests, mostly) are seen by the next
lookup."""

import logging
import os
from pathlib import Path
from typing import List

LOGGER = logging.getLogger(__name__)

OSINFO_ROOT = Path(__file__).resolve().parents[2]

#: Overrides the path to the os-release file when set and non-empty.
OS_RELEASE_ENV = 'LIBBPFGO_OSRELEASE_FILE'
#: The conventional os-release location.
DEFAULT_OS_RELEASE_PATH = '/etc/os-release'

#: Colon separated list of extra plugin directories.
PLUGIN_DIRS_ENV = 'OSINFO_PLUGIN_DIRS'

#: Log level name for the command line stderr handler.
LOG_LEVEL_ENV = 'OSINFO_LOG_LEVEL'
DEFAULT_LOG_LEVEL = 'WARNING'

LOG_FORMAT = "{asctime} {levelname} {name}: {message}"


def os_release_path() -> str:
    """Return the os-release path to use: the value of
    LIBBPFGO_OSRELEASE_FILE if it's set and non-empty, otherwise
    /etc/os-release."""

    path = os.environ.get(OS_RELEASE_ENV, '')
    if path:
        LOGGER.debug("Using os-release path '%s' from %s.", path, OS_RELEASE_ENV)
        return path

    return DEFAULT_OS_RELEASE_PATH


def plugin_dirs() -> List[Path]:
    """The directories to search for additional plugins."""

    raw_dirs = os.environ.get(PLUGIN_DIRS_ENV, '')

    return [Path(path) for path in raw_dirs.split(':') if path.strip()]


def log_level() -> int:
    """The configured log level, as a logging module level number. Bad level
    names fall back to the default."""

    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        LOGGER.warning("Invalid %s value '%s', using %s.",
                       LOG_LEVEL_ENV, name, DEFAULT_LOG_LEVEL)
        return logging.getLevelName(DEFAULT_LOG_LEVEL)

    return level


def get_version():
    """Returns the current version of osinfo."""
    version_path = OSINFO_ROOT / 'RELEASE.txt'

    try:
        with version_path.open() as file:
            lines = file.readlines()
            for line in lines:
                if line.startswith('RELEASE='):
                    return line.split('=')[1].strip()

            return '<unknown>'

    except FileNotFoundError:
        return '<unknown>'
