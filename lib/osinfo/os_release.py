"""Parse the os-release file (see os-release(5)).

The file is a list of shell style variable assignments: ::

    NAME="Debian GNU/Linux"
    ID=debian
    # Comments and blank lines are ignored.
    PRETTY_NAME='Debian GNU/Linux 12 (bookworm)'

Parsing is tolerant. Lines that aren't assignments are skipped, as are keys
osinfo doesn't track. Only failure to read the file as text is an error.
"""

import logging
from pathlib import Path
from typing import Dict, IO, Iterable, Tuple, Union

from . import config
from .enums import OSReleaseField
from .errors import OSReleaseOpenError, OSReleaseParseError

LOGGER = logging.getLogger(__name__)

QUOTE_CHARS = ('"', "'")

# Backslash escapes honored inside double quotes, and what they stand for.
DQUOTE_ESCAPES = {
    '\\': '\\',
    '"': '"',
    '$': '$',
    '`': '`',
}


def unescape_double_quoted(value: str) -> str:
    """Resolve the escapes allowed in a double quoted value. A backslash
    before any other character (or at the end of the value) is kept as is."""

    out = []
    i = 0
    while i < len(value):
        char = value[i]
        if char == '\\' and i + 1 < len(value) and value[i + 1] in DQUOTE_ESCAPES:
            out.append(DQUOTE_ESCAPES[value[i + 1]])
            i += 2
        else:
            out.append(char)
            i += 1

    return ''.join(out)


def parse_value(raw_value: str) -> str:
    """Turn the right hand side of an assignment into its string value.

    Matching outer quotes are removed. Double quoted values have their
    escapes resolved, single quoted values are taken literally. Unquoted
    values lose any trailing whitespace and are otherwise left alone."""

    value = raw_value.rstrip()

    if len(value) >= 2 and value[0] in QUOTE_CHARS and value[-1] == value[0]:
        quote = value[0]
        value = value[1:-1]
        if quote == '"':
            value = unescape_double_quoted(value)

    return value


def parse_line(line: str) -> Union[Tuple[str, str], None]:
    """Split a single line into a (key, value) pair. Returns None for blank
    lines, comments, and anything else that isn't an assignment."""

    line = line.rstrip('\r\n')
    stripped = line.strip()

    if not stripped or stripped.startswith('#'):
        return None

    if '=' not in line:
        return None

    key, raw_value = line.split('=', 1)
    key = key.strip()
    if not key:
        return None

    return key, parse_value(raw_value)


def parse_lines(lines: Iterable[str]) -> Dict[OSReleaseField, str]:
    """Parse os-release formatted lines into a dictionary of field values.
    When a key repeats, the last value wins."""

    values = {}

    for lineno, line in enumerate(lines, start=1):
        parsed = parse_line(line)
        if parsed is None:
            continue

        key, value = parsed
        field = OSReleaseField.parse(key)
        if field is None:
            LOGGER.debug("Skipping untracked os-release key '%s' on line %d.",
                         key, lineno)
            continue

        values[field] = value

    return values


def parse(stream: IO[str], path: str = '<stream>') -> Dict[OSReleaseField, str]:
    """Parse an already opened os-release text stream.

    :param stream: The stream to read from.
    :param path: The name to use for the stream in error messages.
    :raises OSReleaseParseError: When the stream can't be read or decoded.
    """

    try:
        return parse_lines(stream)
    except UnicodeDecodeError as err:
        raise OSReleaseParseError(
            "os-release file '{}' is not valid UTF-8".format(path), prior_error=err)
    except OSError as err:
        raise OSReleaseParseError(
            "Error reading os-release file '{}'".format(path), prior_error=err)


def open_os_release(path: Union[str, Path]) -> IO[str]:
    """Open the os-release file at path for reading.

    :raises OSReleaseOpenError: When the file can't be opened. The error
        message is always 'could not open LIBBPFGO_OSRELEASE_FILE <path>',
        whether or not the path came from that environment variable.
    """

    try:
        return Path(path).open(encoding='utf-8', errors='strict')
    except OSError as err:
        raise OSReleaseOpenError(path) from err


def read_os_release(path: Union[str, Path, None] = None) \
        -> Tuple[str, Dict[OSReleaseField, str]]:
    """Find, open, and parse the os-release file.

    :param path: The file to read. If not given, this is resolved from the
        environment (see ``config.os_release_path()``).
    :returns: The path actually used, and the parsed field values.
    """

    if path is None:
        path = config.os_release_path()
    path = str(path)

    with open_os_release(path) as release_file:
        values = parse(release_file, path)

    LOGGER.debug("Read %d os-release fields from '%s'.", len(values), path)

    return path, values
