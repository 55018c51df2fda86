"""Terminal output helpers for the osinfo commands: colored and wrapped
printing, JSON encoding of osinfo objects, and plain text tables.

Colors are the standard 3/4 bit ANSI codes. ::

    output.fprint("Uh oh.", color=output.RED, file=sys.stderr)
"""

import enum
import json
import shutil
import sys
import textwrap
from pathlib import Path

from .os_info import OSInfo

BLACK = 30
RED = 31
GREEN = 32
YELLOW = 33
BLUE = 34
MAGENTA = 35
CYAN = 36
WHITE = 37
BOLD = 1


def fprint(*args, color=None, width=0, sep=' ', file=sys.stdout, end='\n'):
    """Print like print() does, optionally in color and wrapped.

    :param int color: ANSI color code to print with.
    :param Union[int,None] width: Wrap each line of text to this width. 0 means
        the terminal's width, and None disables wrapping.
    """

    text = sep.join(str(arg) for arg in args)

    if width is not None:
        if width == 0:
            width = shutil.get_terminal_size().columns or 80
        text = '\n'.join(textwrap.fill(line, width=width)
                         for line in text.splitlines())

    if color is not None:
        text = '\x1b[{}m{}\x1b[0m'.format(color, text)

    file.write(text + end)


def json_dumps(obj, **kwargs) -> str:
    """json.dumps(), but able to encode osinfo objects."""

    return json.dumps(obj, cls=OSInfoEncoder, **kwargs)


class OSInfoEncoder(json.JSONEncoder):
    """Encodes OSInfo objects as their ``as_dict()`` form, enums by their
    string form, and paths as strings."""

    def default(self, o):  # pylint: disable=E0202

        if isinstance(o, OSInfo):
            return o.as_dict()
        elif isinstance(o, enum.Enum):
            return str(o)
        elif isinstance(o, Path):
            return o.as_posix()

        return super().default(o)


def draw_table(outfile, fields, rows, title=None):
    """Write rows of data as a table, with each column as wide as its widest
    value. Column titles are the field names, capitalized. ::

        Vars
         Name       | Value
        ------------+--------
         os_id      | debian
         os_version | 12

    :param outfile: The file-like object to write to.
    :param list fields: The fields to show, in column order.
    :param list(dict) rows: The data. Missing fields are left blank.
    :param str title: A line to write above the table.
    """

    header = {field: field.replace('_', ' ').capitalize() for field in fields}
    str_rows = [{field: str(row.get(field, '')) for field in fields} for row in rows]

    widths = {field: max(len(r[field]) for r in [header] + str_rows)
              for field in fields}

    def line(row):
        return ' ' + ' | '.join(row[f].ljust(widths[f]) for f in fields).rstrip() + '\n'

    if title is not None:
        outfile.write(title + '\n')

    outfile.write(line(header))
    outfile.write('-' + '-+-'.join('-' * widths[f] for f in fields) + '-\n')
    for row in str_rows:
        outfile.write(line(row))
