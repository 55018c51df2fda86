"""Show the host's os-release information."""

import errno

from osinfo import errors
from osinfo import output
from osinfo.enums import OSReleaseField
from osinfo.os_info import get_os_info
from .base_classes import Command


class ShowCommand(Command):
    """Print the distribution and kernel information osinfo gathered."""

    def __init__(self):
        super().__init__(
            name='show',
            description="Show the host's os-release fields and kernel release.",
            short_help="Show host OS info.",
        )

    def _setup_arguments(self, parser):

        parser.add_argument(
            '--json', action='store_true', default=False,
            help="Give the output as a JSON object.")
        parser.add_argument(
            '--field', choices=[field.name for field in OSReleaseField],
            help="Print only the value of the given field.")

    def run(self, args):
        """Gather the OS info and print it."""

        try:
            info = get_os_info()
        except errors.UnameError as err:
            self.print_error(err, color=output.YELLOW)
            info = err.os_info
        except errors.OSInfoError as err:
            self.print_error(err)
            return errno.ENOENT

        if args.field is not None:
            field = OSReleaseField[args.field]
            output.fprint(info.get_os_release_field_value(field), file=self.outfile)
            return 0

        if args.json:
            output.fprint(output.json_dumps(info, indent=2),
                          file=self.outfile, width=None)
            return 0

        rows = [{'field': field.name, 'value': value}
                for field, value in sorted(info.get_os_release_all_field_values().items())]

        output.draw_table(
            self.outfile, ['field', 'value'], rows,
            title="OS Info from {} (distribution: {})".format(
                info.get_os_release_file_path(),
                str(info.get_os_release_id()) or 'unknown'))

        return 0
