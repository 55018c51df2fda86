"""List the system variables and their values."""

from osinfo import errors
from osinfo import output
from osinfo import sys_vars
from .base_classes import Command


class SysVarsCommand(Command):
    """Plugin to show the system variables."""

    def __init__(self):
        super().__init__(
            name='sys_vars',
            description="Show the available system variables. These are named "
                        "pieces of host information. You can add your own "
                        "system variables via plugins.",
            short_help="Show the system variables.",
            aliases=['sys', 'system_variables'],
        )

    def _setup_arguments(self, parser):

        parser.add_argument(
            '--verbose', '-v',
            action='store_true', default=False,
            help='Display the path to the plugin file.'
        )

    def run(self, args):

        svars = sys_vars.get_vars()
        rows = []

        for name in svars:
            try:
                value = svars[name]
            except errors.SystemPluginError as err:
                self.logger.warning("%s", err)
                value = '<error>'

            rows.append({
                'name': name,
                'value': value,
                'description': svars.describe(name),
                'path': svars.plugin(name).path,
            })

        fields = ['name', 'value', 'description']
        if args.verbose:
            fields.append('path')

        output.draw_table(self.outfile, fields, rows,
                          title="Available System Variables")

        return 0
