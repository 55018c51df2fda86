"""The osinfo command line entry point. Both bin/osinfo and the installed
'osinfo' console script exit with whatever main() returns."""

import logging
import sys

from . import arguments
from . import commands
from . import errors
from . import log_setup
from . import output
from . import plugins

LOGGER = logging.getLogger(__name__)


def main(argv=None) -> int:
    """Load the plugins, parse the command line, and run the chosen command.

    :param list argv: The arguments, without the program name. Defaults to
        sys.argv[1:].
    :return: The exit code.
    """

    parser = arguments.get_parser()

    # Plugin commands must be on the parser before parsing.
    try:
        plugins.initialize_plugins()
    except errors.PluginError as err:
        output.fprint("Could not load the osinfo plugins.", color=output.RED,
                      file=sys.stderr)
        output.fprint(err.pformat(), file=sys.stderr)
        return 1

    args = parser.parse_args(argv)

    log_setup.setup_loggers(verbose=args.verbose, quiet=args.quiet)

    if args.command_name is None:
        parser.print_help(sys.stderr)
        return 2

    return run_cmd(args)


def run_cmd(args) -> int:
    """Run the command named in the parsed arguments, and return its exit
    code. osinfo errors that escape the command are printed as is, anything
    else is logged with its traceback."""

    cmd = commands.get_command(args.command_name)

    try:
        return cmd.run(args)
    except KeyboardInterrupt:
        return 130
    except errors.OSInfoError as err:
        cmd.print_error(err)
        return 1
    except Exception:  # pylint: disable=broad-except
        LOGGER.exception("Unexpected error running 'osinfo %s'.", args.command_name)
        return 1
