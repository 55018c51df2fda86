# Base classes and methods for Command plugins

# pylint: disable=W0603

import io
import logging
import sys

from yapsy import IPlugin

from osinfo import arguments
from osinfo import output

_COMMANDS = {}


def _reset():
    """Forget all commands. For unittests only."""

    global _COMMANDS

    _COMMANDS = {}


def add_command(command):
    """Register the command under its name and each of its aliases."""

    taken = [name for name in command.aliases if name in _COMMANDS]
    if taken:
        raise RuntimeError("Command '{}' can't use name(s) already taken by "
                           "another command: {}".format(command.name, ', '.join(taken)))

    for name in command.aliases:
        _COMMANDS[name] = command


def get_command(command_name):
    """Return the command registered under the given name or alias.

    :rtype: Command
    """

    return _COMMANDS[command_name]


class Command(IPlugin.IPlugin):
    """An osinfo sub-command. Subclasses add their arguments in
    ``_setup_arguments()`` and do their work in ``run()``, writing to
    ``self.outfile`` and ``self.errfile`` rather than stdout and stderr."""

    def __init__(self, name, description, short_help=None, aliases=None):
        """
        :param str name: The sub-command name.
        :param str description: Shown by 'osinfo <cmd> --help'.
        :param str short_help: Shown by 'osinfo --help'. Commands without one
            aren't listed there.
        :param list aliases: Other names for the sub-command.
        """
        super().__init__()

        self.logger = logging.getLogger('command.' + name)
        self.name = name
        self.description = description
        self.short_help = short_help
        self.aliases = [name] + list(aliases or [])

        self.outfile = sys.stdout
        self.errfile = sys.stderr

    def _setup_arguments(self, parser):
        """Add this command's arguments to its sub-command parser."""

    def activate(self):
        """Called by yapsy (or directly, for builtins). Adds the sub-command
        parser and registers the command."""

        kwargs = {'aliases': self.aliases[1:], 'description': self.description}
        # argparse lists any sub-command given a 'help', even a None one.
        if self.short_help is not None:
            kwargs['help'] = self.short_help

        parser = arguments.get_subparser().add_parser(self.name, **kwargs)
        self._setup_arguments(parser)

        add_command(self)

    def run(self, args):
        """Run the command.

        :param argparse.Namespace args: The parsed osinfo arguments.
        :return: The exit code; 0 for success.
        """

        raise NotImplementedError(
            "Command plugins must override the 'run' method.")

    def print_error(self, err, color=output.RED):
        """Write an error, along with its causes, to this command's error
        output."""

        output.fprint(err.pformat(), color=color, file=self.errfile)

    def silence(self):
        """Send this command's output and error output to string buffers."""

        self.outfile = io.StringIO()
        self.errfile = io.StringIO()

    def clear_output(self):
        """Return the (output, error output) a silenced command has written so
        far, and start both over."""

        if not isinstance(self.outfile, io.StringIO):
            raise RuntimeError("Only silenced commands can be cleared.")

        written = self.outfile.getvalue(), self.errfile.getvalue()
        self.silence()

        return written
