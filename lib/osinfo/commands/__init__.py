"""Built-in commands, as well as the base classes for those commands, go in this
module. While commands are all technically plugins, these are manually added because
its faster than searching for them and loading them as plugins."""

from .base_classes import Command, add_command, get_command
from .compare import CompareCommand
from .show import ShowCommand
from .sys_vars_cmd import SysVarsCommand

_builtin_commands = [
    CompareCommand,
    ShowCommand,
    SysVarsCommand,
]


def register_core_plugins():
    """Add all the builtin commands and activate them."""

    for cls in _builtin_commands:
        cmd = cls()
        cmd.activate()


# osinfo looks for this function on the Plugin class
Command.register_core_plugins = register_core_plugins
