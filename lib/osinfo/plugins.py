"""Plugin management. osinfo has two kinds of plugins, system variables and
commands. The builtin ones are registered directly; any others are found by
yapsy in the configured plugin directories."""

# pylint: disable=W0603

import logging
from pathlib import Path
from typing import List, Union

from . import arguments
from . import config
from .commands import Command
from .commands import base_classes as cmd_base_classes
from .errors import PluginError
from .sys_vars import SystemPlugin
from .sys_vars import base_classes as sys_base_classes

LOGGER = logging.getLogger(__name__)

_INITIALIZED = False
_PLUGIN_MANAGER = None

# Yapsy category name to plugin base class.
PLUGIN_CATEGORIES = {
    'sys': SystemPlugin,
    'command': Command,
}


def initialize_plugins(plugin_dirs: Union[List[Path], None] = None):
    """Activate the builtin system variables and commands, then any plugins
    yapsy finds in the plugin directories. Once per run.

    :param plugin_dirs: Where to look for plugins. Defaults to the directories
        in OSINFO_PLUGIN_DIRS.
    :raises PluginError: When a plugin can't be loaded or activated.
    :raises RuntimeError: If the plugins were already initialized.
    """

    global _INITIALIZED
    global _PLUGIN_MANAGER

    if _INITIALIZED:
        raise RuntimeError("The osinfo plugins are already initialized.")

    if plugin_dirs is None:
        plugin_dirs = config.plugin_dirs()

    # Commands add themselves to the base parser, so it must exist first.
    arguments.get_parser()

    for plugin_cls in PLUGIN_CATEGORIES.values():
        plugin_cls.register_core_plugins()

    _INITIALIZED = True

    if not plugin_dirs:
        LOGGER.debug("No plugin directories given, only builtin plugins loaded.")
        return

    # pylint: disable=import-outside-toplevel
    from yapsy.PluginManager import PluginManager

    dirs = [str(path) for path in plugin_dirs]
    try:
        manager = PluginManager(directories_list=dirs,
                                categories_filter=PLUGIN_CATEGORIES)
        manager.locatePlugins()
        manager.collectPlugins()
    except Exception as err:
        raise PluginError("Could not load plugins from {}".format(', '.join(dirs)),
                          prior_error=err)

    for info in manager.getAllPlugins():
        try:
            manager.activatePluginByName(info.name, info.category)
        except Exception as err:
            raise PluginError(
                "Could not activate {} plugin '{}' from {}"
                .format(info.category, info.name, info.path),
                prior_error=err)

        LOGGER.debug("Activated %s plugin '%s'.", info.category, info.name)

    _PLUGIN_MANAGER = manager


def list_plugins():
    """The plugins loaded from the plugin directories, as a dict of yapsy
    PluginInfo objects by name for each category. Builtins aren't included.

    :raises RuntimeError: If the plugins haven't been initialized.
    """

    if not _INITIALIZED:
        raise RuntimeError("The osinfo plugins haven't been initialized.")

    found = {category: {} for category in PLUGIN_CATEGORIES}

    if _PLUGIN_MANAGER is not None:
        for category in found:
            for info in _PLUGIN_MANAGER.getPluginsOfCategory(category):
                found[category][info.name] = info

    return found


def _reset_plugins():
    """Forget all plugins and sub-commands. For unittests only."""

    global _INITIALIZED
    global _PLUGIN_MANAGER

    _INITIALIZED = False
    _PLUGIN_MANAGER = None

    # pylint: disable=protected-access
    sys_base_classes._reset()
    cmd_base_classes._reset()
    arguments.reset_parser()
