"""System variables give a name to each piece of host information osinfo can
gather, so it can be looked up by name (from the command line, or by other
tools)."""

# pylint: disable=W0603

import collections.abc
import inspect
import logging
import re
from typing import Dict

from yapsy import IPlugin

from ..errors import SystemPluginError, UnameError
from ..os_info import OSInfo, get_os_info

LOGGER = logging.getLogger(__name__)

_SYS_VAR_DICT = None
_LOADED_PLUGINS = {}  # type: Dict[str, SystemPlugin]


class SysVarDict(collections.abc.Mapping):
    """A read-only mapping of system variable names to values. Each value is
    computed on first lookup and kept for the life of the dictionary, and all
    of them come from a single snapshot of the host's OSInfo."""

    def __init__(self):
        self._values = {}
        self._os_info = None

    @property
    def os_info(self) -> OSInfo:
        """The host OSInfo shared by every variable in this dictionary. When
        uname fails, this holds the os-release values only."""

        if self._os_info is None:
            try:
                self._os_info = get_os_info()
            except UnameError as err:
                LOGGER.warning("%s", err)
                self._os_info = err.os_info

        return self._os_info

    def __getitem__(self, name):
        if name not in self._values:
            self._values[name] = self.plugin(name).get(self)

        return self._values[name]

    def __iter__(self):
        return iter(sorted(_LOADED_PLUGINS))

    def __len__(self):
        return len(_LOADED_PLUGINS)

    def __contains__(self, name):
        return name in _LOADED_PLUGINS

    @staticmethod
    def plugin(name) -> 'SystemPlugin':
        """Return the plugin that provides the named variable."""

        if name not in _LOADED_PLUGINS:
            raise KeyError("No system variable named '{}'.".format(name))

        return _LOADED_PLUGINS[name]

    def describe(self, name) -> str:
        """Return the description of the named variable."""

        return self.plugin(name).description

    def forget(self, name):
        """Drop the cached value for the named variable, if any."""

        self._values.pop(name, None)


def _reset():
    global _SYS_VAR_DICT

    _LOADED_PLUGINS.clear()
    _SYS_VAR_DICT = None


def get_vars() -> SysVarDict:
    """Get the system variable dictionary for this run of osinfo."""

    global _SYS_VAR_DICT

    if _SYS_VAR_DICT is None:
        _SYS_VAR_DICT = SysVarDict()

    return _SYS_VAR_DICT


class SystemPlugin(IPlugin.IPlugin):
    """Each system variable plugin provides one named, string valued piece of
    host information. Subclasses override ``_get()``."""

    PRIO_CORE = 0
    PRIO_COMMON = 10
    PRIO_USER = 20

    NAME_RE = re.compile(r'^[a-zA-Z0-9_.-]+$')

    def __init__(self, name, description, priority=PRIO_COMMON):
        """
        :param str name: The name of the system variable being provided.
        :param str description: Short description of this value.
        :param int priority: Of two plugins with the same name, the one with
            the higher priority wins.
        """
        super().__init__()

        if self.NAME_RE.match(name) is None:
            raise SystemPluginError(
                "Invalid system variable name: '{}'".format(name))

        self.name = name
        self.description = description
        self.priority = priority
        self.path = inspect.getfile(type(self))

    def _get(self, svars: SysVarDict) -> str:
        """Compute the value. Host info should come from ``svars.os_info``,
        so every variable sees the same snapshot."""

        raise NotImplementedError

    def get(self, svars: SysVarDict) -> str:
        """Compute this variable's value for the given dictionary.

        :raises SystemPluginError: When the plugin fails, or returns anything
            but a string.
        """

        try:
            value = self._get(svars)
        except Exception as err:
            raise SystemPluginError(
                "Error getting value for system variable '{}'".format(self.name),
                prior_error=err)

        if not isinstance(value, str):
            raise SystemPluginError(
                "System variable '{}' ({}) gave a {} instead of a string."
                .format(self.name, self.path, type(value).__name__),
                data={'value': value})

        return value

    def activate(self):
        """Make this plugin the provider of its variable, unless one of a
        higher priority is already loaded."""

        current = _LOADED_PLUGINS.get(self.name)

        if current is not None and current.priority == self.priority:
            raise SystemPluginError(
                "System variable '{}' is provided by both {} and {} at priority {}."
                .format(self.name, current.path, self.path, self.priority))

        if current is None or self.priority > current.priority:
            if current is not None:
                LOGGER.warning("System variable '%s' from %s overrides the one from %s.",
                               self.name, self.path, current.path)
            _LOADED_PLUGINS[self.name] = self
        else:
            LOGGER.warning("System variable '%s' from %s ignored, a higher priority "
                           "one is loaded.", self.name, self.path)

    def deactivate(self):
        """Stop providing this plugin's variable."""

        if _LOADED_PLUGINS.get(self.name) is self:
            del _LOADED_PLUGINS[self.name]
            if _SYS_VAR_DICT is not None:
                _SYS_VAR_DICT.forget(self.name)
