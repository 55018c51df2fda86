"""Builtin system variable plugins and utilities. These are loaded manually for
speed."""

from .base_classes import SystemPlugin, SysVarDict, get_vars
from .btf_enabled import BTFEnabled
from .kernel_release import KernelRelease
from .os_release_vars import OSReleaseVar, os_release_vars


def register_core_plugins():
    """Add all builtin plugins and activate them."""

    for plugin in [BTFEnabled(), KernelRelease()] + os_release_vars():
        plugin.activate()


SystemPlugin.register_core_plugins = register_core_plugins
