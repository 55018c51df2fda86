"""System variables that expose a single os-release field."""

from ..enums import OSReleaseField
from .base_classes import SystemPlugin


class OSReleaseVar(SystemPlugin):
    """Provides the value of one os-release field, or an empty string if the
    file doesn't set it."""

    def __init__(self, name, field: OSReleaseField, description):
        super().__init__(name=name, description=description,
                         priority=self.PRIO_CORE)
        self.field = field

    def _get(self, svars):
        return svars.os_info.get_os_release_field_value(self.field)


def os_release_vars():
    """The builtin os-release variables."""

    return [
        OSReleaseVar('os_id', OSReleaseField.ID,
                     "The distribution id from os-release (ubuntu, debian, ...)."),
        OSReleaseVar('os_name', OSReleaseField.NAME,
                     "The OS name from os-release."),
        OSReleaseVar('os_pretty_name', OSReleaseField.PRETTY_NAME,
                     "The human readable OS name and version."),
        OSReleaseVar('os_version', OSReleaseField.VERSION_ID,
                     "The OS version number (VERSION_ID) from os-release."),
    ]
