"""The OSInfo object ties together the os-release file contents and the
running kernel release.

Typical use: ::

    from osinfo import get_os_info, OSReleaseField, OSReleaseID

    info = get_os_info()
    if info.get_os_release_id() == OSReleaseID.UBUNTU:
        ...

    info.get_os_release_field_value(OSReleaseField.VERSION_ID)
    info.compare_os_base_kernel_release('5.8')
"""

import logging
from typing import Dict

from . import kernel
from . import os_release
from .enums import OSReleaseField, OSReleaseID, KernelVersionComparison
from .errors import UnameError

LOGGER = logging.getLogger(__name__)


class OSInfo:
    """Information about the host OS, gathered once. Nothing here changes after
    construction, so instances can be shared between threads freely.

    Build these with ``get_os_info()``.
    """

    def __init__(self, os_release_file_path: str = '',
                 os_release_field_values: Dict[OSReleaseField, str] = None):
        """
        :param os_release_file_path: The os-release file these values came from.
        :param os_release_field_values: The field values, by field.
        """

        self._os_release_file_path = os_release_file_path
        self._os_release_field_values = dict(os_release_field_values or {})
        self._os_release_id = OSReleaseID.parse(
            self._os_release_field_values.get(OSReleaseField.ID, ''))

    def get_os_release_file_path(self) -> str:
        """The path of the os-release file that was read."""

        return self._os_release_file_path

    def get_os_release_id(self) -> OSReleaseID:
        """The distribution, or OSReleaseID.UNKNOWN if the ID field was missing
        or not a distribution we know about."""

        return self._os_release_id

    def get_os_release_field_value(self, field: OSReleaseField) -> str:
        """Return the value of the given field, or an empty string if it
        wasn't set."""

        return self._os_release_field_values.get(field, '')

    def get_os_release_all_field_values(self) -> Dict[OSReleaseField, str]:
        """Return a copy of all the set field values."""

        return dict(self._os_release_field_values)

    def compare_os_base_kernel_release(self, given: str) -> KernelVersionComparison:
        """Compare the given kernel release to the running kernel's release.

        :returns: NEWER if 'given' is newer than the running kernel, OLDER
            if it's older, EQUAL otherwise.
        :raises KernelVersionError: If either release can't be parsed.
        """

        base = self.get_os_release_field_value(OSReleaseField.KERNEL_RELEASE)

        return kernel.compare_kernel_releases(base, given)

    def as_dict(self) -> dict:
        """Return this info as a json friendly dictionary."""

        return {
            'os_release_file_path': self._os_release_file_path,
            'os_release_id': str(self._os_release_id),
            'fields': {field.name: value for field, value
                       in sorted(self._os_release_field_values.items())},
        }

    def __eq__(self, other):
        if not isinstance(other, OSInfo):
            return NotImplemented

        return (self._os_release_file_path == other._os_release_file_path and
                self._os_release_field_values == other._os_release_field_values)

    __hash__ = None

    def __repr__(self):
        return '<OSInfo {} from {}>'.format(
            str(self._os_release_id) or 'unknown', self._os_release_file_path)


def get_os_info() -> OSInfo:
    """Gather the host OS information.

    The os-release file is LIBBPFGO_OSRELEASE_FILE, when that is set and
    non-empty, otherwise /etc/os-release.

    :raises OSReleaseOpenError: If the os-release file can't be opened.
    :raises OSReleaseParseError: If it can't be read as text.
    :raises UnameError: If the running kernel release can't be found. The
        partially filled OSInfo object is available as the error's
        ``os_info`` attribute.
    """

    path, values = os_release.read_os_release()

    try:
        values[OSReleaseField.KERNEL_RELEASE] = kernel.get_kernel_release()
    except UnameError as err:
        err.os_info = OSInfo(path, values)
        raise

    return OSInfo(path, values)
