"""This file contains the closed 'enum' registries used throughout osinfo:
distribution identifiers, OS-release field keys, and kernel version
comparison results."""

import enum

# The canonical (lowercase) distribution name for each known OSReleaseID code.
# Code 0 is reserved for 'unknown', and has no name. Code 10 is unassigned.
_OS_RELEASE_ID_NAMES = {
    1: 'ubuntu',
    2: 'debian',
    3: 'fedora',
    4: 'centos',
    5: 'rhel',
    6: 'alpine',
    7: 'arch',
    8: 'amzn',
    9: 'opensuse-leap',
    11: 'sles',
}


class OSReleaseID(enum.IntEnum):
    """Recognized Linux distributions, as named by the ID field of the
    os-release file.

    Looking up a code that isn't in the registry is never an error; it simply
    yields ``UNKNOWN``, whose string form is empty. ::

        str(OSReleaseID(1))   # 'ubuntu'
        str(OSReleaseID(10))  # ''
    """

    UNKNOWN = 0
    UBUNTU = 1
    DEBIAN = 2
    FEDORA = 3
    CENTOS = 4
    RHEL = 5
    ALPINE = 6
    ARCH = 7
    AMZN = 8
    OPENSUSE_LEAP = 9
    SLES = 11

    @classmethod
    def _missing_(cls, value):
        """Any integer not in the registry maps to UNKNOWN."""

        if isinstance(value, int):
            return cls.UNKNOWN

        return None

    def __str__(self):
        return _OS_RELEASE_ID_NAMES.get(self.value, '')

    def __format__(self, format_spec):
        return format(str(self), format_spec)

    @classmethod
    def parse(cls, name: str) -> 'OSReleaseID':
        """Return the OSReleaseID for the given distribution name. The name is
        lowercased and trimmed first. Unrecognized names give UNKNOWN."""

        if name is None:
            return cls.UNKNOWN

        name = name.strip().lower()
        for code, canonical in _OS_RELEASE_ID_NAMES.items():
            if canonical == name:
                return cls(code)

        return cls.UNKNOWN


def parse_id(name: str) -> OSReleaseID:
    """Module level shortcut for ``OSReleaseID.parse()``."""

    return OSReleaseID.parse(name)


class OSReleaseField(enum.IntEnum):
    """The os-release keys osinfo keeps track of. KERNEL_RELEASE is synthetic;
    it never comes from the os-release file, and is filled in from uname."""

    NAME = 0
    ID = 1
    ID_LIKE = 2
    PRETTY_NAME = 3
    VERSION = 4
    VERSION_ID = 5
    VERSION_CODENAME = 6
    BUILD_ID = 7
    ANSI_COLOR = 8
    HOME_URL = 9
    SUPPORT_URL = 10
    BUG_REPORT_URL = 11
    KERNEL_RELEASE = 12

    def __str__(self):
        return self.name

    def __format__(self, format_spec):
        return format(str(self), format_spec)

    @classmethod
    def parse(cls, key: str):
        """Return the field for the given os-release file key, or None if
        the key isn't one we track. The synthetic KERNEL_RELEASE key is never
        accepted from a file.

        :rtype: Union[OSReleaseField, None]
        """

        if key == cls.KERNEL_RELEASE.name:
            return None

        return cls.__members__.get(key)


class KernelVersionComparison(enum.IntEnum):
    """How a given kernel release relates to the base (running) kernel
    release."""

    # The given (or base) release couldn't be parsed.
    INVALID = -1
    # The given release is older than the base.
    OLDER = 0
    # The given release is the same as the base.
    EQUAL = 1
    # The given release is newer than the base.
    NEWER = 2

    def __str__(self):
        return self.name.lower()

    def __format__(self, format_spec):
        return format(str(self), format_spec)
