"""Kernel release lookup and comparison."""

import logging
import os
import re
from pathlib import Path
from typing import Tuple

from .enums import KernelVersionComparison
from .errors import KernelVersionError, UnameError

LOGGER = logging.getLogger(__name__)

# Releases have at most major.minor.patch components.
MAX_VERSION_PARTS = 3

# Only plain, non-negative decimal components are accepted.
VERSION_PART_RE = re.compile(r'[0-9]+')

BTF_VMLINUX_PATH = '/sys/kernel/btf/vmlinux'


def get_kernel_release() -> str:
    """Return the running kernel's release string, as `uname -r` would.

    :raises UnameError: If the release can't be determined.
    """

    try:
        release = os.uname().release
    except OSError as err:
        raise UnameError("uname failed to report the kernel release",
                         prior_error=err)

    if not release:
        raise UnameError("uname returned an empty kernel release")

    return release


def parse_kernel_version(release: str, which: str = 'given') -> Tuple[int, int, int]:
    """Parse a dotted kernel release into a (major, minor, patch) tuple.
    Missing trailing components are zero, so '5' is (5, 0, 0). A build tag
    after the first '-', and a trailing '+', are ignored, so
    '5.15.0-91-generic' is (5, 15, 0).

    :param release: The release string, like '5.15.0'.
    :param which: Which side of a comparison this is ('base' or 'given'),
        for error messages.
    :raises KernelVersionError: For more than three components, or for any
        component that isn't a plain decimal number.
    """

    numeric = release.split('-', 1)[0]
    if numeric.endswith('+'):
        numeric = numeric[:-1]

    parts = numeric.split('.')
    if len(parts) > MAX_VERSION_PARTS:
        raise KernelVersionError(
            "invalid {} kernel version format: {}".format(which, release))

    version = []
    for part in parts:
        if VERSION_PART_RE.fullmatch(part) is None:
            raise KernelVersionError(
                "invalid {} kernel version value: {} issue with: {}"
                .format(which, release, part))
        version.append(int(part))

    while len(version) < MAX_VERSION_PARTS:
        version.append(0)

    return tuple(version)


def compare_kernel_releases(base: str, given: str) -> KernelVersionComparison:
    """Compare the given kernel release against the base release.

    :returns: NEWER if given is newer than base, OLDER if it's older, and
        EQUAL when all three components match.
    :raises KernelVersionError: If either release is malformed. The base
        release is checked first.
    """

    base_version = parse_kernel_version(base, 'base')
    given_version = parse_kernel_version(given, 'given')

    if given_version > base_version:
        return KernelVersionComparison.NEWER
    elif given_version < base_version:
        return KernelVersionComparison.OLDER
    else:
        return KernelVersionComparison.EQUAL


def os_btf_enabled(path: str = BTF_VMLINUX_PATH) -> bool:
    """Check whether the running kernel exposes its embedded BTF type
    information."""

    try:
        return Path(path).exists()
    except OSError:
        LOGGER.debug("Could not check for BTF file '%s'.", path)
        return False
