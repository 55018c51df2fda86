"""Host introspection for Linux: which distribution and release is this, and
how does a kernel release compare to the one we're running on?"""

from .enums import KernelVersionComparison, OSReleaseField, OSReleaseID, parse_id
from .errors import (OSInfoError, OSReleaseOpenError, OSReleaseParseError,
                     UnameError, KernelVersionError)
from .kernel import compare_kernel_releases, get_kernel_release, os_btf_enabled
from .os_info import OSInfo, get_os_info
