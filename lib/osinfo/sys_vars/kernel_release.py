from ..enums import OSReleaseField
from ..kernel import get_kernel_release
from .base_classes import SystemPlugin


class KernelRelease(SystemPlugin):

    def __init__(self):
        super().__init__(
            name='kernel_release',
            description="The running kernel's release, as per 'uname -r'.",
            priority=self.PRIO_CORE)

    def _get(self, svars):
        release = svars.os_info.get_os_release_field_value(OSReleaseField.KERNEL_RELEASE)
        if not release:
            # uname failed when the host info was gathered; ask again for the error.
            release = get_kernel_release()

        return release
