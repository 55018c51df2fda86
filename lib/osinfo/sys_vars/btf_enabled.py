from ..kernel import os_btf_enabled
from .base_classes import SystemPlugin


class BTFEnabled(SystemPlugin):

    def __init__(self):
        super().__init__(
            name='btf_enabled',
            description="Whether the kernel provides embedded BTF "
                        "(/sys/kernel/btf/vmlinux). 'true' or 'false'.",
            priority=self.PRIO_CORE)

    def _get(self, svars):
        return 'true' if os_btf_enabled() else 'false'
