import osinfo.sys_vars as sys_vars


class UserOSID(sys_vars.SystemPlugin):

    def __init__(self):
        super().__init__(
            name='os_id',
            description="Always claims to be some other distribution.",
            priority=self.PRIO_USER)

    def _get(self, svars):
        return "not-really-debian"
