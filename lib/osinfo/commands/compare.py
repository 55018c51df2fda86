"""Compare a kernel release to the running kernel."""

import errno

from osinfo import errors
from osinfo import output
from osinfo.enums import OSReleaseField
from osinfo.os_info import OSInfo, get_os_info
from .base_classes import Command


class CompareCommand(Command):
    """Compare a release to the host's running kernel release."""

    def __init__(self):
        super().__init__(
            name='compare',
            description="Compare the given kernel release to the running "
                        "kernel's release. Prints 'newer', 'older', or 'equal', "
                        "depending on how the given release relates to the "
                        "running kernel.",
            short_help="Compare a release to the running kernel.",
            aliases=['cmp'],
        )

    def _setup_arguments(self, parser):

        parser.add_argument(
            'release',
            help="The kernel release to compare, like '5.15' or '4.18.0'.")
        parser.add_argument(
            '--base',
            help="Compare against this release instead of the running kernel's.")

    def run(self, args):
        """Run the comparison."""

        if args.base is not None:
            info = OSInfo(os_release_field_values={
                OSReleaseField.KERNEL_RELEASE: args.base})
        else:
            try:
                info = get_os_info()
            except errors.OSInfoError as err:
                self.print_error(err)
                return errno.ENOENT

        try:
            comparison = info.compare_os_base_kernel_release(args.release)
        except errors.KernelVersionError as err:
            self.print_error(err)
            return errno.EINVAL

        self.logger.debug("Compared '%s' to base '%s': %s", args.release,
                          info.get_os_release_field_value(OSReleaseField.KERNEL_RELEASE),
                          comparison)
        output.fprint(str(comparison), file=self.outfile)

        return 0
