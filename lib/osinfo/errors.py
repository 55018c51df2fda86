"""This module holds the osinfo exception classes, mainly to prevent cyclic
import problems."""

import pprint
import shutil
import textwrap
import traceback

from .enums import KernelVersionComparison


class OSInfoError(RuntimeError):
    """Base class for all osinfo errors.

    :ivar str msg: The error message, without the prior error's.
    :ivar Exception prior_error: The error that led to this one, if any.
    :ivar data: Anything else worth showing the user about the error.
    """

    TAB_LEVEL = '  '

    def __init__(self, msg, prior_error=None, data=None):
        self.msg = msg
        self.prior_error = prior_error
        self.data = data
        super().__init__(msg)

    def __reduce__(self):
        return type(self), (self.msg, self.prior_error, self.data)

    def __str__(self):
        if self.prior_error:
            return '{}: {}'.format(self.msg, self.prior_error)

        return self.msg

    def pformat(self, show_traceback: bool = False) -> str:
        """Format this error and its causes for the terminal, each cause
        indented a level deeper than the error it caused. Causes are
        followed through ``prior_error`` and through ``raise ... from``."""

        if show_traceback:
            return ''.join(traceback.format_exception(
                type(self), self, self.__traceback__))

        width = shutil.get_terminal_size((80, 24)).columns
        lines = []
        err = self
        depth = 0

        while err is not None:
            indent = self.TAB_LEVEL * depth
            is_ours = isinstance(err, OSInfoError)

            for part in str(err.msg if is_ours else err).split('\n'):
                lines.extend(textwrap.wrap(part, width, initial_indent=indent,
                                           subsequent_indent=indent))

            if is_ours and err.data:
                data = pprint.pformat(err.data, width=max(width - len(indent), 20))
                lines.extend(indent + line for line in data.split('\n'))

            err = (err.prior_error or err.__cause__) if is_ours else None
            depth += 1

        return '\n'.join(lines)


class OSReleaseOpenError(OSInfoError):
    """The os-release file could not be opened. The message wording is fixed;
    the underlying OSError is chained rather than appended to it."""

    def __init__(self, path, prior_error=None, data=None):
        self.path = str(path)
        super().__init__(
            "could not open LIBBPFGO_OSRELEASE_FILE {}".format(self.path),
            prior_error=prior_error, data=data)

    def __str__(self):
        return self.msg

    def __reduce__(self):
        return type(self), (self.path, self.prior_error, self.data)


class OSReleaseParseError(OSInfoError):
    """The os-release file was opened, but couldn't be read as text."""


class UnameError(OSInfoError):
    """The running kernel's release couldn't be determined.

    :ivar osinfo.os_info.OSInfo os_info: The OSInfo object, as populated
        before the kernel query failed. Its os-release values are still
        valid.
    """

    def __init__(self, msg, prior_error=None, data=None, os_info=None):
        self.os_info = os_info
        super().__init__(msg, prior_error=prior_error, data=data)

    def __reduce__(self):
        return type(self), (self.msg, self.prior_error, self.data, self.os_info)


class KernelVersionError(OSInfoError):
    """A kernel release string couldn't be parsed for comparison. These
    always come with an INVALID comparison result."""

    def __init__(self, msg, prior_error=None, data=None):
        self.comparison = KernelVersionComparison.INVALID
        super().__init__(msg, prior_error=prior_error, data=data)


class SystemPluginError(OSInfoError):
    """A system variable plugin is invalid, or failed to give a value."""


class PluginError(OSInfoError):
    """A plugin couldn't be loaded or activated."""
