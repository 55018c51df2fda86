"""This module provides a base set of utilities for creating unittests
for osinfo."""

import contextlib
import os
import tempfile
import unittest
from pathlib import Path

from osinfo import config
from osinfo import plugins


class OSInfoTestCase(unittest.TestCase):
    """A unittest.TestCase with osinfo specific features baked in.
All osinfo unittests (in test/tests) should use this as their base class.

The environment variables osinfo reads are saved before each test and
restored after, and the plugin system is reset, so tests may change either
freely.

:cvar Path OSINFO_LIB_DIR: The Path to osinfo's lib directory.
:cvar Path OSINFO_ROOT_DIR: The Path to osinfo's root directory (the root of
    the git repo).
:cvar Path TEST_DATA_ROOT: The unit test data directory.
"""

    OSINFO_LIB_DIR = Path(__file__).resolve().parents[1]  # type: Path
    OSINFO_ROOT_DIR = OSINFO_LIB_DIR.parent  # type: Path
    TEST_DATA_ROOT = OSINFO_ROOT_DIR/'test'/'data'  # type: Path

    ENV_VARS = [
        config.OS_RELEASE_ENV,
        config.PLUGIN_DIRS_ENV,
        config.LOG_LEVEL_ENV,
    ]

    def setUp(self) -> None:
        """Save the environment and make a temp directory, then run set_up()."""

        self._saved_env = {var: os.environ.get(var) for var in self.ENV_VARS}
        self._tmp_dir = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self._tmp_dir.name)

        self.set_up()

    def tearDown(self) -> None:
        try:
            self.tear_down()
        finally:
            for var, value in self._saved_env.items():
                if value is None:
                    os.environ.pop(var, None)
                else:
                    os.environ[var] = value

            # pylint: disable=protected-access
            plugins._reset_plugins()
            self._tmp_dir.cleanup()

    def set_up(self):
        """Dummy set up function."""

    def tear_down(self):
        """Dummy tear down function"""

    def write_os_release(self, contents, name='os-release', encoding='utf-8'):
        """Write an os-release file with the given contents to this test's
        temp directory, and return its path. Bytes are written as is."""

        path = self.tmp_path/name
        if isinstance(contents, bytes):
            path.write_bytes(contents)
        else:
            path.write_text(contents, encoding=encoding)

        return path

    @staticmethod
    @contextlib.contextmanager
    def working_dir(path):
        """Run the body of the with block from the given directory."""

        orig_dir = os.getcwd()
        os.chdir(str(path))
        try:
            yield Path(path)
        finally:
            os.chdir(orig_dir)
