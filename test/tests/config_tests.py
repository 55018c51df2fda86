import io
import logging
import os
from pathlib import Path

from osinfo import config
from osinfo import log_setup
from osinfo import unittest


class ConfigTests(unittest.OSInfoTestCase):
    """Check the environment based settings."""

    def test_os_release_path(self):

        os.environ.pop('LIBBPFGO_OSRELEASE_FILE', None)
        self.assertEqual(config.os_release_path(), '/etc/os-release')

        os.environ['LIBBPFGO_OSRELEASE_FILE'] = ''
        self.assertEqual(config.os_release_path(), '/etc/os-release')

        os.environ['LIBBPFGO_OSRELEASE_FILE'] = 'testdata/os-release'
        self.assertEqual(config.os_release_path(), 'testdata/os-release')

    def test_plugin_dirs(self):

        os.environ.pop('OSINFO_PLUGIN_DIRS', None)
        self.assertEqual(config.plugin_dirs(), [])

        os.environ['OSINFO_PLUGIN_DIRS'] = '/a/b::/c'
        self.assertEqual(config.plugin_dirs(), [Path('/a/b'), Path('/c')])

    def test_log_level(self):

        os.environ['OSINFO_LOG_LEVEL'] = 'debug'
        self.assertEqual(config.log_level(), logging.DEBUG)

        os.environ['OSINFO_LOG_LEVEL'] = 'chatty'
        self.assertEqual(config.log_level(), logging.WARNING)

    def test_version(self):

        self.assertEqual(config.get_version(), '1.0.0')


class LogSetupTests(unittest.OSInfoTestCase):

    def set_up(self):
        self.root_handlers = list(logging.getLogger().handlers)
        self.yapsy_handlers = list(logging.getLogger('yapsy').handlers)
        self.root_level = logging.getLogger().level

    def tear_down(self):
        logging.getLogger().handlers = self.root_handlers
        logging.getLogger().setLevel(self.root_level)
        logging.getLogger('yapsy').handlers = self.yapsy_handlers
        logging.getLogger('yapsy').propagate = True

    def test_setup_loggers(self):
        """Messages at or above the configured level reach stderr."""

        os.environ['OSINFO_LOG_LEVEL'] = 'INFO'
        err_out = io.StringIO()

        self.assertTrue(log_setup.setup_loggers(err_out=err_out))

        logger = logging.getLogger('osinfo.test')
        logger.debug("hidden")
        logger.info("shown")

        self.assertNotIn('hidden', err_out.getvalue())
        self.assertIn('INFO osinfo.test: shown', err_out.getvalue())

    def test_quiet(self):

        err_out = io.StringIO()
        log_setup.setup_loggers(quiet=True, err_out=err_out)

        logging.getLogger('osinfo.test').warning("shh")
        self.assertEqual(err_out.getvalue(), '')
