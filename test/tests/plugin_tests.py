import io
import os
from unittest import mock

from osinfo import arguments
from osinfo import commands
from osinfo import plugins
from osinfo import sys_vars
from osinfo import unittest


class PluginTests(unittest.OSInfoTestCase):
    """Check loading plugins from plugin directories."""

    def test_plugin_loading(self):
        """User plugins are found, activated, and override builtins of lower
        priority."""

        plugin_dir = self.TEST_DATA_ROOT/'plugins'
        self.assertTrue(plugin_dir.exists())

        plugins.initialize_plugins([plugin_dir])

        found = plugins.list_plugins()
        self.assertIn('host_flavor', found['sys'])
        self.assertIn('user_os_id', found['sys'])
        self.assertIn('distro_cmd', found['command'])

        svars = sys_vars.get_vars()
        self.assertEqual(svars['host_flavor'], 'vanilla')
        self.assertEqual(svars['os_id'], 'not-really-debian')

        # Only one plugin manager per run.
        with self.assertRaises(RuntimeError):
            plugins.initialize_plugins([plugin_dir])

    def test_plugin_dirs_from_env(self):
        """OSINFO_PLUGIN_DIRS lists the plugin directories."""

        os.environ['OSINFO_PLUGIN_DIRS'] = '{}:{}'.format(
            self.tmp_path, self.TEST_DATA_ROOT/'plugins')

        plugins.initialize_plugins()

        self.assertIn('host_flavor', sys_vars.get_vars())

    def test_command_plugin(self):
        """Command plugins get their own sub-command."""

        os.environ['LIBBPFGO_OSRELEASE_FILE'] = str(
            self.TEST_DATA_ROOT/'testdata'/'os-release')

        plugins.initialize_plugins([self.TEST_DATA_ROOT/'plugins'])

        args = arguments.get_parser().parse_args(['distro'])
        cmd = commands.get_command(args.command_name)
        cmd.outfile = io.StringIO()

        with mock.patch('os.uname', return_value=mock.Mock(release='6.1')):
            self.assertEqual(cmd.run(args), 0)

        self.assertEqual(cmd.outfile.getvalue(), 'debian\n')

    def test_list_before_init(self):

        with self.assertRaises(RuntimeError):
            plugins.list_plugins()

    def test_builtin_only(self):
        """Without plugin directories, only the builtins are loaded."""

        plugins.initialize_plugins([])

        self.assertEqual(plugins.list_plugins(), {'sys': {}, 'command': {}})
        self.assertIn('os_id', sys_vars.get_vars())
        self.assertIn('show', arguments.get_parser().format_help())
