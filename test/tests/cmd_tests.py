import errno
import io
import json
import os
from unittest import mock

from osinfo import arguments
from osinfo import commands
from osinfo import main
from osinfo import plugins
from osinfo import unittest


class CommandTests(unittest.OSInfoTestCase):
    """Run each of the builtin commands."""

    def set_up(self):
        os.environ['LIBBPFGO_OSRELEASE_FILE'] = str(
            self.TEST_DATA_ROOT/'testdata'/'os-release')
        plugins.initialize_plugins([])
        self.uname = mock.patch('os.uname', return_value=mock.Mock(release='5.10.0-28-amd64'))
        self.uname.start()

    def tear_down(self):
        self.uname.stop()

    def run_cmd(self, *arg_list):
        """Run the command given by the args, and return the return code,
        output, and error output."""

        args = arguments.get_parser().parse_args(arg_list)
        cmd = commands.get_command(args.command_name)
        cmd.silence()
        ret = cmd.run(args)
        out, err = cmd.clear_output()
        return ret, out, err

    def test_show(self):

        ret, out, _ = self.run_cmd('show')
        self.assertEqual(ret, 0)
        self.assertIn('distribution: debian', out)
        self.assertIn('Debian GNU/Linux 12 (bookworm)', out)
        self.assertIn('KERNEL_RELEASE', out)
        self.assertIn('5.10.0-28-amd64', out)

    def test_show_json(self):

        ret, out, _ = self.run_cmd('show', '--json')
        self.assertEqual(ret, 0)
        data = json.loads(out)
        self.assertEqual(data['os_release_id'], 'debian')
        self.assertEqual(data['fields']['KERNEL_RELEASE'], '5.10.0-28-amd64')
        self.assertEqual(data['fields']['VERSION_CODENAME'], 'bookworm')

    def test_show_field(self):

        ret, out, _ = self.run_cmd('show', '--field', 'VERSION_ID')
        self.assertEqual((ret, out), (0, '12\n'))

        ret, out, _ = self.run_cmd('show', '--field', 'ID_LIKE')
        self.assertEqual((ret, out), (0, '\n'))

    def test_show_missing_file(self):

        os.environ['LIBBPFGO_OSRELEASE_FILE'] = str(self.tmp_path/'nope')

        ret, out, err = self.run_cmd('show')
        self.assertEqual(ret, errno.ENOENT)
        self.assertEqual(out, '')
        self.assertIn('could not open LIBBPFGO_OSRELEASE_FILE', err)

    def test_compare(self):

        for release, expected in (('5.10', 'equal'), ('6.1.2', 'newer'),
                                  ('4.19.0', 'older')):
            ret, out, _ = self.run_cmd('compare', release)
            self.assertEqual((ret, out), (0, expected + '\n'))

        ret, out, _ = self.run_cmd('cmp', '3', '--base', '3.0.0')
        self.assertEqual((ret, out), (0, 'equal\n'))

        ret, out, _ = self.run_cmd('compare', '5.15.0-91-generic',
                                   '--base', '5.15.0-88-generic')
        self.assertEqual((ret, out), (0, 'equal\n'))

        ret, out, _ = self.run_cmd('compare', '5.4.228+', '--base', '6.18.44-fc-v139')
        self.assertEqual((ret, out), (0, 'older\n'))

    def test_compare_invalid(self):

        ret, out, err = self.run_cmd('compare', '5.4.0.1')
        self.assertEqual(ret, errno.EINVAL)
        self.assertEqual(out, '')
        self.assertIn('invalid given kernel version format: 5.4.0.1', err)

        ret, _, err = self.run_cmd('compare', '5', '--base', 'X.5.4')
        self.assertEqual(ret, errno.EINVAL)
        self.assertIn('invalid base kernel version value: X.5.4 issue with: X', err)

    def test_sys_vars(self):

        ret, out, _ = self.run_cmd('sys_vars')
        self.assertEqual(ret, 0)
        self.assertIn('Available System Variables', out)
        self.assertIn('os_version', out)
        self.assertIn('bookworm', out)

        ret, out, _ = self.run_cmd('sys', '--verbose')
        self.assertEqual(ret, 0)
        self.assertIn('os_release_vars.py', out)


class MainTests(unittest.OSInfoTestCase):
    """Run osinfo through its command line entry point."""

    def set_up(self):
        os.environ['OSINFO_PLUGIN_DIRS'] = ''
        os.environ['LIBBPFGO_OSRELEASE_FILE'] = str(
            self.TEST_DATA_ROOT/'testdata'/'os-release')
        # Handlers would outlive the test.
        self.setup_loggers = mock.patch('osinfo.log_setup.setup_loggers')
        self.setup_loggers.start()

    def tear_down(self):
        self.setup_loggers.stop()

    def run_main(self, *argv):
        with mock.patch('sys.stdout', new_callable=io.StringIO) as out, \
                mock.patch('sys.stderr', new_callable=io.StringIO) as err:
            ret = main.main(list(argv))

        return ret, out.getvalue(), err.getvalue()

    def test_compare(self):

        ret, out, _ = self.run_main('compare', '5.15', '--base', '5.15.0-91-generic')
        self.assertEqual((ret, out), (0, 'equal\n'))

        ret, out, err = self.run_main('cmp', '5.15.0.1')
        self.assertEqual((ret, out), (errno.EINVAL, ''))
        self.assertIn('invalid given kernel version format: 5.15.0.1', err)

    def test_running_kernel(self):
        """Without --base, the running kernel is the base."""

        ret, out, _ = self.run_main('compare', os.uname().release)
        self.assertEqual((ret, out), (0, 'equal\n'))

    def test_no_command(self):

        ret, out, err = self.run_main()
        self.assertEqual(ret, 2)
        self.assertEqual(out, '')
        self.assertIn('usage: osinfo', err)
