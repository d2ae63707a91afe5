"""
Shell Tests

Run with: python -m pytest memfs/tests -v

Author: YSNRFD
Version: 1.0.0
"""

import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from memfs.core.config_loader import FilesystemConfig, ShellConfig
from memfs.filesystem import VirtualFileSystem
from memfs.shell import Shell
from memfs.shell.parser import CommandParser


class TestCommandParser(unittest.TestCase):
    """Test command line parsing."""

    def setUp(self):
        self.parser = CommandParser()

    def test_simple_command(self):
        cmd = self.parser.parse('mkdir /docs')
        self.assertEqual(cmd.command, 'mkdir')
        self.assertEqual(cmd.args, ['/docs'])

    def test_quoted_argument(self):
        cmd = self.parser.parse('touch /a "hello  world"')
        self.assertEqual(cmd.args, ['/a', 'hello  world'])

        cmd = self.parser.parse("write /a 'it is'")
        self.assertEqual(cmd.args, ['/a', 'it is'])

    def test_empty_quotes_kept(self):
        cmd = self.parser.parse('touch /a ""')
        self.assertEqual(cmd.args, ['/a', ''])

    def test_escape(self):
        cmd = self.parser.parse(r'touch /my\ file')
        self.assertEqual(cmd.args, ['/my file'])

    def test_blank_and_comment(self):
        self.assertIsNone(self.parser.parse(''))
        self.assertIsNone(self.parser.parse('   '))
        self.assertIsNone(self.parser.parse('# comment'))

    def test_rest(self):
        """The tail keeps its inner whitespace."""
        cmd = self.parser.parse('touch /a one  two   three')
        self.assertEqual(cmd.rest(1), 'one  two   three')
        self.assertEqual(cmd.rest(3), 'three')
        self.assertEqual(cmd.rest(4), '')

    def test_rest_with_quotes(self):
        cmd = self.parser.parse('touch /a "one  two"   three')
        self.assertEqual(cmd.rest(1), 'one  two three')

    def test_history(self):
        parser = CommandParser(history_size=2)
        parser.parse('pwd')
        parser.parse('ls')
        parser.parse('cd /')

        self.assertEqual(parser.get_history(), ['ls', 'cd /'])

        parser.clear_history()
        self.assertEqual(parser.get_history(), [])


class TestShellCommands(unittest.TestCase):
    """Test built-in commands end to end."""

    def setUp(self):
        self.vfs = VirtualFileSystem(FilesystemConfig())
        self.shell = Shell(self.vfs, ShellConfig())

    def run_lines(self, *lines):
        out = io.StringIO()
        with redirect_stdout(out):
            status = self.shell.run_script(lines)
        return status, out.getvalue()

    def test_find_example(self):
        status, output = self.run_lines(
            'mkdir /docs',
            'touch /docs/a.txt hello',
            'find a',
            'grep hello',
        )

        self.assertEqual(status, 0)
        self.assertIn("Directory 'docs' created successfully", output)
        self.assertIn('/docs/a.txt (file)', output)
        self.assertIn('File: a.txt contains the specified content.', output)

    def test_touch_keeps_content_as_typed(self):
        self.run_lines('touch /f hello   big world')
        self.assertEqual(self.vfs.cat('/f').value, 'hello   big world')

    def test_write_keeps_content_as_typed(self):
        self.run_lines('touch /f', 'write /f a  b\tc')
        self.assertEqual(self.vfs.cat('/f').value, 'a  b\tc')

    def test_write_and_cat(self):
        status, output = self.run_lines('touch /f', 'cat /f', 'write /f new text', 'cat /f')

        self.assertEqual(status, 0)
        self.assertEqual(output.splitlines(), ['File is empty', 'new text'])

    def test_cd_and_pwd(self):
        status, output = self.run_lines('mkdir /a', 'cd /a', 'pwd')
        self.assertEqual(output.splitlines()[-1], '/a')

    def test_unknown_command(self):
        status, output = self.run_lines('frobnicate')

        self.assertEqual(status, 127)
        self.assertEqual(output.strip(), 'Error: Unknown command')

    def test_missing_argument(self):
        """Argument errors never reach the engine."""
        before = self.vfs.count_nodes()

        status, output = self.run_lines('mkdir')

        self.assertEqual(status, 2)
        self.assertEqual(output.strip(), 'Error: Path is missing')
        self.assertEqual(self.vfs.count_nodes(), before)

    def test_failure_is_reported(self):
        status, output = self.run_lines('cat /nope')

        self.assertEqual(status, 1)
        self.assertEqual(output.strip(), 'Error: Path not found: /nope')

    def test_chmod_is_octal(self):
        self.run_lines('touch /f', 'chmod /f 644')
        self.assertEqual(self.vfs.find_node('/f').permissions, 0o644)

        status, output = self.run_lines('chmod /f 999')
        self.assertEqual(status, 2)
        self.assertIn('Invalid mode', output)

    def test_ls_and_symlink(self):
        status, output = self.run_lines('touch /t', 'createSymlink /t ln', 'mkdir /d', 'ls')

        self.assertEqual(output.splitlines()[-3:], ['[DIR] d', '[FILE] t', '[LINK] ln'])

    def test_exit_stops_script(self):
        self.run_lines('mkdir /a', 'exit', 'mkdir /b')

        self.assertTrue(self.shell.exiting)
        self.assertIsNotNone(self.vfs.find_node('/a'))
        self.assertIsNone(self.vfs.find_node('/b'))

    def test_save_and_load(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            dump = os.path.join(tmpdir, 'dump.txt')

            status, output = self.run_lines(
                'touch /a one',
                'touch /b two',
                f'save {dump}',
                f'load {dump} /a',
            )

            self.assertEqual(status, 0)
            self.assertEqual(self.vfs.cat('/a').value, 'two\none\n')

    def test_load_missing_target_argument(self):
        status, output = self.run_lines('load somefile')
        self.assertEqual(status, 2)
        self.assertEqual(output.strip(), 'Error: Target path is missing')

    def test_help(self):
        status, output = self.run_lines('help')
        self.assertEqual(status, 0)
        self.assertIn('createSymlink', output)

    def test_prompt_shows_cwd(self):
        self.vfs.mkdir('/a')
        self.vfs.cd('/a')
        self.assertEqual(self.shell._get_prompt(), '/a > ')


if __name__ == '__main__':
    unittest.main()
