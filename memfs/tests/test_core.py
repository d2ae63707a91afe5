"""
Configuration, Logging and Exception Tests

Run with: python -m pytest memfs/tests -v

Author: YSNRFD
Version: 1.0.0
"""

import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from memfs.core.config_loader import ConfigLoader, Config, FilesystemConfig, get_config
from memfs.exceptions import (
    ErrorKind,
    ConfigError,
    ConfigValidationError,
    FileSystemException,
    PathNotFoundError,
    AlreadyExistsError,
)
from memfs.filesystem import VirtualFileSystem
from memfs.logger import Logger, LogLevel, get_logger


class ConfigTestCase(unittest.TestCase):
    """Restores the default configuration after each test."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        ConfigLoader().reset()
        self.tmpdir.cleanup()

    def write_json(self, data, name='config.json'):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f)
        return path


class TestConfig(ConfigTestCase):
    """Test configuration loading."""

    def test_defaults(self):
        config = Config()
        self.assertEqual(config.filesystem.max_path_length, 255)
        self.assertEqual(config.filesystem.default_permissions, 0o755)
        self.assertEqual(config.logging.level, 'WARNING')
        self.assertEqual(config.shell.prompt, '> ')

    def test_load_file(self):
        path = self.write_json({
            'filesystem': {'max_path_length': 64, 'default_permissions': '0700'},
            'shell': {'prompt': '$ '},
        })

        config = ConfigLoader().load(path)

        self.assertEqual(config.filesystem.max_path_length, 64)
        self.assertEqual(config.filesystem.default_permissions, 0o700)
        self.assertEqual(config.filesystem.default_owner, 'root')
        self.assertEqual(config.shell.prompt, '$ ')
        self.assertIs(get_config(), config)

    def test_singleton(self):
        self.assertIs(ConfigLoader(), ConfigLoader())

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            ConfigLoader().load(os.path.join(self.tmpdir.name, 'nope.json'))

    def test_invalid_json(self):
        path = os.path.join(self.tmpdir.name, 'bad.json')
        with open(path, 'w', encoding='utf-8') as f:
            f.write('{not json')

        with self.assertRaises(ConfigError):
            ConfigLoader().load(path)

    def test_invalid_values(self):
        with self.assertRaises(ConfigValidationError):
            ConfigLoader().load_dict({'filesystem': {'default_permissions': '9z'}})
        with self.assertRaises(ConfigValidationError):
            ConfigLoader().load_dict({'filesystem': {'max_path_length': 0}})

    def test_get_and_set(self):
        loader = ConfigLoader()

        self.assertEqual(loader.get('filesystem.encoding'), 'utf-8')
        self.assertEqual(loader.get('filesystem.nope', 'fallback'), 'fallback')

        loader.set('shell.prompt', '# ')
        self.assertEqual(get_config().shell.prompt, '# ')

        with self.assertRaises(ConfigValidationError):
            loader.set('shell.nope', 1)

    def test_to_dict(self):
        data = ConfigLoader().to_dict()
        self.assertEqual(data['filesystem']['max_path_length'], 255)
        self.assertIn('logging', data)

    def test_path_limit_from_config(self):
        vfs = VirtualFileSystem(FilesystemConfig(max_path_length=10))

        result = vfs.mkdir('/abcdefghijk')

        self.assertEqual(result.error, ErrorKind.PATH_TOO_LONG)
        self.assertTrue(vfs.mkdir('/abc').success)


class TestMain(ConfigTestCase):
    """Test the command-line entry point."""

    def test_run_script(self):
        from memfs.main import main

        config_path = self.write_json({'logging': {'console_output': False}})
        script_path = os.path.join(self.tmpdir.name, 'script.txt')
        with open(script_path, 'w', encoding='utf-8') as f:
            f.write("mkdir /docs\ncd /docs\npwd\n")

        out = io.StringIO()
        with redirect_stdout(out):
            status = main(['--script', script_path, config_path])

        self.assertEqual(status, 0)
        self.assertEqual(out.getvalue().splitlines()[-1], '/docs')

    def test_bad_config(self):
        from memfs.main import main

        out = io.StringIO()
        with redirect_stdout(out):
            status = main(['--script', 'unused', os.path.join(self.tmpdir.name, 'nope.json')])

        self.assertEqual(status, 1)
        self.assertIn('Configuration error', out.getvalue())

    def test_script_argument_missing(self):
        from memfs.main import main

        out = io.StringIO()
        with redirect_stdout(out):
            status = main(['--script'])

        self.assertEqual(status, 2)


class TestLogger(unittest.TestCase):
    """Test the logging layer."""

    def setUp(self):
        Logger.initialize(level=LogLevel.DEBUG, console_output=False)
        Logger.clear_event_logs()

    def test_one_logger_per_subsystem(self):
        self.assertIs(get_logger('vfs'), Logger('vfs'))
        self.assertIsNot(get_logger('vfs'), get_logger('codec'))
        self.assertEqual(get_logger('shell').subsystem, 'shell')

    def test_level_from_name(self):
        self.assertEqual(LogLevel.from_name('debug'), LogLevel.DEBUG)
        self.assertEqual(LogLevel.from_name('Error'), LogLevel.ERROR)
        self.assertEqual(LogLevel.from_name('nonsense'), LogLevel.INFO)

    def test_failed_operation_is_logged(self):
        """Engine failures are logged as warnings with their error kind."""
        vfs = VirtualFileSystem(FilesystemConfig())

        vfs.cat('/missing')

        logs = Logger.get_event_logs(level='WARNING', subsystem='vfs')
        self.assertEqual(len(logs), 1)
        self.assertIn('cat failed', logs[0]['message'])
        self.assertEqual(logs[0]['context']['error'], 'PathNotFound')

    def test_context_is_recorded(self):
        get_logger('test').info("hello", context={'answer': 42})

        logs = Logger.get_event_logs(subsystem='test')
        self.assertEqual(logs[-1]['message'], 'hello')
        self.assertEqual(logs[-1]['context'], {'answer': 42})


class TestExceptions(unittest.TestCase):
    """Test the exception hierarchy."""

    def test_kind_and_code(self):
        exc = PathNotFoundError('/x')

        self.assertIsInstance(exc, FileSystemException)
        self.assertEqual(exc.kind, ErrorKind.PATH_NOT_FOUND)
        self.assertEqual(exc.error_code, 4001)
        self.assertIn('4001', str(exc))
        self.assertIn('/x', str(exc))

    def test_already_exists_qualifier(self):
        exc = AlreadyExistsError('/docs', qualifier='directory')
        self.assertEqual(exc.message, 'Directory already exists: /docs')
        self.assertEqual(exc.kind, ErrorKind.ALREADY_EXISTS)


if __name__ == '__main__':
    unittest.main()
