"""
MemFS Shell Module

The interactive command-line shell for MemFS.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Iterable

from .parser import CommandParser
from .builtins import BuiltinCommands
from memfs.core.config_loader import ShellConfig, get_config
from memfs.filesystem import VirtualFileSystem
from memfs.logger import get_logger


class Shell:
    """
    MemFS Interactive Shell.

    Provides:
    - Command parsing
    - Built-in commands bound to one VirtualFileSystem
    - Command history

    Example:
        >>> shell = Shell(VirtualFileSystem())
        >>> shell.run()
    """

    def __init__(
        self,
        vfs: Optional[VirtualFileSystem] = None,
        config: Optional[ShellConfig] = None
    ):
        self._config = config or get_config().shell
        self._vfs = vfs or VirtualFileSystem()
        self._logger = get_logger('shell')
        self._parser = CommandParser(history_size=self._config.history_size)
        self._builtins = BuiltinCommands(self)
        self._running = False
        self._exiting = False

    @property
    def vfs(self) -> VirtualFileSystem:
        return self._vfs

    def request_exit(self) -> None:
        """Stop the REPL after the current command."""
        self._exiting = True

    @property
    def exiting(self) -> bool:
        return self._exiting

    def run(self) -> None:
        """
        Run the interactive shell.

        This is the main REPL loop.
        """
        self._running = True

        print(self._config.welcome_message)

        while self._running and not self._exiting:
            try:
                line = input(self._get_prompt())
            except EOFError:
                print()
                break
            except KeyboardInterrupt:
                print("^C")
                continue

            self.execute_line(line)

        print("Exiting file system CLI.")
        self._running = False

    def run_script(self, lines: Iterable[str]) -> int:
        """
        Execute lines non-interactively.

        Returns:
            Exit code of the last command that ran
        """
        status = 0
        for line in lines:
            if self._exiting:
                break
            status = self.execute_line(line)
        return status

    def _get_prompt(self) -> str:
        """Generate the shell prompt."""
        cwd = self._vfs.pwd().value
        return f"{cwd} {self._config.prompt}"

    def execute_line(self, line: str) -> int:
        """
        Execute a command line.

        Args:
            line: Command line string

        Returns:
            Exit code
        """
        cmd = self._parser.parse(line)

        if cmd is None:
            return 0

        self._logger.debug(
            f"Executing {cmd.command}",
            context={'args': cmd.args}
        )

        return self._builtins.execute(cmd)
