"""
Shell Built-in Commands

Maps each shell command onto one filesystem operation and prints the
result. Argument checking happens here; the engine is never called
with missing arguments.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Callable, List, Optional

from .parser import ParsedCommand
from memfs.filesystem import OperationResult


class BuiltinCommands:
    """
    Built-in shell commands.

    Every command returns an exit code: 0 on success, 1 on failure,
    2 on a usage error, 127 for an unknown command.
    """

    def __init__(self, shell):
        """
        Initialize built-in commands.

        Args:
            shell: The shell instance
        """
        self._shell = shell
        self._current: Optional[ParsedCommand] = None
        self._commands: dict[str, Callable] = {
            'help': self.cmd_help,
            'exit': self.cmd_exit,
            'quit': self.cmd_exit,
            'mkdir': self.cmd_mkdir,
            'cd': self.cmd_cd,
            'pwd': self.cmd_pwd,
            'ls': self.cmd_ls,
            'touch': self.cmd_touch,
            'write': self.cmd_write,
            'cat': self.cmd_cat,
            'rm': self.cmd_rm,
            'mv': self.cmd_mv,
            'cp': self.cmd_cp,
            'stat': self.cmd_stat,
            'save': self.cmd_save,
            'load': self.cmd_load,
            'rename': self.cmd_rename,
            'rmdir': self.cmd_rmdir,
            'createSymlink': self.cmd_create_symlink,
            'chmod': self.cmd_chmod,
            'chown': self.cmd_chown,
            'find': self.cmd_find,
            'findi': self.cmd_findi,
            'grep': self.cmd_grep,
        }

    @property
    def vfs(self):
        return self._shell.vfs

    def execute(self, cmd: ParsedCommand) -> int:
        """
        Execute a built-in command.

        Args:
            cmd: Parsed command line

        Returns:
            Exit code
        """
        handler = self._commands.get(cmd.command)
        if handler is None:
            print("Error: Unknown command")
            return 127

        self._current = cmd
        try:
            return handler(cmd.args)
        finally:
            self._current = None

    def _report(self, result: OperationResult) -> int:
        if result.success:
            if result.message:
                print(result.message)
            return 0
        print(f"Error: {result.message}")
        return 1

    @staticmethod
    def _missing(what: str) -> int:
        print(f"Error: {what} is missing")
        return 2

    # Command implementations

    def cmd_help(self, args: List[str]) -> int:
        """Display help information."""
        help_text = """
MemFS Shell - Built-in Commands

Navigation:
  pwd                          Print working directory
  cd <path>                    Change directory
  ls                           List the current directory

Files and directories:
  mkdir <path>                 Create directory
  touch <path> [content]       Create file
  write <path> <content>       Replace file content
  cat <path>                   Display file content
  rm <path>                    Remove file
  rmdir <path>                 Remove directory and everything in it
  rename <path> <new-name>     Rename in place
  mv <source> <dest>           Move
  cp <source> <dest>           Copy recursively
  createSymlink <target> <name>  Create symlink in the current directory
  stat <path>                  Display metadata
  chmod <path> <octal-mode>    Change permissions
  chown <path> <owner>         Change owner

Search (from the current directory):
  find <pattern>               Find names containing pattern
  findi <pattern>              Same, ignoring ASCII case
  grep <text>                  Find files whose content contains text

Persistence:
  save <file>                  Write all file contents to a host file
  load <file> <path>           Replace one file's content from a host file

Shell:
  help                         Display this help
  exit                         Exit the shell
"""
        print(help_text)
        return 0

    def cmd_exit(self, args: List[str]) -> int:
        """Exit the shell."""
        self._shell.request_exit()
        return 0

    def cmd_mkdir(self, args: List[str]) -> int:
        """Create directory."""
        if not args:
            return self._missing("Path")
        return self._report(self.vfs.mkdir(args[0]))

    def cmd_cd(self, args: List[str]) -> int:
        """Change directory."""
        if not args:
            return self._missing("Path")
        result = self.vfs.cd(args[0])
        if result.success:
            return 0
        return self._report(result)

    def cmd_pwd(self, args: List[str]) -> int:
        """Print working directory."""
        return self._report(self.vfs.pwd())

    def cmd_ls(self, args: List[str]) -> int:
        """List the current directory."""
        return self._report(self.vfs.ls())

    def cmd_touch(self, args: List[str]) -> int:
        """Create a file with optional content."""
        if not args:
            return self._missing("Path")
        result = self.vfs.touch(args[0], self._current.rest(1))
        if result.success:
            return 0
        return self._report(result)

    def cmd_write(self, args: List[str]) -> int:
        """Replace a file's content."""
        if not args:
            return self._missing("Path")
        result = self.vfs.write(args[0], self._current.rest(1))
        if result.success:
            return 0
        return self._report(result)

    def cmd_cat(self, args: List[str]) -> int:
        """Display file content."""
        if not args:
            return self._missing("Path")
        result = self.vfs.cat(args[0])
        if result.success and not result.value:
            print("File is empty")
            return 0
        return self._report(result)

    def cmd_rm(self, args: List[str]) -> int:
        """Remove a file."""
        if not args:
            return self._missing("Path")
        return self._report(self.vfs.rm(args[0]))

    def cmd_mv(self, args: List[str]) -> int:
        """Move a node."""
        if len(args) < 2:
            return self._missing("Source or destination path")
        return self._report(self.vfs.mv(args[0], args[1]))

    def cmd_cp(self, args: List[str]) -> int:
        """Copy a node."""
        if len(args) < 2:
            return self._missing("Source or destination path")
        return self._report(self.vfs.cp(args[0], args[1]))

    def cmd_stat(self, args: List[str]) -> int:
        """Display metadata."""
        if not args:
            return self._missing("Path")
        return self._report(self.vfs.stat(args[0]))

    def cmd_save(self, args: List[str]) -> int:
        """Flatten all file contents into a host file."""
        if not args:
            return self._missing("Filename")
        return self._report(self.vfs.save_to_file(args[0]))

    def cmd_load(self, args: List[str]) -> int:
        """Load a host file into one file node."""
        if not args:
            return self._missing("Filename")
        if len(args) < 2:
            return self._missing("Target path")
        return self._report(self.vfs.load_from_file(args[0], args[1]))

    def cmd_rename(self, args: List[str]) -> int:
        """Rename a node."""
        if len(args) < 2:
            return self._missing("Old or new name")
        return self._report(self.vfs.rename(args[0], args[1]))

    def cmd_rmdir(self, args: List[str]) -> int:
        """Remove a directory tree."""
        if not args:
            return self._missing("Path")
        return self._report(self.vfs.rmdir(args[0]))

    def cmd_create_symlink(self, args: List[str]) -> int:
        """Create a symlink in the current directory."""
        if len(args) < 2:
            return self._missing("Target or link name")
        return self._report(self.vfs.create_symlink(args[0], args[1]))

    def cmd_chmod(self, args: List[str]) -> int:
        """Change permissions; the mode is octal, e.g. 644."""
        if len(args) < 2:
            return self._missing("Path or mode")
        try:
            mode = int(args[1], 8)
        except ValueError:
            print(f"Error: Invalid mode: {args[1]}")
            return 2
        return self._report(self.vfs.chmod(args[0], mode))

    def cmd_chown(self, args: List[str]) -> int:
        """Change owner."""
        if len(args) < 2:
            return self._missing("Path or owner")
        return self._report(self.vfs.chown(args[0], args[1]))

    def cmd_find(self, args: List[str]) -> int:
        """Find by name, case-sensitive."""
        if not args:
            return self._missing("Pattern")
        return self._report(self.vfs.find(args[0]))

    def cmd_findi(self, args: List[str]) -> int:
        """Find by name, ignoring ASCII case."""
        if not args:
            return self._missing("Pattern")
        return self._report(self.vfs.find_case_insensitive(args[0]))

    def cmd_grep(self, args: List[str]) -> int:
        """Find files by content."""
        if not args:
            return self._missing("Pattern")
        return self._report(self.vfs.grep(args[0]))
