#!/usr/bin/env python3
"""
MemFS - An In-Memory File System Simulation

This is the main entry point for MemFS.

Usage:
    memfs [config.json]
    memfs --script commands.txt [config.json]

Startup sequence:
1. Load configuration
2. Initialize logging
3. Create the filesystem
4. Run the shell

Author: YSNRFD
Version: 1.0.0
"""

import sys
from typing import Optional, List

from memfs.core.config_loader import ConfigLoader, get_config
from memfs.exceptions import ConfigError
from memfs.filesystem import VirtualFileSystem
from memfs.logger import Logger, LogLevel
from memfs.shell import Shell


def _setup(config_path: Optional[str]) -> None:
    """Load configuration and initialize logging."""
    if config_path:
        ConfigLoader().load(config_path)

    log_config = get_config().logging
    Logger.initialize(
        level=LogLevel.from_name(log_config.level),
        log_file=log_config.log_file,
        use_colors=log_config.use_colors,
        console_output=log_config.console_output,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for MemFS.

    Returns:
        Process exit code
    """
    args = list(sys.argv[1:] if argv is None else argv)

    script = None
    if args and args[0] == '--script':
        if len(args) < 2:
            print("Error: Script file is missing")
            return 2
        script = args[1]
        args = args[2:]

    config_path = args[0] if args else None

    try:
        _setup(config_path)
    except ConfigError as e:
        print(f"Configuration error: {e}")
        return 1

    config = get_config()
    shell = Shell(VirtualFileSystem(config.filesystem), config.shell)

    if script is not None:
        try:
            with open(script, 'r', encoding='utf-8') as f:
                return shell.run_script(f.read().splitlines())
        except OSError as e:
            print(f"Error: Unable to read script: {e}")
            return 1

    try:
        shell.run()
    except KeyboardInterrupt:
        print("\n\nInterrupted")

    return 0


if __name__ == '__main__':
    sys.exit(main())
