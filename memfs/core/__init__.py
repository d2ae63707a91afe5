"""
MemFS Core

Configuration shared by the filesystem engine and the shell.
"""

from .config_loader import (
    Config,
    ConfigLoader,
    FilesystemConfig,
    LoggingConfig,
    ShellConfig,
    get_config,
)

__all__ = [
    'Config',
    'ConfigLoader',
    'FilesystemConfig',
    'LoggingConfig',
    'ShellConfig',
    'get_config',
]
