"""
MemFS - An In-Memory File System Simulation

A single rooted tree of directories, files and symlinks held entirely
in memory, with a small shell on top. Implemented in Python 3.10+ using
only the standard library.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

# Import main components for convenience
from .filesystem import VirtualFileSystem, OperationResult, Node, NodeKind
from .shell import Shell

__all__ = [
    'VirtualFileSystem',
    'OperationResult',
    'Node',
    'NodeKind',
    'Shell',
]
