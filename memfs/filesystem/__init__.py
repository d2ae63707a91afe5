"""
MemFS Filesystem Package

The in-memory tree engine and its parts.
"""

from .node import Node, NodeKind
from .path_resolver import PathResolver, ParsedPath
from .results import OperationResult, operation
from .search import SearchMatch, walk_breadth_first
from .vfs import VirtualFileSystem

__all__ = [
    'Node',
    'NodeKind',
    'PathResolver',
    'ParsedPath',
    'OperationResult',
    'operation',
    'SearchMatch',
    'walk_breadth_first',
    'VirtualFileSystem',
]
