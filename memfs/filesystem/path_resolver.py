"""
Path Resolver Module

Handles path parsing and node lookup in the in-memory file system.

Resolution walks the tree from an anchor: the root for absolute paths,
the current directory otherwise. Symlinks are never followed.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import List, Tuple

from .node import Node
from memfs.exceptions import (
    PathNotFoundError,
    PathTooLongError,
    InvalidNameError,
)


@dataclass
class ParsedPath:
    """A parsed path with its components."""
    is_absolute: bool
    components: List[str]

    def __str__(self) -> str:
        if self.is_absolute:
            return '/' + '/'.join(self.components)
        return '/'.join(self.components) if self.components else '.'


class PathResolver:
    """
    Resolves and manipulates filesystem paths.

    Handles:
    - Absolute and relative paths
    - . and .. components
    - Parent/name splitting for creation operations
    - Absolute path reconstruction from a node
    """

    @staticmethod
    def parse(path: str) -> ParsedPath:
        """
        Parse a path into components.

        Empty segments and '.' are dropped; '..' is kept because its
        meaning depends on the node being walked.

        Args:
            path: Path string to parse

        Returns:
            ParsedPath with components
        """
        is_absolute = path.startswith('/')

        components = [c for c in path.split('/') if c and c != '.']

        return ParsedPath(is_absolute=is_absolute, components=components)

    @staticmethod
    def check_length(path: str, max_length: int = 255) -> None:
        """Raise PathTooLongError if the path is longer than allowed."""
        if len(path) > max_length:
            raise PathTooLongError(path, limit=max_length)

    @staticmethod
    def resolve_node(
        path: str,
        root: Node,
        cwd: Node,
        max_length: int = 255
    ) -> Node:
        """
        Resolve a path to a node.

        Each component is matched against the children of the current
        node in child-list order and the first name match wins, whatever
        its kind.

        Args:
            path: Path to resolve
            root: Root of the tree
            cwd: Current working directory (anchor for relative paths)
            max_length: Longest accepted path

        Returns:
            The node at `path`

        Raises:
            PathTooLongError: If the path is too long
            PathNotFoundError: If any component does not resolve
        """
        PathResolver.check_length(path, max_length)

        if path == '/':
            return root

        if not path:
            raise PathNotFoundError(path)

        parsed = PathResolver.parse(path)
        node = root if parsed.is_absolute else cwd

        for component in parsed.components:
            if component == '..':
                parent = node.parent
                if parent is None:
                    raise PathNotFoundError(path, component=component)
                node = parent
                continue

            child = node.find_child(component)
            if child is None:
                raise PathNotFoundError(path, component=component)
            node = child

        return node

    @staticmethod
    def split(path: str) -> Tuple[str, str]:
        """
        Split a path into parent path and final name at the last '/'.

        A bare name belongs to the current directory, and a trailing
        slash leaves an empty name for the caller to reject.

        Examples:
            '/a/b' -> ('/a', 'b')
            '/a'   -> ('/', 'a')
            'a'    -> ('.', 'a')
            'a/'   -> ('a', '')

        Args:
            path: Path string

        Returns:
            Tuple of (parent_path, name)
        """
        index = path.rfind('/')

        if index < 0:
            return ('.', path)

        if index == 0:
            return ('/', path[1:])

        return (path[:index], path[index + 1:])

    @staticmethod
    def validate_name(name: str) -> str:
        """
        Check that `name` can be stored as a node name.

        Raises:
            InvalidNameError: If the name is empty, '.', '..' or has a '/'
        """
        if not name or name in ('.', '..') or '/' in name:
            raise InvalidNameError(name)
        return name

    @staticmethod
    def build_path(node: Node) -> str:
        """
        Reconstruct the absolute path of a node.

        Args:
            node: Any node attached to the tree

        Returns:
            '/' for the root, otherwise '/a/b/c'
        """
        names: List[str] = []
        current = node

        while current.parent is not None:
            names.append(current.name)
            current = current.parent

        if not names:
            return '/'

        return '/' + '/'.join(reversed(names))
