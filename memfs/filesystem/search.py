"""
Search Module

Breadth-first traversal and the name/content searches built on it.

The walk follows the child/sibling shape of the tree: visiting a node
queues its first child, then its next sibling. Starting from a directory
this covers the directory itself and its whole subtree, never the
directory's own siblings.

Author: YSNRFD
Version: 1.0.0
"""

import string
from collections import deque
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .node import Node, NodeKind
from .path_resolver import PathResolver


_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


@dataclass
class SearchMatch:
    """A node found by name."""
    path: str
    kind: NodeKind

    def __str__(self) -> str:
        return f"{self.path} ({self.kind.value})"


def ascii_lower(text: str) -> str:
    """Lowercase A-Z only; every other character is left as is."""
    return text.translate(_ASCII_LOWER)


def walk_breadth_first(start: Node) -> Iterator[Node]:
    """
    Yield `start` and every node below it in breadth-first order.

    Args:
        start: Node to start from (usually the current directory)

    Yields:
        Nodes in visit order
    """
    yield start

    # (sibling list, index) stands for "the node at this position"
    queue: deque[Tuple[List[Node], int]] = deque()
    if start.children:
        queue.append((start.children, 0))

    while queue:
        siblings, index = queue.popleft()
        node = siblings[index]
        yield node

        if node.children:
            queue.append((node.children, 0))
        if index + 1 < len(siblings):
            queue.append((siblings, index + 1))


def find(start: Node, pattern: str) -> List[SearchMatch]:
    """Case-sensitive substring search on node names."""
    return [
        SearchMatch(path=PathResolver.build_path(node), kind=node.kind)
        for node in walk_breadth_first(start)
        if pattern in node.name
    ]


def find_case_insensitive(start: Node, pattern: str) -> List[SearchMatch]:
    """Like find(), comparing ASCII-lowercased pattern and names."""
    needle = ascii_lower(pattern)
    return [
        SearchMatch(path=PathResolver.build_path(node), kind=node.kind)
        for node in walk_breadth_first(start)
        if needle in ascii_lower(node.name)
    ]


def grep(start: Node, substring: str) -> List[str]:
    """Names of the files whose content contains `substring`."""
    return [
        node.name
        for node in walk_breadth_first(start)
        if node.is_file and substring in node.content
    ]
