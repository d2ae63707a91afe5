"""
Node Module

Implements the node abstraction for the in-memory file system.
A node is one entry of the tree: a directory, a file or a symlink.

Each directory owns an ordered list of children. Children are
prepended on creation, so a directory lists its newest entry first;
symlinks are the one exception and are appended at the tail.
The parent link is a weak reference and never keeps a node alive.

Author: YSNRFD
Version: 1.0.0
"""

import time
import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Any, List, Iterator

from memfs.exceptions import EncodingError


class NodeKind(Enum):
    """Types of nodes."""
    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(eq=False)
class Node:
    """
    A filesystem entry.

    Stores metadata about a directory, file or symlink:
    - Name and kind
    - Owner and permission bits (informational only)
    - Size and timestamps
    - File content or symlink target
    - Children (directories only) and a weak parent link

    Nodes compare by identity: two files with identical fields are
    still different entries of the tree.
    """

    name: str
    kind: NodeKind
    content: str = ""
    link_target: str = ""
    size: int = 0
    owner: str = "root"
    permissions: int = 0o755
    encoding: str = field(default="utf-8", repr=False)

    # Timestamps
    created_at: float = field(default_factory=time.time)
    modified_at: float = field(default_factory=time.time)

    children: List['Node'] = field(default_factory=list, repr=False)
    _parent: Optional[weakref.ref] = field(default=None, repr=False)

    def __post_init__(self):
        if self.kind == NodeKind.FILE:
            self.size = self._measure(self.content)

    @property
    def is_directory(self) -> bool:
        return self.kind == NodeKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind == NodeKind.FILE

    @property
    def is_symlink(self) -> bool:
        return self.kind == NodeKind.SYMLINK

    @property
    def parent(self) -> Optional['Node']:
        """The directory holding this node, or None for the root."""
        if self._parent is None:
            return None
        return self._parent()

    def _measure(self, content: str) -> int:
        try:
            return len(content.encode(self.encoding))
        except UnicodeEncodeError:
            raise EncodingError(self.name, encoding=self.encoding)

    def touch(self) -> None:
        """Update the modification time."""
        self.modified_at = time.time()

    # Content and attributes

    def write(self, content: str) -> int:
        """
        Replace the file content.

        Args:
            content: New content

        Returns:
            New size in bytes

        Raises:
            EncodingError: If `content` cannot be encoded; the node is unchanged
        """
        if not self.is_file:
            raise ValueError("Not a file")

        size = self._measure(content)
        self.content = content
        self.size = size
        self.touch()
        return self.size

    def chmod(self, mode: int) -> None:
        """Change permission mode."""
        self.permissions = mode & 0o7777
        self.touch()

    def chown(self, owner: str) -> None:
        """Change owner."""
        self.owner = owner
        self.touch()

    def rename(self, name: str) -> None:
        """Change the name in place; the position among siblings is kept."""
        self.name = name
        self.touch()

    # Directory operations

    def find_child(self, name: str) -> Optional['Node']:
        """
        Return the first child named `name`, in child-list order.

        A file and a directory may share a name; the one created last
        comes first and wins.
        """
        for child in self.children:
            if child.name == name:
                return child
        return None

    def has_child(self, name: str, kind: Optional[NodeKind] = None, exclude_kind: Optional[NodeKind] = None) -> bool:
        """Check for a child named `name`, optionally filtered by kind."""
        for child in self.children:
            if child.name != name:
                continue
            if kind is not None and child.kind != kind:
                continue
            if exclude_kind is not None and child.kind == exclude_kind:
                continue
            return True
        return False

    def prepend_child(self, child: 'Node') -> None:
        """Insert a child at the head of the list."""
        if not self.is_directory:
            raise ValueError("Not a directory")
        child._parent = weakref.ref(self)
        self.children.insert(0, child)

    def append_child(self, child: 'Node') -> None:
        """Insert a child at the tail of the list."""
        if not self.is_directory:
            raise ValueError("Not a directory")
        child._parent = weakref.ref(self)
        self.children.append(child)

    def unlink_child(self, child: 'Node') -> None:
        """Detach a child without destroying it."""
        for index, candidate in enumerate(self.children):
            if candidate is child:
                del self.children[index]
                child._parent = None
                return
        raise ValueError(f"{child.name!r} is not a child of {self.name!r}")

    def release(self) -> int:
        """
        Tear down this node and its whole subtree.

        Every descendant is detached from its parent and its child list
        emptied, so nothing remains reachable from the released nodes.

        Returns:
            Number of nodes released, this one included
        """
        released = 1
        for child in self.children:
            released += child.release()
        self.children.clear()
        self._parent = None
        self.content = ""
        self.size = 0
        return released

    def clone(self, name: Optional[str] = None) -> 'Node':
        """
        Deep-copy this node and its subtree.

        Metadata (content, size, owner, permissions, timestamps, link
        target) is preserved. Descendants keep their names; the copy root
        takes `name` when given. The copy has no parent until linked.
        """
        copy = Node(
            name=self.name if name is None else name,
            kind=self.kind,
            content=self.content,
            link_target=self.link_target,
            size=self.size,
            owner=self.owner,
            permissions=self.permissions,
            encoding=self.encoding,
            created_at=self.created_at,
            modified_at=self.modified_at,
        )
        for child in self.children:
            child_copy = child.clone()
            child_copy._parent = weakref.ref(copy)
            copy.children.append(child_copy)
        return copy

    # Tree queries

    def ancestors(self) -> Iterator['Node']:
        """Yield the parent, grandparent, ... up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def is_ancestor_of(self, other: 'Node') -> bool:
        """True if `other` is this node or lies inside its subtree."""
        if other is self:
            return True
        return any(ancestor is self for ancestor in other.ancestors())

    def count(self) -> int:
        """Number of nodes in this subtree, this one included."""
        return 1 + sum(child.count() for child in self.children)

    def to_dict(self) -> dict[str, Any]:
        """Convert node to dictionary for display."""
        info: dict[str, Any] = {
            'name': self.name,
            'type': self.kind.label,
            'owner': self.owner,
            'permissions': oct(self.permissions),
            'created': time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(self.created_at)),
            'modified': time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(self.modified_at)),
        }
        if self.is_symlink:
            info['link_target'] = self.link_target
        if not self.is_directory:
            info['size'] = self.size
        return info
