"""
Virtual File System (VFS) Module

The in-memory tree engine:
- One rooted tree of directories, files and symlinks
- Path resolution from the root or the current directory
- Create, delete, rename, move and copy operations
- Breadth-first name and content search
- Flattened save to a stream and single-file load from a stream

Every public operation returns an OperationResult; no filesystem
exception escapes an engine method.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, IO, Tuple

from .node import Node, NodeKind
from .path_resolver import PathResolver
from .results import OperationResult, operation
from . import codec
from . import search
from memfs.core.config_loader import FilesystemConfig, get_config
from memfs.exceptions import (
    FileSystemException,
    PathNotFoundError,
    AlreadyExistsError,
    NotAFileError,
    NotADirectoryError,
    CannotModifyRootError,
    InvalidTargetError,
    CircularReferenceError,
    StreamError,
)
from memfs.logger import get_logger


class VirtualFileSystem:
    """
    In-memory file system.

    Each instance owns its own tree and current directory, so several
    independent file systems can live side by side.

    Example:
        >>> vfs = VirtualFileSystem()
        >>> vfs.mkdir('/docs').success
        True
        >>> vfs.touch('/docs/a.txt', 'hello').success
        True
        >>> [str(m) for m in vfs.find('a').value]
        ['/docs/a.txt (file)']
    """

    def __init__(self, config: Optional[FilesystemConfig] = None):
        self._config = config or get_config().filesystem
        self._logger = get_logger('vfs')
        self._root = Node(
            name='/',
            kind=NodeKind.DIRECTORY,
            owner=self._config.default_owner,
            permissions=self._config.default_permissions,
            encoding=self._config.encoding,
        )
        self._cwd = self._root

        self._logger.info(
            "In-memory filesystem initialized",
            context={'max_path_length': self._config.max_path_length}
        )

    @property
    def root(self) -> Node:
        return self._root

    @property
    def cwd(self) -> Node:
        return self._cwd

    @property
    def config(self) -> FilesystemConfig:
        return self._config

    # Helpers

    def _new_node(self, name: str, kind: NodeKind, **fields) -> Node:
        return Node(
            name=name,
            kind=kind,
            owner=self._config.default_owner,
            permissions=self._config.default_permissions,
            encoding=self._config.encoding,
            **fields
        )

    def _resolve(self, path: str) -> Node:
        return PathResolver.resolve_node(
            path, self._root, self._cwd, self._config.max_path_length
        )

    def _resolve_parent(self, path: str) -> Tuple[Node, str]:
        """
        Resolve the directory that would hold `path` and its final name.

        Raises:
            PathTooLongError, InvalidNameError, PathNotFoundError,
            NotADirectoryError
        """
        PathResolver.check_length(path, self._config.max_path_length)

        parent_path, name = PathResolver.split(path)
        PathResolver.validate_name(name)

        parent = self._resolve(parent_path)
        if not parent.is_directory:
            raise NotADirectoryError(parent_path)

        return parent, name

    def _resolve_destination(self, dest_path: str, source: Node) -> Tuple[Node, str]:
        """
        Destination rule shared by mv and cp.

        An existing directory at `dest_path` receives the source under its
        own name; otherwise the last segment is the new name and the rest
        must be an existing directory.
        """
        try:
            dest = self._resolve(dest_path)
        except PathNotFoundError:
            dest = None

        if dest is not None and dest.is_directory:
            return dest, source.name

        return self._resolve_parent(dest_path)

    def _child_path(self, parent: Node, name: str) -> str:
        parent_path = PathResolver.build_path(parent)
        if parent_path == '/':
            return '/' + name
        return f"{parent_path}/{name}"

    def find_node(self, path: str) -> Optional[Node]:
        """
        Look up a node without raising.

        Returns:
            The node, or None if the path is too long or does not resolve
        """
        try:
            return self._resolve(path)
        except FileSystemException:
            return None

    def count_nodes(self) -> int:
        """Number of nodes reachable from the root, the root included."""
        return self._root.count()

    # Navigation

    @operation('cd')
    def cd(self, path: str) -> OperationResult:
        """Change the current directory."""
        node = self._resolve(path)

        if not node.is_directory:
            raise NotADirectoryError(path)

        self._cwd = node
        current = PathResolver.build_path(node)
        return OperationResult.ok(current, value=current)

    @operation('pwd')
    def pwd(self) -> OperationResult:
        """Absolute path of the current directory."""
        current = PathResolver.build_path(self._cwd)
        return OperationResult.ok(current, value=current)

    @operation('ls')
    def ls(self) -> OperationResult:
        """
        List the current directory.

        Returns:
            Result whose value is a list of (name, NodeKind) in child-list order
        """
        entries = [(child.name, child.kind) for child in self._cwd.children]

        if not entries:
            return OperationResult.ok("No files or directories", value=entries)

        tags = {
            NodeKind.DIRECTORY: 'DIR',
            NodeKind.FILE: 'FILE',
            NodeKind.SYMLINK: 'LINK',
        }
        lines = [f"[{tags[kind]}] {name}" for name, kind in entries]
        return OperationResult.ok("\n".join(lines), value=entries)

    @operation('stat')
    def stat(self, path: str) -> OperationResult:
        """
        Metadata of a node.

        Returns:
            Result whose value is the node's to_dict()
        """
        node = self._resolve(path)
        info = node.to_dict()
        lines = [f"{key.replace('_', ' ').capitalize()}: {value}" for key, value in info.items()]
        return OperationResult.ok("\n".join(lines), value=info)

    # Creation

    @operation('mkdir')
    def mkdir(self, path: str) -> OperationResult:
        """
        Create a directory.

        Only an existing directory with the same name is a conflict; a
        file with that name may already be there.
        """
        parent, name = self._resolve_parent(path)

        if parent.has_child(name, kind=NodeKind.DIRECTORY):
            raise AlreadyExistsError(self._child_path(parent, name), qualifier='directory')

        node = self._new_node(name, NodeKind.DIRECTORY)
        parent.prepend_child(node)

        return OperationResult.ok(f"Directory '{name}' created successfully", value=node)

    @operation('touch')
    def touch(self, path: str, content: str = "") -> OperationResult:
        """
        Create a file with optional content.

        Only an existing non-directory with the same name is a conflict;
        a directory with that name may already be there.
        """
        parent, name = self._resolve_parent(path)

        if parent.has_child(name, exclude_kind=NodeKind.DIRECTORY):
            raise AlreadyExistsError(self._child_path(parent, name), qualifier='file')

        node = self._new_node(name, NodeKind.FILE, content=content)
        parent.prepend_child(node)

        return OperationResult.ok(f"File '{name}' created successfully", value=node)

    @operation('createSymlink')
    def create_symlink(self, target_path: str, link_name: str) -> OperationResult:
        """
        Create a symlink named `link_name` in the current directory.

        The target must exist now; the link stores the literal target
        string and is never resolved afterwards. Unlike every other
        creation, the link goes to the END of the child list.
        """
        try:
            self._resolve(target_path)
        except PathNotFoundError:
            raise InvalidTargetError(target_path, reason="target not found")

        PathResolver.validate_name(link_name)

        if self._cwd.find_child(link_name) is not None:
            raise AlreadyExistsError(self._child_path(self._cwd, link_name))

        node = self._new_node(link_name, NodeKind.SYMLINK, link_target=target_path)
        self._cwd.append_child(node)

        return OperationResult.ok(
            f"Symbolic link '{link_name}' created successfully, pointing to '{target_path}'",
            value=node
        )

    # File content

    @operation('write')
    def write(self, path: str, content: str) -> OperationResult:
        """Replace a file's content."""
        node = self._resolve(path)

        if not node.is_file:
            raise NotAFileError(path, actual_type=node.kind.value)

        size = node.write(content)
        return OperationResult.ok(f"Wrote {size} bytes to '{node.name}'", value=size)

    @operation('cat')
    def cat(self, path: str) -> OperationResult:
        """Content of a file."""
        node = self._resolve(path)

        if not node.is_file:
            raise NotAFileError(path, actual_type=node.kind.value)

        return OperationResult.ok(node.content, value=node.content)

    # Removal

    @operation('rm')
    def rm(self, path: str) -> OperationResult:
        """
        Remove a file or symlink.

        The name is looked up in the parent directory and the first match
        is taken; if that match is a directory the removal fails.
        """
        PathResolver.check_length(path, self._config.max_path_length)

        parent_path, name = PathResolver.split(path)
        parent = self._resolve(parent_path)

        if not parent.is_directory:
            raise NotADirectoryError(parent_path)

        target = parent.find_child(name)
        if target is None:
            raise PathNotFoundError(path, component=name)

        if target.is_directory:
            raise NotAFileError(path, actual_type='directory')

        parent.unlink_child(target)
        target.release()

        return OperationResult.ok(f"File {path} deleted successfully")

    @operation('rmdir')
    def rmdir(self, path: str) -> OperationResult:
        """
        Remove a node and everything below it.

        The whole subtree is released, not just detached. If the current
        directory was inside it, the current directory moves to the
        removed node's parent.
        """
        target = self._resolve(path)

        if target is self._root:
            raise CannotModifyRootError(operation='rmdir')

        parent = target.parent
        contains_cwd = target.is_ancestor_of(self._cwd)

        parent.unlink_child(target)
        released = target.release()

        if contains_cwd:
            self._cwd = parent

        self._logger.debug(
            "Released subtree",
            context={'path': path, 'nodes': released}
        )
        return OperationResult.ok("Directory removed successfully", value=released)

    # Rename, move, copy

    @operation('rename')
    def rename(self, old_path: str, new_name: str) -> OperationResult:
        """
        Rename a node in place.

        Any sibling with the new name is a conflict, whatever its kind.
        """
        target = self._resolve(old_path)

        if target is self._root:
            raise CannotModifyRootError(operation='rename')

        PathResolver.validate_name(new_name)

        parent = target.parent
        if parent.find_child(new_name) is not None:
            raise AlreadyExistsError(self._child_path(parent, new_name))

        target.rename(new_name)
        return OperationResult.ok("Renamed successfully", value=target)

    @operation('mv')
    def mv(self, source_path: str, dest_path: str) -> OperationResult:
        """
        Move a node.

        A directory cannot be moved into itself or one of its descendants.
        """
        source = self._resolve(source_path)

        if source is self._root:
            raise CannotModifyRootError(operation='mv')

        if source_path == dest_path:
            raise InvalidTargetError(dest_path, reason="source and destination are the same")

        dest_parent, dest_name = self._resolve_destination(dest_path, source)

        if source.is_ancestor_of(dest_parent):
            raise CircularReferenceError(source_path, destination=dest_path)

        if dest_parent.find_child(dest_name) is not None:
            raise AlreadyExistsError(self._child_path(dest_parent, dest_name))

        source.parent.unlink_child(source)
        source.rename(dest_name)
        dest_parent.prepend_child(source)

        return OperationResult.ok(
            f"Successfully moved {source_path} to {dest_path}",
            value=source
        )

    @operation('cp')
    def cp(self, source_path: str, dest_path: str) -> OperationResult:
        """
        Deep-copy a node.

        The copy shares nothing with the source. It is built completely
        before being linked, so copying a directory into its own subtree
        copies the subtree as it was before the call. The root itself
        cannot be copied.
        """
        source = self._resolve(source_path)

        if source is self._root:
            raise CannotModifyRootError(operation='cp')

        dest_parent, dest_name = self._resolve_destination(dest_path, source)

        if dest_parent.find_child(dest_name) is not None:
            raise AlreadyExistsError(self._child_path(dest_parent, dest_name))

        copy = source.clone(name=dest_name)
        dest_parent.prepend_child(copy)

        return OperationResult.ok(
            f"Successfully copied {source_path} to {dest_path}",
            value=copy
        )

    # Attributes

    @operation('chmod')
    def chmod(self, path: str, mode: int) -> OperationResult:
        """Change permission bits. Informational only, never enforced."""
        node = self._resolve(path)
        node.chmod(mode)
        return OperationResult.ok(f"Permissions for '{path}' updated successfully", value=node)

    @operation('chown')
    def chown(self, path: str, owner: str) -> OperationResult:
        """Change owner. Informational only, never enforced."""
        node = self._resolve(path)
        node.chown(owner)
        return OperationResult.ok(
            f"Ownership of '{path}' updated successfully to '{owner}'",
            value=node
        )

    # Search

    @operation('find')
    def find(self, pattern: str) -> OperationResult:
        """Case-sensitive name search from the current directory."""
        matches = search.find(self._cwd, pattern)
        return self._matches_result(matches)

    @operation('findi')
    def find_case_insensitive(self, pattern: str) -> OperationResult:
        """ASCII case-insensitive name search from the current directory."""
        matches = search.find_case_insensitive(self._cwd, pattern)
        return self._matches_result(matches)

    def _matches_result(self, matches) -> OperationResult:
        if not matches:
            return OperationResult.ok("No matches found.", value=matches)
        return OperationResult.ok("\n".join(str(m) for m in matches), value=matches)

    @operation('grep')
    def grep(self, substring: str) -> OperationResult:
        """Names of files below the current directory containing `substring`."""
        names = search.grep(self._cwd, substring)

        if not names:
            return OperationResult.ok("No files contain the specified content.", value=names)

        lines = [f"File: {name} contains the specified content." for name in names]
        return OperationResult.ok("\n".join(lines), value=names)

    # Persistence
    #
    # save dumps the content of EVERY file in the tree; load overwrites ONE
    # file. The stream has no names or structure, so save followed by load
    # does not rebuild anything.

    def _load_target(self, target_path: str) -> Node:
        try:
            target = self._resolve(target_path)
        except PathNotFoundError:
            raise InvalidTargetError(target_path, reason="target not found")

        if target.is_directory:
            raise InvalidTargetError(target_path, reason="cannot load content into a directory")
        if not target.is_file:
            raise InvalidTargetError(target_path, reason=f"target is a {target.kind.value}")

        return target

    @operation('save')
    def save(self, stream: IO) -> OperationResult:
        """
        Flatten all file contents into `stream`.

        The stream is left open; the caller owns it.
        """
        count = codec.flatten(self._root, stream, self._config.encoding)
        return OperationResult.ok("File system content saved", value=count)

    @operation('load')
    def load(self, stream: IO, target_path: str) -> OperationResult:
        """
        Overwrite one file with the whole content of `stream`.

        The stream is left open; the caller owns it.
        """
        target = self._load_target(target_path)
        size = codec.restore(stream, target, self._config.encoding)
        return OperationResult.ok(
            f"File content successfully loaded into node: {target.name}",
            value=size
        )

    @operation('save')
    def save_to_file(self, filename: str) -> OperationResult:
        """Flatten all file contents into a host file."""
        try:
            stream = open(filename, 'wb')
        except OSError:
            raise StreamError(filename, mode='write')

        with stream:
            try:
                count = codec.flatten(self._root, stream, self._config.encoding)
            except OSError:
                raise StreamError(filename, mode='write')

        return OperationResult.ok(f"File system content saved to {filename}", value=count)

    @operation('load')
    def load_from_file(self, filename: str, target_path: str) -> OperationResult:
        """Overwrite one file with the content of a host file."""
        target = self._load_target(target_path)

        try:
            stream = open(filename, 'rb')
        except OSError:
            raise StreamError(filename, mode='read')

        with stream:
            try:
                size = codec.restore(stream, target, self._config.encoding, source=filename)
            except OSError:
                raise StreamError(filename, mode='read')

        return OperationResult.ok(
            f"Content from '{filename}' successfully loaded into node: {target_path}",
            value=size
        )
