"""
Filesystem Exceptions

Exceptions raised by the in-memory tree engine. Each one carries an
ErrorKind so the engine boundary can report a discrete failure reason
without letting the exception escape.

Author: YSNRFD
Version: 1.0.0
"""

from enum import Enum
from typing import Optional, Any


class ErrorKind(Enum):
    """Failure reasons reported by engine operations."""
    PATH_TOO_LONG = "PathTooLong"
    PATH_NOT_FOUND = "PathNotFound"
    NOT_A_DIRECTORY = "NotADirectory"
    NOT_A_FILE = "NotAFile"
    ALREADY_EXISTS = "AlreadyExists"
    CANNOT_MODIFY_ROOT = "CannotModifyRoot"
    EMPTY_SOURCE_STREAM = "EmptySourceStream"
    INVALID_TARGET = "InvalidTarget"
    INVALID_NAME = "InvalidName"
    CIRCULAR_REFERENCE = "CircularReference"
    STREAM_ERROR = "StreamError"
    ENCODING_ERROR = "EncodingError"


class FileSystemException(Exception):
    """
    Base exception for all filesystem-related errors.

    Attributes:
        message: Human-readable error description
        path: File path associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
        kind: ErrorKind reported at the engine boundary
    """

    kind: Optional[ErrorKind] = None

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.error_code = error_code or 4000
        self.context = context or {}
        if path:
            self.context["path"] = path

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.path:
            base = f"{base} (path={self.path})"
        return base


class PathNotFoundError(FileSystemException):
    """
    The specified path does not resolve to a node.

    Example:
        >>> raise PathNotFoundError("/path/to/file")
    """

    kind = ErrorKind.PATH_NOT_FOUND

    def __init__(
        self,
        path: str,
        component: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if component:
            ctx["component"] = component
        super().__init__(
            message=f"Path not found: {path}",
            path=path,
            error_code=4001,
            context=ctx
        )
        self.component = component


class AlreadyExistsError(FileSystemException):
    """
    An entry with the requested name already exists.

    The qualifier says which kind of sibling caused the collision:
    'directory' for mkdir, 'file' for touch, 'entry' when any kind
    conflicts (rename, mv, cp, createSymlink).

    Example:
        >>> raise AlreadyExistsError("/docs", qualifier="directory")
    """

    kind = ErrorKind.ALREADY_EXISTS

    def __init__(
        self,
        path: str,
        qualifier: str = "entry",
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["qualifier"] = qualifier
        labels = {
            "directory": "Directory",
            "file": "File",
        }
        label = labels.get(qualifier, "A file or directory")
        super().__init__(
            message=f"{label} already exists: {path}",
            path=path,
            error_code=4002,
            context=ctx
        )
        self.qualifier = qualifier


class PathTooLongError(FileSystemException):
    """
    Path exceeds the maximum allowed length.

    Example:
        >>> raise PathTooLongError("/a" * 200, limit=255)
    """

    kind = ErrorKind.PATH_TOO_LONG

    def __init__(
        self,
        path: str,
        limit: int = 255,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["length"] = len(path)
        ctx["limit"] = limit
        super().__init__(
            message=f"Path length exceeds maximum allowed length of {limit} characters",
            error_code=4010,
            context=ctx
        )
        self.limit = limit


class NotAFileError(FileSystemException):
    """
    Path is not a regular file.

    This exception is raised when a file operation is attempted
    on a path that is not a regular file (e.g., a directory).

    Example:
        >>> raise NotAFileError("/path/to/directory")
    """

    kind = ErrorKind.NOT_A_FILE

    def __init__(
        self,
        path: str,
        actual_type: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if actual_type:
            ctx["actual_type"] = actual_type
        super().__init__(
            message=f"Not a file: {path}",
            path=path,
            error_code=4008,
            context=ctx
        )
        self.actual_type = actual_type


class NotADirectoryError(FileSystemException):
    """
    Path is not a directory.

    Example:
        >>> raise NotADirectoryError("/path/to/file")
    """

    kind = ErrorKind.NOT_A_DIRECTORY

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Not a directory: {path}",
            path=path,
            error_code=4009,
            context=context
        )


class CannotModifyRootError(FileSystemException):
    """
    The root directory cannot be removed, renamed, moved or copied.

    Example:
        >>> raise CannotModifyRootError(operation="rmdir")
    """

    kind = ErrorKind.CANNOT_MODIFY_ROOT

    def __init__(
        self,
        operation: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        super().__init__(
            message="Cannot modify the root directory",
            path="/",
            error_code=4011,
            context=ctx
        )
        self.operation = operation


class EmptySourceStreamError(FileSystemException):
    """
    The stream given to load() contained no data.

    Example:
        >>> raise EmptySourceStreamError(source="backup.txt")
    """

    kind = ErrorKind.EMPTY_SOURCE_STREAM

    def __init__(
        self,
        source: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if source:
            ctx["source"] = source
        super().__init__(
            message="The source stream is empty or could not be read",
            error_code=4012,
            context=ctx
        )
        self.source = source


class InvalidTargetError(FileSystemException):
    """
    The target of an operation is missing or of the wrong kind.

    Used by createSymlink (target must exist), load (target must be a
    file) and mv (source and destination must differ).

    Example:
        >>> raise InvalidTargetError("/docs", reason="target is a directory")
    """

    kind = ErrorKind.INVALID_TARGET

    def __init__(
        self,
        path: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        message = f"Invalid target: {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message=message,
            path=path,
            error_code=4013,
            context=ctx
        )
        self.reason = reason


class InvalidNameError(FileSystemException):
    """
    A node name is empty, contains '/', or is '.' or '..'.

    Example:
        >>> raise InvalidNameError("")
    """

    kind = ErrorKind.INVALID_NAME

    def __init__(
        self,
        name: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["name"] = name
        super().__init__(
            message=f"Invalid name: {name!r}",
            error_code=4014,
            context=ctx
        )
        self.name = name


class CircularReferenceError(FileSystemException):
    """
    A move would place a node inside its own subtree.

    Example:
        >>> raise CircularReferenceError("/a", destination="/a/b")
    """

    kind = ErrorKind.CIRCULAR_REFERENCE

    def __init__(
        self,
        path: str,
        destination: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if destination:
            ctx["destination"] = destination
        super().__init__(
            message=f"Cannot move a directory into itself: {path}",
            path=path,
            error_code=4015,
            context=ctx
        )
        self.destination = destination


class StreamError(FileSystemException):
    """
    A host file backing save/load could not be opened.

    Example:
        >>> raise StreamError("backup.txt", mode="read")
    """

    kind = ErrorKind.STREAM_ERROR

    def __init__(
        self,
        filename: str,
        mode: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if mode:
            ctx["mode"] = mode
        super().__init__(
            message=f"Unable to open stream for {mode or 'access'}: {filename}",
            path=filename,
            error_code=4016,
            context=ctx
        )
        self.mode = mode


class EncodingError(FileSystemException):
    """
    File content cannot be represented in the node's encoding.

    Example:
        >>> raise EncodingError("notes.txt", encoding="latin-1")
    """

    kind = ErrorKind.ENCODING_ERROR

    def __init__(
        self,
        name: str,
        encoding: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["encoding"] = encoding
        super().__init__(
            message=f"Content of '{name}' cannot be encoded as {encoding}",
            error_code=4017,
            context=ctx
        )
        self.encoding = encoding
