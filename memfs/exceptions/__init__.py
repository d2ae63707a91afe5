"""
MemFS Exception Hierarchy

Architecture:
    ConfigError
    └── ConfigValidationError
    FileSystemException (Base)
    ├── PathTooLongError
    ├── PathNotFoundError
    ├── NotADirectoryError
    ├── NotAFileError
    ├── AlreadyExistsError
    ├── CannotModifyRootError
    ├── EmptySourceStreamError
    ├── InvalidTargetError
    ├── InvalidNameError
    ├── CircularReferenceError
    ├── StreamError
    └── EncodingError

Every FileSystemException subclass carries an ErrorKind, the value
reported in a failed OperationResult.
"""

from .config_exceptions import (
    ConfigError,
    ConfigValidationError,
)

from .fs_exceptions import (
    ErrorKind,
    FileSystemException,
    PathTooLongError,
    PathNotFoundError,
    NotADirectoryError,
    NotAFileError,
    AlreadyExistsError,
    CannotModifyRootError,
    EmptySourceStreamError,
    InvalidTargetError,
    InvalidNameError,
    CircularReferenceError,
    StreamError,
    EncodingError,
)

__all__ = [
    # Configuration exceptions
    "ConfigError",
    "ConfigValidationError",
    # Filesystem exceptions
    "ErrorKind",
    "FileSystemException",
    "PathTooLongError",
    "PathNotFoundError",
    "NotADirectoryError",
    "NotAFileError",
    "AlreadyExistsError",
    "CannotModifyRootError",
    "EmptySourceStreamError",
    "InvalidTargetError",
    "InvalidNameError",
    "CircularReferenceError",
    "StreamError",
    "EncodingError",
]
