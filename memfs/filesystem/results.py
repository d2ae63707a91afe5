"""
Operation Results

Every public engine operation returns an OperationResult instead of
raising. The `operation` decorator is the engine boundary: it turns a
FileSystemException raised inside an operation into a failed result and
logs the outcome.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from functools import wraps
from typing import Any, Optional, Callable

from memfs.exceptions import ErrorKind, FileSystemException


@dataclass
class OperationResult:
    """Result of an engine operation."""
    success: bool
    message: str = ""
    value: Any = None
    error: Optional[ErrorKind] = None
    error_code: int = 0

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, message: str = "", value: Any = None) -> 'OperationResult':
        return cls(success=True, message=message, value=value)

    @classmethod
    def failure(cls, exc: FileSystemException) -> 'OperationResult':
        return cls(
            success=False,
            message=exc.message,
            error=exc.kind,
            error_code=exc.error_code,
        )


def operation(name: str) -> Callable:
    """
    Mark a method as an engine operation.

    The wrapped method may return an OperationResult or a plain value
    (wrapped into a successful result). FileSystemException subclasses
    are caught, logged at WARNING and reported as a failed result; any
    other exception is a bug and propagates.

    Example:
        >>> @operation('mkdir')
        ... def mkdir(self, path: str) -> OperationResult:
        ...     ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self, *args, **kwargs) -> OperationResult:
            try:
                result = func(self, *args, **kwargs)
            except FileSystemException as e:
                context = {'error': e.kind.value if e.kind else None}
                context.update(e.context)
                self._logger.warning(f"{name} failed: {e.message}", context=context)
                return OperationResult.failure(e)

            if not isinstance(result, OperationResult):
                result = OperationResult.ok(value=result)

            self._logger.debug(
                f"{name} succeeded",
                context={'args': str(args)[:100]}
            )
            return result

        return wrapper
    return decorator
