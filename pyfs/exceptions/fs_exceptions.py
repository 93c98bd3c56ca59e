"""
Filesystem Exceptions

Exceptions raised by the hierarchy model when an operation's
preconditions do not hold. Every failing operation leaves the
model unchanged.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class FileSystemException(Exception):
    """
    Base exception for all filesystem-related errors.

    Attributes:
        message: Human-readable error description
        path: Absolute path of the item involved (if applicable)
        error_code: Numeric error code for programmatic handling
        context: Additional structured information
    """

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


class InvalidArgumentError(FileSystemException, ValueError):
    """
    An argument is not acceptable for the operation.

    Raised for a missing or unsuitable parent or target, a name that
    collides with a sibling, an item that is not part of a directory,
    or a size outside the allowed range.

    Example:
        >>> raise InvalidArgumentError("Name already in use", path="/home/docs")
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            path=path,
            error_code=4010,
            context=context
        )


class ItemNotWritableError(FileSystemException):
    """
    A read-only item blocks the operation.

    The offending item may be the item being changed, its parent
    directory, or the destination of a move.

    Example:
        >>> raise ItemNotWritableError("/home/readonly", operation="move")
    """

    def __init__(
        self,
        path: str,
        operation: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        super().__init__(
            message=f"Item not writable: {path}",
            path=path,
            error_code=4011,
            context=ctx
        )
        self.operation = operation


class IllegalItemStateError(FileSystemException):
    """
    The item is in a state that does not allow the operation.

    Raised when a terminated item is renamed, moved, rooted or
    resized, and when an item that cannot be terminated is asked
    to terminate.
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            path=path,
            error_code=4012,
            context=context
        )


class ItemCannotBeRootError(FileSystemException):
    """
    The item kind can never be a root.

    Files and links always live inside a directory.

    Example:
        >>> raise ItemCannotBeRootError("/home/notes.txt", kind="file")
    """

    def __init__(
        self,
        path: str,
        kind: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if kind:
            ctx["kind"] = kind
        super().__init__(
            message=f"Item cannot be a root: {path}",
            path=path,
            error_code=4013,
            context=ctx
        )
        self.kind = kind


class NotAllWritableError(FileSystemException):
    """
    A recursive delete found a read-only item in the subtree.

    Example:
        >>> raise NotAllWritableError("/home", blocking="/home/locked")
    """

    def __init__(
        self,
        path: str,
        blocking: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if blocking:
            ctx["blocking"] = blocking
        super().__init__(
            message=f"Not all items are writable: {path}",
            path=path,
            error_code=4014,
            context=ctx
        )
        self.blocking = blocking


class InvalidLinkError(FileSystemException):
    """
    The link's target has been terminated or no longer exists.

    Example:
        >>> raise InvalidLinkError("/home/shortcut")
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Link target is no longer valid: {path}",
            path=path,
            error_code=4015,
            context=context
        )


class ItemIndexError(FileSystemException, IndexError):
    """
    A positional child access fell outside ``[1, child_count]``.

    Example:
        >>> raise ItemIndexError(5, count=2, path="/home")
    """

    def __init__(
        self,
        index: int,
        count: Optional[int] = None,
        path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["index"] = index
        if count is not None:
            ctx["count"] = count
        super().__init__(
            message=f"Index out of bounds: {index}",
            path=path,
            error_code=4016,
            context=ctx
        )
        self.index = index
        self.count = count
