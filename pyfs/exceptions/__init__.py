"""
PyFS Exception Hierarchy

All exceptions inherit from FileSystemException.

Architecture:
    FileSystemException (Base)
    ├── InvalidArgumentError      (also a ValueError)
    ├── ItemNotWritableError
    ├── IllegalItemStateError
    ├── ItemCannotBeRootError
    ├── NotAllWritableError
    ├── InvalidLinkError
    ├── ItemIndexError            (also an IndexError)
    └── ConfigurationError
"""

from .fs_exceptions import (
    FileSystemException,
    InvalidArgumentError,
    ItemNotWritableError,
    IllegalItemStateError,
    ItemCannotBeRootError,
    NotAllWritableError,
    InvalidLinkError,
    ItemIndexError,
)

from .config_exceptions import ConfigurationError

__all__ = [
    "FileSystemException",
    "InvalidArgumentError",
    "ItemNotWritableError",
    "IllegalItemStateError",
    "ItemCannotBeRootError",
    "NotAllWritableError",
    "InvalidLinkError",
    "ItemIndexError",
    "ConfigurationError",
]
