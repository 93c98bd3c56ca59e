"""
File Module

A file is a leaf of the hierarchy with a type and a size in bytes.
Content itself is not modelled.

Author: YSNRFD
Version: 1.0.0
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

from pyfs.core.config_loader import get_config
from pyfs.exceptions import (
    InvalidArgumentError,
    ItemNotWritableError,
    IllegalItemStateError,
)
from .file_type import FileType
from .item import Item
from .kinds import FILE_KIND

if TYPE_CHECKING:
    from .directory import Directory


class File(Item):
    """
    A file inside a directory.

    Example:
        >>> home = Directory("home")
        >>> notes = File(home, "notes", FileType.TEXT, size=100)
        >>> notes.absolute_path()
        '/home/notes.txt'
    """

    kind = FILE_KIND

    def __init__(
        self,
        parent: Directory,
        name: str,
        file_type: FileType,
        size: int = 0,
        writable: bool = True
    ):
        if not self.is_valid_type(file_type):
            raise InvalidArgumentError(
                f"Invalid file type: {file_type!r}",
                context={'name': name}
            )
        if not self.is_valid_size(size):
            raise InvalidArgumentError(
                f"Invalid file size: {size!r}",
                context={'name': name, 'max_size': self.max_size()}
            )
        self._file_type = file_type
        self._size = size
        super().__init__(name, parent, writable)

    @property
    def file_type(self) -> FileType:
        return self._file_type

    @property
    def size(self) -> int:
        return self._size

    @staticmethod
    def max_size() -> int:
        return get_config().filesystem.max_file_size

    @classmethod
    def is_valid_size(cls, size: Any) -> bool:
        return (
            isinstance(size, int)
            and not isinstance(size, bool)
            and 0 <= size <= cls.max_size()
        )

    @staticmethod
    def is_valid_type(file_type: Any) -> bool:
        return isinstance(file_type, FileType)

    def enlarge(self, delta: int) -> None:
        """
        Increase the size of this file.

        Raises:
            IllegalItemStateError: If the file is terminated
            ItemNotWritableError: If the file is not writable
            InvalidArgumentError: If delta is not positive or the new size
                would exceed the maximum
        """
        self._change_size(delta, 1, "enlarge")

    def shorten(self, delta: int) -> None:
        """
        Decrease the size of this file.

        Raises:
            IllegalItemStateError: If the file is terminated
            ItemNotWritableError: If the file is not writable
            InvalidArgumentError: If delta is not positive or the new size
                would drop below zero
        """
        self._change_size(delta, -1, "shorten")

    def _change_size(self, delta: int, sign: int, operation: str) -> None:
        if self._terminated:
            raise IllegalItemStateError("Item is terminated", path=self._describe())
        if not self.is_writable:
            raise ItemNotWritableError(self.absolute_path(), operation=operation)
        if not isinstance(delta, int) or isinstance(delta, bool) or delta <= 0:
            raise InvalidArgumentError(
                f"Size delta must be a positive integer: {delta!r}",
                path=self.absolute_path()
            )

        new_size = self._size + sign * delta
        if not self.is_valid_size(new_size):
            raise InvalidArgumentError(
                f"Cannot {operation} by {delta}: size would become {new_size}",
                path=self.absolute_path(),
                context={'size': self._size, 'max_size': self.max_size()}
            )

        old_size = self._size
        self._size = new_size
        self._touch()

        self._logger.debug(
            "Resized",
            context={'path': self.absolute_path(), 'from': old_size, 'to': new_size}
        )

    @property
    def display_name(self) -> str:
        return f"{self._name}.{self._file_type.extension}"

    @property
    def disk_usage(self) -> int:
        return self._size

    def to_dict(self) -> dict[str, Any]:
        info = super().to_dict()
        info['type'] = self._file_type.extension
        info['size'] = self._size
        return info
