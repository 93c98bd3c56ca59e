"""
Directory Iterator

Cursor over the children of a directory.

Author: YSNRFD
Version: 1.0.0
"""

from __future__ import annotations

from typing import List, TYPE_CHECKING

from pyfs.exceptions import ItemIndexError

if TYPE_CHECKING:
    from .directory import Directory
    from .item import Item


class DirectoryIterator:
    """
    Iterates over a snapshot of a directory's children.

    The snapshot is taken at creation and on reset(), so children may be
    terminated or moved while the iterator walks them.
    """

    def __init__(self, directory: Directory):
        self._directory = directory
        self._items: List[Item] = []
        self._position = 0
        self.reset()

    @property
    def directory(self) -> Directory:
        return self._directory

    @property
    def remaining(self) -> int:
        """Number of items left, including the current one."""
        return len(self._items) - self._position

    @property
    def current(self) -> Item:
        """
        The item under the cursor.

        Raises:
            ItemIndexError: If the iterator is exhausted
        """
        if self.remaining <= 0:
            raise ItemIndexError(
                self._position + 1,
                count=len(self._items),
                path=self._directory.absolute_path()
            )
        return self._items[self._position]

    def advance(self) -> None:
        """
        Move the cursor to the next item.

        Raises:
            ItemIndexError: If the iterator is exhausted
        """
        if self.remaining <= 0:
            raise ItemIndexError(
                self._position + 1,
                count=len(self._items),
                path=self._directory.absolute_path()
            )
        self._position += 1

    def reset(self) -> None:
        """Take a fresh snapshot and rewind to the first item."""
        self._items = list(self._directory.children)
        self._position = 0

    def __iter__(self) -> DirectoryIterator:
        return self

    def __next__(self) -> Item:
        if self.remaining <= 0:
            raise StopIteration
        item = self._items[self._position]
        self._position += 1
        return item
