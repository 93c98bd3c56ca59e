"""
Directory Module

Ordered, name-unique collection of child items.

Children are kept sorted by case-insensitive name so that lookup and
insertion use binary search. The directory owns its children; each
child keeps a back-reference to the directory.

Author: YSNRFD
Version: 1.0.0
"""

from __future__ import annotations

import bisect
from typing import Optional, Any, List, Tuple

from pyfs.exceptions import (
    InvalidArgumentError,
    ItemNotWritableError,
    IllegalItemStateError,
    NotAllWritableError,
    ItemIndexError,
)
from .item import Item
from .iterator import DirectoryIterator
from .kinds import DIRECTORY_KIND, name_key


def _child_key(item: Item) -> str:
    return name_key(item.name)


class Directory(Item):
    """
    A directory in the hierarchy.

    Children are addressed with 1-based indices, matching the way
    positions are reported in errors and listings.

    Example:
        >>> home = Directory("home")
        >>> docs = Directory("docs", home)
        >>> home.lookup("DOCS") is docs
        True
    """

    kind = DIRECTORY_KIND

    def __init__(
        self,
        name: str,
        parent: Optional[Directory] = None,
        writable: bool = True
    ):
        self._children: List[Item] = []
        super().__init__(name, parent, writable)

    # Child access

    @property
    def children(self) -> Tuple[Item, ...]:
        return tuple(self._children)

    def child_count(self) -> int:
        return len(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def child_at(self, index: int) -> Item:
        """
        Get the child at a 1-based index.

        Raises:
            ItemIndexError: If index is outside [1, child_count()]
        """
        if not isinstance(index, int) or not 1 <= index <= len(self._children):
            raise ItemIndexError(index, count=len(self._children), path=self.absolute_path())
        return self._children[index - 1]

    def has_child(self, item: Any) -> bool:
        return any(child is item for child in self._children)

    def index_of(self, item: Item) -> int:
        """
        Get the 1-based index of a child.

        Raises:
            InvalidArgumentError: If the item is not a child of this directory
        """
        for index, child in enumerate(self._children, start=1):
            if child is item:
                return index
        raise InvalidArgumentError(
            f"Item is not in this directory: {item}",
            path=self.absolute_path()
        )

    def lookup(self, name: Any) -> Optional[Item]:
        """
        Find a child by name, ignoring case.

        Returns:
            The child, or None if no child has that name
        """
        if not isinstance(name, str):
            return None
        key = name_key(name)
        position = bisect.bisect_left(self._children, key, key=_child_key)
        if position < len(self._children) and _child_key(self._children[position]) == key:
            return self._children[position]
        return None

    def contains_name(self, name: Any) -> bool:
        return self.lookup(name) is not None

    exists = contains_name

    # Acceptance checks

    def can_accept_child(self, item: Any) -> bool:
        """
        Check whether the item can be a child of this directory.

        An item already in this directory is acceptable when its name
        is unique among the children. A new item is acceptable when
        its name is free and it is a root or its current parent is
        writable. Neither this directory nor the item may be terminated,
        and the item may not be this directory or one of its ancestors.
        """
        if not isinstance(item, Item):
            return False
        if item.is_terminated or self._terminated:
            return False
        if item is self or item.is_direct_or_indirect_parent_of(self):
            return False

        key = _child_key(item)
        if self.has_child(item):
            low = bisect.bisect_left(self._children, key, key=_child_key)
            high = bisect.bisect_right(self._children, key, key=_child_key)
            return high - low == 1
        if self.lookup(item.name) is not None:
            return False
        return item.is_root or item.parent.is_writable

    def can_accept_child_at(self, item: Any, index: int) -> bool:
        """Check whether the item can be a child at the given 1-based index."""
        if not self.can_accept_child(item):
            return False

        present = self.has_child(item)
        count = len(self._children)
        upper = count if present else count + 1
        if not isinstance(index, int) or not 1 <= index <= upper:
            return False

        if index > 1 and not self._children[index - 2].is_ordered_before(item):
            return False
        following = index + 1 if present else index
        if following <= count and not self._children[following - 1].is_ordered_after(item):
            return False
        return True

    def has_proper_children(self) -> bool:
        """
        Check the invariants of the child collection: every child is
        alive and refers back to this directory, and names strictly
        increase.
        """
        previous: Optional[Item] = None
        for child in self._children:
            if child is None or child.is_terminated or child.parent is not self:
                return False
            if previous is not None and not previous.is_ordered_before(child):
                return False
            previous = child
        return True

    # Mutation

    def insert_child(self, item: Item) -> None:
        """
        Insert an item in name order.

        Raises:
            InvalidArgumentError: If the item is already a child, cannot be
                accepted, or still belongs to another directory
        """
        if self.has_child(item):
            raise InvalidArgumentError(
                f"Item is already in this directory: {item}",
                path=self.absolute_path()
            )
        if not self.can_accept_child(item):
            raise InvalidArgumentError(
                f"Directory cannot accept item: {item}",
                path=self.absolute_path()
            )
        if item.parent is not None:
            raise InvalidArgumentError(
                f"Item still belongs to {item.parent.absolute_path()}",
                path=self.absolute_path()
            )

        self._place(item)
        item._set_parent(self)
        self._touch()

        self._logger.debug("Inserted child", context={'path': item.absolute_path()})

    def remove_child(self, item: Item) -> None:
        """
        Remove a child and clear its back-reference.

        Raises:
            InvalidArgumentError: If the item is not a child
        """
        index = self.index_of(item)
        path = item.absolute_path()
        del self._children[index - 1]
        item._set_parent(None)
        self._touch()

        self._logger.debug("Removed child", context={'path': path})

    def restore_order_after_rename(self, index: int) -> None:
        """
        Move the child at the given index to its sorted position.

        Raises:
            ItemIndexError: If index is outside [1, child_count()]
        """
        item = self.child_at(index)
        del self._children[index - 1]
        self._place(item)

    def _place(self, item: Item) -> int:
        position = bisect.bisect_right(self._children, _child_key(item), key=_child_key)
        self._children.insert(position, item)
        if position > 0 and not self._children[position - 1].is_ordered_before(item):
            raise AssertionError(f"Child order broken at {self.absolute_path()}")
        if position + 1 < len(self._children) and not self._children[position + 1].is_ordered_after(item):
            raise AssertionError(f"Child order broken at {self.absolute_path()}")
        return position + 1

    def set_writable(self, writable: bool) -> None:
        """
        Change the writability of this directory.

        A read-only directory stays read-only.

        Raises:
            IllegalItemStateError: If the directory is terminated
            ItemNotWritableError: If a read-only directory is made writable
        """
        if self._terminated:
            raise IllegalItemStateError("Item is terminated", path=self.absolute_path())
        if writable and not self._writable:
            raise ItemNotWritableError(self.absolute_path(), operation="set_writable")
        super().set_writable(writable)

    # Hierarchy

    def is_direct_or_indirect_subdirectory_of(self, directory: Optional[Directory]) -> bool:
        """
        Check whether this directory lies below the given one.

        Raises:
            InvalidArgumentError: If directory is None
        """
        if directory is None:
            raise InvalidArgumentError("Directory must not be None", path=self.absolute_path())
        return directory.is_direct_or_indirect_parent_of(self)

    def iterator(self) -> DirectoryIterator:
        return DirectoryIterator(self)

    def __iter__(self) -> DirectoryIterator:
        return self.iterator()

    # Aggregates

    def total_disk_usage(self) -> int:
        """Sum of the sizes of all files in this subtree."""
        return sum(child.disk_usage for child in self.iterator())

    @property
    def disk_usage(self) -> int:
        return self.total_disk_usage()

    def _find_read_only(self) -> Optional[Item]:
        """First read-only item in this subtree, depth-first."""
        if not self.is_writable:
            return self
        for child in self.iterator():
            if child.kind.is_container:
                blocking = child._find_read_only()
            else:
                blocking = None if child.is_writable else child
            if blocking is not None:
                return blocking
        return None

    def all_writable(self) -> bool:
        """Whether this directory and every item below it is writable."""
        return self._find_read_only() is None

    def delete_recursive(self) -> None:
        """
        Terminate every item below this directory, leaving it empty.

        Raises:
            IllegalItemStateError: If this directory is terminated
            ItemNotWritableError: If the parent directory is not writable
            NotAllWritableError: If any item in the subtree is read-only
        """
        if self._terminated:
            raise IllegalItemStateError("Item is terminated", path=self.absolute_path())
        if self._parent is not None and not self._parent.is_writable:
            raise ItemNotWritableError(self._parent.absolute_path(), operation="delete_recursive")
        blocking = self._find_read_only()
        if blocking is not None:
            raise NotAllWritableError(self.absolute_path(), blocking=blocking.absolute_path())

        count = len(self._children)
        for child in self.iterator():
            if child.kind.is_container:
                child.delete_recursive()
            child.terminate()

        self._logger.debug(
            "Deleted recursively",
            context={'path': self.absolute_path(), 'children': count}
        )

    # Termination

    def can_be_terminated(self) -> bool:
        """A directory can only be terminated once it is empty."""
        return not self._children and super().can_be_terminated()

    def to_dict(self) -> dict[str, Any]:
        info = super().to_dict()
        info['children'] = len(self._children)
        info['disk_usage'] = self.total_disk_usage()
        return info
