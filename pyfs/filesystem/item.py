"""
Item Module

Hierarchy node shared by directories, files and links. Keeps the
parent/child relationship consistent across creation, rename, move,
rooting and termination.

Author: YSNRFD
Version: 1.0.0
"""

from __future__ import annotations

import time
from typing import Optional, Any, List, TYPE_CHECKING

from pyfs.exceptions import (
    InvalidArgumentError,
    ItemNotWritableError,
    IllegalItemStateError,
    ItemCannotBeRootError,
)
from .entity import NamedEntity

if TYPE_CHECKING:
    from .directory import Directory


class Item(NamedEntity):
    """
    An item in the directory hierarchy.

    An item is either a root (no parent) or registered in exactly one
    directory, which holds it in name order. The parent reference is
    only ever changed through that directory's insert/remove routines,
    so both sides of the relationship change together.

    Lifecycle:
        1. __init__() - created as a root or inserted into a parent
        2. rename() / move() / make_root() - mutated in place
        3. terminate() - detached and flagged; irreversible
    """

    def __init__(
        self,
        name: str,
        parent: Optional[Directory] = None,
        writable: bool = True
    ):
        super().__init__(name, writable)
        self._parent: Optional[Directory] = None

        if parent is None:
            if not self.kind.can_be_root:
                raise InvalidArgumentError(
                    f"A {self.kind.name} must be created inside a directory",
                    context={'name': self._name}
                )
            self._logger.debug("Created root", context={'path': self.absolute_path()})
            return

        if not _is_directory(parent):
            raise InvalidArgumentError(
                "Parent must be a directory",
                context={'name': self._name}
            )
        if parent.is_terminated:
            raise InvalidArgumentError(
                "Parent directory is terminated",
                path=parent.absolute_path()
            )
        if parent.is_writable and parent.contains_name(self._name):
            raise InvalidArgumentError(
                f"Name already in use: {self._name}",
                path=parent.absolute_path()
            )
        if not parent.is_writable:
            raise ItemNotWritableError(parent.absolute_path(), operation="create")

        parent.insert_child(self)
        self._logger.debug("Created", context={'path': self.absolute_path()})

    # Parent directory

    @property
    def parent(self) -> Optional[Directory]:
        return self._parent

    def _set_parent(self, directory: Optional[Directory]) -> None:
        """Update the back-reference. Only called by Directory."""
        self._parent = directory

    @property
    def is_root(self) -> bool:
        return self._parent is None

    @property
    def root(self) -> Item:
        """The top-most ancestor of this item, or the item itself."""
        item: Item = self
        while item.parent is not None:
            item = item.parent
        return item

    def ancestors(self) -> List[Directory]:
        """Parent, grandparent, ... up to the root."""
        result: List[Directory] = []
        ancestor = self._parent
        while ancestor is not None:
            result.append(ancestor)
            ancestor = ancestor.parent
        return result

    def is_direct_or_indirect_parent_of(self, other: Optional[Item]) -> bool:
        """Check whether this item is an ancestor of the other item."""
        if other is None:
            return False
        return any(ancestor is self for ancestor in other.ancestors())

    def can_have_as_parent_directory(self, directory: Optional[Directory]) -> bool:
        """
        Check whether the given directory would be acceptable as parent.

        A terminated item only accepts no parent. Otherwise, becoming a
        root requires the current parent (if any) to be writable, and a
        new parent must be alive, writable, not a descendant of this
        item and able to accept it.
        """
        if self._terminated:
            return directory is None
        if directory is None:
            return self.is_root or self._parent.is_writable
        if directory.is_terminated:
            return False
        if directory is self or self.is_direct_or_indirect_parent_of(directory):
            return False
        if self._parent is not None and not self._parent.is_writable:
            return False
        return directory.is_writable and directory.can_accept_child(self)

    def has_proper_parent_directory(self) -> bool:
        """Check the consistency of the relationship with the parent."""
        if self._terminated:
            return self._parent is None
        if self._parent is None:
            return self.kind.can_be_root
        return (
            not self._parent.is_terminated
            and self._parent.has_child(self)
            and self._parent.can_accept_child(self)
        )

    # Naming

    def can_accept_new_name(self, name: Any) -> bool:
        """
        Check whether this item can be renamed to the given name.

        The name must be valid for this kind, differ from the current
        name, and not be used (ignoring case) by a sibling.
        """
        if self._terminated or not self.is_writable:
            return False
        if not self.is_valid_name(name) or name == self._name:
            return False
        if self._parent is None:
            return True
        sibling = self._parent.lookup(name)
        return sibling is None or sibling is self

    def rename(self, name: str) -> None:
        """
        Rename this item.

        Raises:
            IllegalItemStateError: If this item is terminated
            ItemNotWritableError: If this item is not writable
            InvalidArgumentError: If the name is not acceptable
        """
        if self._terminated:
            raise IllegalItemStateError("Item is terminated", path=self._describe())
        if not self.is_writable:
            raise ItemNotWritableError(self.absolute_path(), operation="rename")
        if not self.can_accept_new_name(name):
            raise InvalidArgumentError(
                f"Cannot rename to {name!r}",
                path=self.absolute_path()
            )

        old_name = self._name
        self._name = name
        self._touch()
        if self._parent is not None:
            self._parent.restore_order_after_rename(self._parent.index_of(self))

        self._logger.debug(
            "Renamed",
            context={'from': old_name, 'path': self.absolute_path()}
        )

    # Movement

    def move(self, target: Optional[Directory]) -> None:
        """
        Move this item into the target directory.

        All preconditions are checked before anything changes.

        Raises:
            IllegalItemStateError: If this item is terminated
            InvalidArgumentError: If the target is missing, is not a
                directory, is the current parent or cannot accept this item
            ItemNotWritableError: If this item or the target is not writable
        """
        if self._terminated:
            raise IllegalItemStateError("Item is terminated", path=self._describe())
        if target is None or not _is_directory(target):
            raise InvalidArgumentError("Move target must be a directory", path=self.absolute_path())
        if target is self._parent:
            raise InvalidArgumentError("Item is already in the target directory", path=self.absolute_path())
        if not target.can_accept_child(self):
            raise InvalidArgumentError(
                f"Target cannot accept this item: {target.absolute_path()}",
                path=self.absolute_path()
            )
        if not self.is_writable:
            raise ItemNotWritableError(self.absolute_path(), operation="move")
        if not target.is_writable:
            raise ItemNotWritableError(target.absolute_path(), operation="move")

        origin = self.absolute_path()
        if self._parent is not None:
            self._parent.remove_child(self)
        target.insert_child(self)
        self._touch()

        self._logger.debug(
            "Moved",
            context={'from': origin, 'path': self.absolute_path()}
        )

    def make_root(self) -> None:
        """
        Detach this item from its parent so it becomes a root.

        Raises:
            ItemCannotBeRootError: If this kind of item cannot be a root
            IllegalItemStateError: If this item is terminated
            ItemNotWritableError: If this item or its parent is not writable
        """
        if not self.kind.can_be_root:
            raise ItemCannotBeRootError(self._describe(), kind=self.kind.name)
        if self._terminated:
            raise IllegalItemStateError("Item is terminated", path=self._describe())
        if self._parent is None:
            return
        if not self.is_writable:
            raise ItemNotWritableError(self.absolute_path(), operation="make_root")
        if not self._parent.is_writable:
            raise ItemNotWritableError(self._parent.absolute_path(), operation="make_root")

        origin = self.absolute_path()
        self._detach()
        self._logger.debug("Made root", context={'from': origin})

    def _detach(self) -> None:
        self._parent.remove_child(self)
        self._touch()

    # Termination

    def can_be_terminated(self) -> bool:
        """
        Check whether this item can be terminated.

        The item must be alive and writable, and either be a root or
        sit in a writable directory.
        """
        return (
            not self._terminated
            and self.is_writable
            and (self._parent is None or self._parent.is_writable)
        )

    def terminate(self) -> None:
        """
        Terminate this item.

        Does nothing if the item is already terminated. Otherwise the
        item is detached from its parent and flagged as terminated.

        Raises:
            IllegalItemStateError: If the item cannot be terminated
        """
        if self._terminated:
            return
        if not self.can_be_terminated():
            raise IllegalItemStateError(
                "Item cannot be terminated",
                path=self.absolute_path()
            )

        path = self.absolute_path()
        if self._parent is not None:
            if self.kind.can_be_root:
                self.make_root()
            else:
                self._detach()
        self._terminated = True

        self._logger.debug("Terminated", context={'path': path})

    # Presentation

    @property
    def display_name(self) -> str:
        """Name as it appears in a path."""
        return self._name

    @property
    def disk_usage(self) -> int:
        """Bytes owned by this item."""
        return 0

    def absolute_path(self) -> str:
        """Path from the root to this item, e.g. ``/home/docs/notes.txt``."""
        segments = [ancestor.display_name for ancestor in reversed(self.ancestors())]
        segments.append(self.display_name)
        return '/' + '/'.join(segments)

    def _describe(self) -> str:
        return self.absolute_path()

    def to_dict(self) -> dict[str, Any]:
        """Convert item to dictionary for display."""
        modified = self._modification_time
        return {
            'name': self._name,
            'kind': self.kind.name,
            'path': self.absolute_path(),
            'writable': self.is_writable,
            'root': self.is_root,
            'terminated': self._terminated,
            'created': time.strftime('%Y-%m-%d %H:%M', time.localtime(self._creation_time)),
            'modified': (
                time.strftime('%Y-%m-%d %H:%M', time.localtime(modified))
                if modified is not None else None
            ),
        }

    def __str__(self) -> str:
        return self.display_name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self.absolute_path()!r})"


def _is_directory(candidate: Any) -> bool:
    return isinstance(candidate, Item) and candidate.kind.is_container
