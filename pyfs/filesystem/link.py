"""
Link Module

A link points at a file or directory without owning it. The target
may be terminated or collected independently of the link.

Author: YSNRFD
Version: 1.0.0
"""

from __future__ import annotations

import weakref
from typing import Optional, Any, TYPE_CHECKING

from pyfs.exceptions import InvalidArgumentError, InvalidLinkError
from .item import Item
from .kinds import LINK_KIND

if TYPE_CHECKING:
    from .directory import Directory


class Link(Item):
    """
    A link inside a directory.

    Links are always writable and can never be roots. A link cannot
    point at another link.
    """

    kind = LINK_KIND

    def __init__(self, parent: Directory, name: str, target: Item):
        if not isinstance(target, Item):
            raise InvalidArgumentError(
                f"Link target must be a file or directory: {target!r}",
                context={'name': name}
            )
        if target.kind is LINK_KIND:
            raise InvalidArgumentError(
                "Link target cannot be another link",
                path=target.absolute_path()
            )
        if target.is_terminated:
            raise InvalidArgumentError(
                "Link target is terminated",
                context={'name': name, 'target': target.name}
            )
        self._target = weakref.ref(target)
        super().__init__(name, parent)

    def _live_target(self) -> Optional[Item]:
        target = self._target()
        if target is None or target.is_terminated:
            return None
        return target

    def resolve_target(self) -> Item:
        """
        Get the item this link points at.

        Raises:
            InvalidLinkError: If the target was terminated or no longer exists
        """
        target = self._live_target()
        if target is None:
            raise InvalidLinkError(self.absolute_path())
        return target

    @property
    def is_valid(self) -> bool:
        return self._live_target() is not None

    def to_dict(self) -> dict[str, Any]:
        info = super().to_dict()
        target = self._live_target()
        info['target'] = target.absolute_path() if target is not None else None
        return info
