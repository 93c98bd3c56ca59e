"""
Named Entity Module

Identity shared by every item in the hierarchy: a validated name,
creation and modification timestamps, writability and the
terminated flag.

Author: YSNRFD
Version: 1.0.0
"""

import time
from typing import Optional, Any, Union

from pyfs.core.config_loader import get_config
from pyfs.exceptions import IllegalItemStateError, InvalidArgumentError
from pyfs.logger import Logger, get_logger
from .kinds import ItemKind, name_key


class NamedEntity:
    """
    Base identity for items.

    The name always satisfies the kind's validity predicate: an
    invalid name given at construction is replaced by the configured
    default name. Timestamps are ``time.time()`` floats; the
    modification time stays None until the first mutation.
    """

    kind: ItemKind

    def __init__(self, name: str, writable: bool = True):
        self._logger: Logger = get_logger(self.kind.name)
        self._name = name if self.is_valid_name(name) else self.default_name()
        self._creation_time = time.time()
        self._modification_time: Optional[float] = None
        if self.kind.fixed_writable is not None:
            self._writable = self.kind.fixed_writable
        else:
            self._writable = bool(writable)
        self._terminated = False

    # Name

    @property
    def name(self) -> str:
        return self._name

    @classmethod
    def is_valid_name(cls, name: Any) -> bool:
        """Check whether the given name is legal for this kind of item."""
        return cls.kind.is_valid_name(name)

    @staticmethod
    def default_name() -> str:
        """Name used when the name given at construction is not valid."""
        return get_config().filesystem.default_item_name

    def is_ordered_before(self, other: Union['NamedEntity', str, None]) -> bool:
        """Whether this name comes strictly before the other (ignoring case)."""
        other_name = self._other_name(other)
        return other_name is not None and name_key(self._name) < name_key(other_name)

    def is_ordered_after(self, other: Union['NamedEntity', str, None]) -> bool:
        """Whether this name comes strictly after the other (ignoring case)."""
        other_name = self._other_name(other)
        return other_name is not None and name_key(self._name) > name_key(other_name)

    @staticmethod
    def _other_name(other: Union['NamedEntity', str, None]) -> Optional[str]:
        if other is None:
            return None
        if isinstance(other, NamedEntity):
            return other.name
        return other

    # Timestamps

    @property
    def creation_time(self) -> float:
        return self._creation_time

    @property
    def modification_time(self) -> Optional[float]:
        return self._modification_time

    @staticmethod
    def is_valid_creation_time(timestamp: Optional[float]) -> bool:
        """A creation time is valid when it is given and not in the future."""
        return timestamp is not None and timestamp <= time.time()

    def can_have_as_modification_time(self, timestamp: Optional[float]) -> bool:
        """
        Check whether the given timestamp is acceptable as modification time.

        None is acceptable (never modified); otherwise the timestamp must
        lie between the creation time and now.
        """
        return timestamp is None or (
            self._creation_time <= timestamp <= time.time()
        )

    def _touch(self) -> None:
        """Record a modification at the current time."""
        self._modification_time = max(time.time(), self._creation_time)

    def has_overlapping_use_period(self, other: Optional['NamedEntity']) -> bool:
        """
        Check whether the use periods of this entity and the other overlap.

        The use period is the half-open interval from creation to last
        modification, so periods that only touch do not overlap.
        Entities that were never modified have no use period.
        """
        if other is None:
            return False
        if self._modification_time is None or other.modification_time is None:
            return False
        return (self._creation_time < other.modification_time
                and other.creation_time < self._modification_time)

    # Writability

    @property
    def is_writable(self) -> bool:
        return self._writable

    def set_writable(self, writable: bool) -> None:
        """
        Change the writability of this entity.

        Raises:
            IllegalItemStateError: If the entity is terminated
            InvalidArgumentError: If the kind has a fixed writability
                that differs from the requested one
        """
        if self._terminated:
            raise IllegalItemStateError("Item is terminated", path=self._describe())
        if self.kind.fixed_writable is not None:
            if bool(writable) != self.kind.fixed_writable:
                raise InvalidArgumentError(
                    f"Writability of a {self.kind.name} cannot be changed",
                    path=self._describe()
                )
            return
        self._writable = bool(writable)

    # Termination

    @property
    def is_terminated(self) -> bool:
        return self._terminated

    def _describe(self) -> str:
        """Identifier used in error messages and log context."""
        return self._name
