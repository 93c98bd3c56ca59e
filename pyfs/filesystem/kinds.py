"""
Item Kinds

Per-kind rules consulted by the shared hierarchy algorithms:
naming pattern, root eligibility, container status and fixed
writability.

Author: YSNRFD
Version: 1.0.0
"""

import re
from dataclasses import dataclass
from typing import Optional, Any

from pyfs.core.config_loader import get_config


@dataclass(frozen=True)
class ItemKind:
    """
    Rule table entry for one kind of item.

    Attributes:
        name: Kind name, also used as the logger component
        pattern_key: Attribute of NamingConfig holding the name pattern
        can_be_root: Whether items of this kind may exist without a parent
        is_container: Whether items of this kind hold children
        fixed_writable: Writability forced on every item of this kind,
            or None when it is chosen per item
    """
    name: str
    pattern_key: str
    can_be_root: bool
    is_container: bool
    fixed_writable: Optional[bool] = None

    @property
    def name_pattern(self) -> str:
        return getattr(get_config().naming, self.pattern_key)

    def is_valid_name(self, name: Any) -> bool:
        """Check a candidate name against this kind's pattern (full match)."""
        return isinstance(name, str) and re.fullmatch(self.name_pattern, name) is not None


DIRECTORY_KIND = ItemKind(
    name='directory',
    pattern_key='directory_pattern',
    can_be_root=True,
    is_container=True,
)

FILE_KIND = ItemKind(
    name='file',
    pattern_key='file_pattern',
    can_be_root=False,
    is_container=False,
)

LINK_KIND = ItemKind(
    name='link',
    pattern_key='link_pattern',
    can_be_root=False,
    is_container=False,
    fixed_writable=True,
)


def name_key(name: str) -> str:
    """Sort and comparison key for names: case-insensitive."""
    return name.lower()
