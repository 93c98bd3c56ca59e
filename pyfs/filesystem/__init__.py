"""
PyFS File System Module

In-memory hierarchy model:
- Directories holding children in case-insensitive name order
- Files with a type and a size
- Links referring to files and directories
- Shared rules for naming, moving, rooting and termination
"""

from .kinds import ItemKind, DIRECTORY_KIND, FILE_KIND, LINK_KIND
from .file_type import FileType
from .entity import NamedEntity
from .item import Item
from .iterator import DirectoryIterator
from .directory import Directory
from .file import File
from .link import Link

__all__ = [
    # Kinds
    'ItemKind',
    'DIRECTORY_KIND',
    'FILE_KIND',
    'LINK_KIND',
    'FileType',
    # Items
    'NamedEntity',
    'Item',
    'Directory',
    'DirectoryIterator',
    'File',
    'Link',
]
