"""
File Types

The type of a file, identified by its extension.

Author: YSNRFD
Version: 1.0.0
"""

from enum import Enum


class FileType(Enum):
    """Types of files."""
    TEXT = "txt"
    PDF = "pdf"
    JAVA = "java"
    HTML = "html"
    PYTHON = "py"
    MARKDOWN = "md"
    BINARY = "bin"

    @property
    def extension(self) -> str:
        return self.value

    @classmethod
    def from_extension(cls, extension: str) -> 'FileType':
        """
        Look up a file type by extension.

        Args:
            extension: Extension with or without the leading dot

        Raises:
            ValueError: If no file type has this extension
        """
        return cls(extension.lstrip('.').lower())
