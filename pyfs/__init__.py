"""
PyFS - An In-Memory Hierarchical File System

This package models directories, files and links with strict rules for
naming, ordering, writability and lifecycle, implemented in Python 3.10+
using only the standard library.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

# Import main components for convenience
from .filesystem import Directory, File, Link, FileType
from .core.bootstrap import bootstrap

__all__ = [
    'Directory',
    'File',
    'Link',
    'FileType',
    'bootstrap',
]
