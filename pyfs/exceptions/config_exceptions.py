"""
Configuration Exceptions

Raised while loading or updating the PyFS configuration.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any

from .fs_exceptions import FileSystemException


class ConfigurationError(FileSystemException):
    """
    The configuration could not be loaded or a key is unknown.

    Example:
        >>> raise ConfigurationError("Invalid configuration key: naming.foo")
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        key: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        super().__init__(
            message=message,
            path=source,
            error_code=4900,
            context=ctx
        )
        self.source = source
        self.key = key
