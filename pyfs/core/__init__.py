"""
PyFS Core Module

Runtime support components:
- Configuration Loader
- Bootstrap
"""

from .config_loader import (
    ConfigLoader,
    Config,
    FilesystemConfig,
    NamingConfig,
    LoggingConfig,
    get_config,
)
from .bootstrap import Bootstrap, BootstrapStage, BootstrapResult, bootstrap

__all__ = [
    # Config
    'ConfigLoader',
    'Config',
    'FilesystemConfig',
    'NamingConfig',
    'LoggingConfig',
    'get_config',
    # Bootstrap
    'Bootstrap',
    'BootstrapStage',
    'BootstrapResult',
    'bootstrap',
]
