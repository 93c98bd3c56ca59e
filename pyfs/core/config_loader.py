"""
PyFS Configuration Loader

Configuration management for the file system model:
- JSON configuration file loading
- Default value handling
- Runtime configuration updates with dot-notation keys
- Section parsing with value type checks

Author: YSNRFD
Version: 1.0.0
"""

import json
import threading
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Optional, Union, get_args, get_origin

from pyfs.exceptions import ConfigurationError


@dataclass
class FilesystemConfig:
    """Model-wide limits and defaults."""
    max_file_size: int = 2**31 - 1  # largest 32-bit signed integer
    default_item_name: str = "new_item"


@dataclass
class NamingConfig:
    """Name validity patterns per item kind (full-match regular expressions)."""
    directory_pattern: str = r"[A-Za-z0-9_-]+"
    file_pattern: str = r"[A-Za-z0-9_.-]+"
    link_pattern: str = r"[A-Za-z0-9_.-]+"


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"
    log_file: Optional[str] = None
    console_output: bool = True
    use_colors: bool = True


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration sections for PyFS.
    """
    filesystem: FilesystemConfig = field(default_factory=FilesystemConfig)
    naming: NamingConfig = field(default_factory=NamingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _matches_type(value: Any, expected: Any) -> bool:
    """Check a configuration value against a dataclass field annotation."""
    if get_origin(expected) is Union:
        return any(_matches_type(value, arg) for arg in get_args(expected))
    if expected is type(None):
        return value is None
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, expected)


class ConfigLoader:
    """
    Configuration loader and manager.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('pyfs.json')
        >>> config.filesystem.default_item_name
        'new_item'
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                source=config_path
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file: {e}",
                source=config_path
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file: {e}",
                source=config_path
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration root must be a JSON object",
                source=config_path
            )

        self._config = self._parse_config(data, config_path)
        self._loaded = True
        return self._config

    def _parse_config(self, data: dict[str, Any], source: str) -> Config:
        """Parse configuration data into a Config object."""
        config = Config()

        for section_field in fields(Config):
            if section_field.name not in data:
                continue
            section_data = data[section_field.name]
            if not isinstance(section_data, dict):
                raise ConfigurationError(
                    f"Section '{section_field.name}' must be an object",
                    source=source,
                    key=section_field.name
                )
            defaults = getattr(config, section_field.name)
            values = {
                f.name: section_data.get(f.name, getattr(defaults, f.name))
                for f in fields(defaults)
            }
            for f in fields(defaults):
                if not _matches_type(values[f.name], f.type):
                    raise ConfigurationError(
                        f"Invalid value for '{section_field.name}.{f.name}': {values[f.name]!r}",
                        source=source,
                        key=f"{section_field.name}.{f.name}"
                    )
            setattr(config, section_field.name, type(defaults)(**values))

        return config

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'filesystem.max_file_size')
            default: Default value if key not found
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Args:
            key: Dot-notation key (e.g., 'filesystem.default_item_name')
            value: Value to set

        Raises:
            ConfigurationError: If the key does not name an existing setting
                or the value has the wrong type
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigurationError(f"Invalid configuration key: {key}", key=key)

        final_key = parts[-1]
        if not is_dataclass(obj) or not hasattr(obj, final_key) or is_dataclass(getattr(obj, final_key)):
            raise ConfigurationError(f"Invalid configuration key: {key}", key=key)
        expected = {f.name: f.type for f in fields(obj)}[final_key]
        if not _matches_type(value, expected):
            raise ConfigurationError(f"Invalid value for '{key}': {value!r}", key=key)
        setattr(obj, final_key, value)

    def reset(self) -> None:
        """Drop any loaded or runtime settings and return to defaults."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if is_dataclass(obj):
                return {k: dataclass_to_dict(v) for k, v in obj.__dict__.items()}
            if isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            if isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            return obj

        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    return ConfigLoader().config
