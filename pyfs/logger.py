"""
PyFS Logger Module

Structured logging for the file system model:
- Per-component loggers (directory, file, link, bootstrap)
- Contextual key/value data attached to every record
- Optional console and file output
- In-memory event buffer for inspection by tests and tooling

Author: YSNRFD
Version: 1.0.0
"""

import logging
import sys
import threading
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Optional, Any, List


class LogLevel(IntEnum):
    """Log level enumeration with numeric values for comparison."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


class LogFormatter(logging.Formatter):
    """
    Log formatter for PyFS.

    Renders records as:
        [timestamp] LEVEL [component] message {key=value ...}
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and self._supports_color()

    @staticmethod
    def _supports_color() -> bool:
        """Check if the terminal supports ANSI colors."""
        if not hasattr(sys.stdout, 'isatty'):
            return False
        return sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record."""
        timestamp = datetime.fromtimestamp(record.created).strftime(
            '%Y-%m-%d %H:%M:%S.%f'
        )[:-3]

        level = record.levelname
        if self.use_colors and level in self.COLORS:
            level_display = f"{self.COLORS[level]}{level:8s}{self.RESET}"
        else:
            level_display = f"{level:8s}"

        components = [f"[{timestamp}]", level_display]

        if hasattr(record, 'component'):
            components.append(f"[{record.component}]")

        components.append(str(record.getMessage()))

        if hasattr(record, 'context') and record.context:
            context_str = " ".join(f"{k}={v}" for k, v in record.context.items())
            components.append(f"{{{context_str}}}")

        message = " ".join(components)

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


class EventLogHandler(logging.Handler):
    """
    Keeps recent log records in memory.

    Used to inspect what the model did (inserts, renames, moves,
    terminations) without parsing console output.
    """

    def __init__(self, max_entries: int = 10000):
        super().__init__()
        self.max_entries = max_entries
        self._log_buffer: List[dict[str, Any]] = []
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        """Store log record in buffer."""
        log_entry = {
            'timestamp': record.created,
            'level': record.levelname,
            'message': record.getMessage(),
            'component': getattr(record, 'component', None),
            'context': getattr(record, 'context', {}),
        }

        with self._lock:
            self._log_buffer.append(log_entry)
            if len(self._log_buffer) > self.max_entries:
                self._log_buffer = self._log_buffer[-self.max_entries:]

    def get_logs(
        self,
        level: Optional[str] = None,
        component: Optional[str] = None,
        limit: int = 100
    ) -> List[dict[str, Any]]:
        """Retrieve logs with optional filtering."""
        with self._lock:
            logs = self._log_buffer.copy()

        if level:
            logs = [entry for entry in logs if entry['level'] == level]
        if component:
            logs = [entry for entry in logs if entry['component'] == component]

        return logs[-limit:]

    def clear(self) -> None:
        """Clear the log buffer."""
        with self._lock:
            self._log_buffer.clear()


class Logger:
    """
    Component logger for PyFS.

    One instance exists per component name. Every call accepts an
    optional ``context`` dict that is rendered after the message and
    kept with the buffered event.

    Example:
        >>> log = Logger('directory')
        >>> log.debug("Inserted child", context={'path': '/home/docs'})
    """

    _instances: dict[str, 'Logger'] = {}
    _lock = threading.Lock()
    _initialized = False
    _event_handler: Optional[EventLogHandler] = None
    _handlers: List[logging.Handler] = []
    _global_level: int = LogLevel.INFO

    def __new__(cls, component: str = 'pyfs') -> 'Logger':
        """Get or create a logger for a component."""
        with cls._lock:
            if component not in cls._instances:
                instance = super().__new__(cls)
                instance._component = component
                instance._logger = logging.getLogger(f'pyfs.{component}')
                instance._logger.setLevel(cls._global_level)
                cls._instances[component] = instance
            return cls._instances[component]

    @property
    def component(self) -> str:
        return self._component

    @classmethod
    def initialize(
        cls,
        level: int = LogLevel.INFO,
        log_file: Optional[str] = None,
        use_colors: bool = True,
        console_output: bool = True
    ) -> None:
        """
        Initialize the logging system.

        Subsequent calls are ignored until ``reset()`` is called.

        Args:
            level: Minimum log level to capture
            log_file: Optional file path for log output
            use_colors: Whether to use ANSI colors in console output
            console_output: Whether to write records to stdout
        """
        with cls._lock:
            if cls._initialized:
                return

            cls._global_level = level

            cls._event_handler = EventLogHandler()
            cls._event_handler.setLevel(level)

            root_logger = logging.getLogger('pyfs')
            root_logger.setLevel(level)

            handlers: List[logging.Handler] = [cls._event_handler]

            if console_output:
                console_handler = logging.StreamHandler(sys.stdout)
                console_handler.setLevel(level)
                console_handler.setFormatter(LogFormatter(use_colors=use_colors))
                handlers.append(console_handler)

            if log_file:
                file_path = Path(log_file)
                file_path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(log_file)
                file_handler.setLevel(level)
                file_handler.setFormatter(LogFormatter(use_colors=False))
                handlers.append(file_handler)

            for handler in handlers:
                root_logger.addHandler(handler)
            cls._handlers = handlers

            # Component loggers created before initialization keep the old level
            for instance in cls._instances.values():
                instance._logger.setLevel(level)

            cls._initialized = True

    @classmethod
    def reset(cls) -> None:
        """Detach all handlers and return to the uninitialized state."""
        with cls._lock:
            root_logger = logging.getLogger('pyfs')
            for handler in cls._handlers:
                root_logger.removeHandler(handler)
                handler.close()
            cls._handlers = []
            cls._event_handler = None
            cls._global_level = LogLevel.INFO
            for instance in cls._instances.values():
                instance._logger.setLevel(LogLevel.INFO)
            cls._initialized = False

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._initialized

    @classmethod
    def get_event_logs(
        cls,
        level: Optional[str] = None,
        component: Optional[str] = None,
        limit: int = 100
    ) -> List[dict[str, Any]]:
        """Get records from the in-memory event buffer."""
        if cls._event_handler is None:
            return []
        return cls._event_handler.get_logs(level=level, component=component, limit=limit)

    @classmethod
    def clear_event_logs(cls) -> None:
        if cls._event_handler is not None:
            cls._event_handler.clear()

    def _log(
        self,
        level: int,
        message: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        """Internal logging method."""
        extra = {
            'component': self._component,
            'context': context or {},
        }
        self._logger.log(level, message, extra=extra)

    def debug(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, context)

    def info(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, context)

    def warning(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, message, context)

    def critical(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a critical message."""
        self._log(LogLevel.CRITICAL, message, context)


def get_logger(component: str) -> Logger:
    """
    Get a logger for the specified component.

    Args:
        component: Name of the component (e.g., 'directory', 'file', 'link')

    Returns:
        Logger instance for the component
    """
    return Logger(component)
