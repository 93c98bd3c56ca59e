"""
PyFS Bootstrap

Prepares the runtime environment for the file system model:
- Loading configuration
- Initializing logging

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Optional
import sys
import time

from pyfs.logger import Logger, get_logger, LogLevel
from pyfs.exceptions import ConfigurationError
from pyfs.core.config_loader import ConfigLoader, get_config


class BootstrapStage(Enum):
    """Bootstrap stages."""
    PRE_INIT = auto()
    CONFIG_LOAD = auto()
    LOGGING_INIT = auto()
    COMPLETE = auto()
    FAILED = auto()


@dataclass
class BootstrapResult:
    """Result of the bootstrap process."""
    success: bool
    stage: BootstrapStage
    message: str
    elapsed_time: float
    error: Optional[Exception] = None


class Bootstrap:
    """
    Runs the PyFS start-up sequence.

    Sequence:
        1. Pre-initialization checks
        2. Load configuration (defaults are kept if the file is missing)
        3. Initialize logging from the logging section
        4. Complete

    Example:
        >>> result = Bootstrap('pyfs.json').run()
        >>> result.success
        True
    """

    def __init__(self, config_path: Optional[str] = None):
        self._config_path = config_path
        self._stage = BootstrapStage.PRE_INIT
        self._start_time: float = 0
        self._config_missing = False

    @property
    def stage(self) -> BootstrapStage:
        """Get the current stage."""
        return self._stage

    def run(self) -> BootstrapResult:
        """
        Execute the bootstrap sequence.

        Returns:
            BootstrapResult indicating success or failure
        """
        self._start_time = time.time()

        try:
            self._stage = BootstrapStage.PRE_INIT
            self._pre_init()

            self._stage = BootstrapStage.CONFIG_LOAD
            self._load_config()

            self._stage = BootstrapStage.LOGGING_INIT
            self._init_logging()

            log = get_logger('bootstrap')
            if self._config_missing:
                log.warning(
                    "Configuration file not found, using defaults",
                    context={'path': self._config_path}
                )

            self._stage = BootstrapStage.COMPLETE
            elapsed = time.time() - self._start_time

            log.info(
                "PyFS ready",
                context={'elapsed_ms': f"{elapsed * 1000:.2f}"}
            )

            return BootstrapResult(
                success=True,
                stage=self._stage,
                message="PyFS initialized successfully",
                elapsed_time=elapsed
            )

        except ConfigurationError as e:
            failed_stage = self._stage
            self._stage = BootstrapStage.FAILED
            elapsed = time.time() - self._start_time

            get_logger('bootstrap').critical(
                f"Bootstrap failed at stage {failed_stage.name}: {e}"
            )

            return BootstrapResult(
                success=False,
                stage=failed_stage,
                message=f"Bootstrap failed: {e}",
                elapsed_time=elapsed,
                error=e
            )

    def _pre_init(self) -> None:
        """Pre-initialization checks."""
        if sys.version_info < (3, 10):
            raise ConfigurationError("Python 3.10+ required")

    def _load_config(self) -> None:
        """Load configuration, keeping defaults if no file is present."""
        if self._config_path is None:
            return
        if not Path(self._config_path).exists():
            self._config_missing = True
            return

        ConfigLoader().load(self._config_path)

    def _init_logging(self) -> None:
        """Initialize the logging system."""
        config = get_config().logging

        try:
            level = LogLevel[config.level.upper()]
        except KeyError as e:
            raise ConfigurationError(
                f"Unknown log level: {config.level}",
                key="logging.level"
            ) from e

        Logger.initialize(
            level=level,
            log_file=config.log_file,
            use_colors=config.use_colors,
            console_output=config.console_output
        )


def bootstrap(config_path: Optional[str] = None) -> BootstrapResult:
    """
    Convenience function to run the bootstrap sequence.

    Args:
        config_path: Path to a JSON configuration file, or None for defaults
    """
    return Bootstrap(config_path).run()
