"""
debug.py - Logging facade for the Connect Four engine

This module wraps the standard logging module behind a small manager with
named debug levels, per-component filtering, optional file output and simple
performance timers. All modules log through the shared ``debug`` instance.
"""

import logging
import os
import sys
import time
from enum import Enum
from typing import Dict, Iterable, Optional, Set


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @classmethod
    def from_string(cls, name: str) -> 'DebugLevel':
        """Look up a level by its case-insensitive name."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown debug level: {name}") from None


# TRACE sits below DEBUG; NONE disables output entirely
TRACE_LOGGING_LEVEL = logging.DEBUG - 5
logging.addLevelName(TRACE_LOGGING_LEVEL, "TRACE")

LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 10,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: TRACE_LOGGING_LEVEL,
}

LOGGER_NAME = "connectfour"
ENV_LEVEL = "CONNECTFOUR_DEBUG_LEVEL"
ENV_LOG_FILE = "CONNECTFOUR_LOG_FILE"

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class DebugManager:
    """Central logging switchboard shared by the engine, env and CLI."""

    def __init__(self, level: DebugLevel = DebugLevel.WARNING):
        self._level = level
        self._enabled = True
        self._log_file: Optional[str] = None
        self._components: Set[str] = set()  # empty means every component
        self._timers: Dict[str, float] = {}
        self._logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(LEVEL_MAP[self._level])
        logger.propagate = False

        # Managers share the named logger; reuse its console handler if one exists
        consoles = [h for h in logger.handlers if type(h) is logging.StreamHandler]
        if consoles:
            self._console_handler = consoles[0]
        else:
            self._console_handler = logging.StreamHandler(sys.stderr)
            self._console_handler.setFormatter(
                logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
            logger.addHandler(self._console_handler)

        return logger

    @property
    def level(self) -> DebugLevel:
        return self._level

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def console_handler(self) -> logging.StreamHandler:
        return self._console_handler

    def configure(self, level: Optional[DebugLevel] = None,
                  enabled: Optional[bool] = None,
                  log_file: Optional[str] = None,
                  components: Optional[Iterable[str]] = None) -> None:
        """
        Change debug settings. Arguments left as None keep their current value.

        Args:
            level: Most verbose level that is still emitted
            enabled: Master switch for all output
            log_file: Path to also write log records to ("" removes the file handler)
            components: Component names to restrict output to (empty for all)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if enabled is not None:
            self._enabled = enabled

        if log_file is not None:
            for handler in self._logger.handlers[:]:
                if isinstance(handler, logging.FileHandler):
                    self._logger.removeHandler(handler)
                    handler.close()

            self._log_file = log_file or None
            if self._log_file:
                file_handler = logging.FileHandler(self._log_file)
                file_handler.setFormatter(
                    logging.Formatter(CONSOLE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
                self._logger.addHandler(file_handler)

        if components is not None:
            self._components = set(components)

    def configure_from_env(self, environ=None) -> None:
        """Apply CONNECTFOUR_DEBUG_LEVEL and CONNECTFOUR_LOG_FILE when set."""
        environ = os.environ if environ is None else environ

        level_name = environ.get(ENV_LEVEL)
        if level_name:
            try:
                self.configure(level=DebugLevel.from_string(level_name))
            except ValueError:
                self.warning(f"Ignoring {ENV_LEVEL}={level_name!r}", "debug")

        log_file = environ.get(ENV_LOG_FILE)
        if log_file:
            self.configure(log_file=log_file)

    def is_enabled_for(self, level: DebugLevel, component: Optional[str] = None) -> bool:
        if not self._enabled or level is DebugLevel.NONE:
            return False
        if level.value > self._level.value:
            return False
        if component and self._components and component not in self._components:
            return False
        return True

    def log(self, level: DebugLevel, message: str, component: Optional[str] = None) -> None:
        """Emit a message at the given level, tagged with its component."""
        if not self.is_enabled_for(level, component):
            return

        if component:
            message = f"[{component}] {message}"
        self._logger.log(LEVEL_MAP[level], message)

    def error(self, message: str, component: Optional[str] = None) -> None:
        """Log an error message."""
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: Optional[str] = None) -> None:
        """Log a warning message."""
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: Optional[str] = None) -> None:
        """Log an info message."""
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: Optional[str] = None) -> None:
        """Log a debug message."""
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: Optional[str] = None) -> None:
        """Log a trace message."""
        self.log(DebugLevel.TRACE, message, component)

    # Performance markers

    def start_timer(self, marker_name: str) -> None:
        """Start a timer for performance tracking."""
        self._timers[marker_name] = time.perf_counter()

    def end_timer(self, marker_name: str, component: Optional[str] = None) -> Optional[float]:
        """
        Stop a timer and log the elapsed time at TRACE level.

        Returns:
            Elapsed seconds, or None if the marker was never started
        """
        started = self._timers.pop(marker_name, None)
        if started is None:
            self.warning(f"Timer '{marker_name}' not started", "debug")
            return None

        elapsed = time.perf_counter() - started
        self.trace(f"Performance [{marker_name}]: {elapsed:.6f} seconds", component)
        return elapsed


debug = DebugManager()
