"""Module de logging."""

from diag_snapshot.logging.base import Logger
from diag_snapshot.logging.console_logger import (
    ConsoleLogger,
    level_for_verbosity,
)

__all__ = [
    "Logger",
    "ConsoleLogger",
    "level_for_verbosity",
]
