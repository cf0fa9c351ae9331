"""Module de gestion des erreurs."""

from diag_snapshot.errors.base import ErrorHandler, ErrorHandlerChain
from diag_snapshot.errors.exceptions import (ApplicationError,
                                             ConfigurationError,
                                             ConfigIOError,
                                             ValidationError,
                                             InvalidArgumentError)
from diag_snapshot.errors.console_handler import ConsoleErrorHandler
from diag_snapshot.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "ConfigIOError",
    "ValidationError",
    "InvalidArgumentError",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
