"""Chaîne de traitement des erreurs fatales de mise en place.

Une erreur de mise en place (réglages, liste de commandes, journal de
sortie ou fichier de log inaccessibles, argument invalide) arrête
diag-snapshot avant la première commande. La CLI la fait passer par
une ErrorHandlerChain : la console d'abord, puis le fichier de log
quand les réglages en déclarent un.
"""

import sys
from abc import ABC, abstractmethod
from typing import NoReturn


class ErrorHandler(ABC):
    """Destination d'une erreur fatale (stderr, fichier de log)."""

    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Signale l'erreur à cette destination.

        Args:
            error: L'erreur qui interrompt la collecte.
        """


class ErrorHandlerChain:
    """Handlers consultés dans l'ordre d'ajout.

    Exemple:
        >>> errors = ErrorHandlerChain(ConsoleErrorHandler())
        >>> errors.add_handler(LoggerErrorHandler(logger))
        >>> errors.handle_and_exit(ConfigIOError("journal inaccessible"))
    """

    def __init__(self, *handlers: ErrorHandler) -> None:
        """
        Args:
            *handlers: Handlers initiaux, console en premier.
        """
        self.handlers: list[ErrorHandler] = list(handlers)

    def add_handler(self, handler: ErrorHandler) -> "ErrorHandlerChain":
        """Ajoute une destination en fin de chaîne.

        Returns:
            La chaîne elle-même.
        """
        self.handlers.append(handler)
        return self

    def handle(self, error: Exception) -> None:
        """Signale l'erreur à chaque handler, dans l'ordre."""
        for handler in self.handlers:
            handler.handle(error)

    def handle_and_exit(
        self, error: Exception, exit_code: int = 1
    ) -> NoReturn:
        """Signale l'erreur puis arrête le processus.

        Aucune commande n'a encore été exécutée : le code de sortie
        distingue cet échec d'une collecte menée à son terme.

        Args:
            error: Erreur de mise en place (ConfigIOError,
                InvalidArgumentError...).
            exit_code: Statut de sortie du processus (défaut: 1).
        """
        self.handle(error)
        sys.exit(exit_code)
