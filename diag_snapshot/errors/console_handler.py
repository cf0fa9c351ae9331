"""
    ConsoleErrorHandler : affichage des erreurs fatales sur stderr.
"""
import sys
from typing import TextIO

from diag_snapshot.errors.base import ErrorHandler
from diag_snapshot.errors.exceptions import (ApplicationError,
                                             ConfigIOError,
                                             ConfigurationError,
                                             InvalidArgumentError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche un message de solution adapté au type
    d'erreur. Tout est écrit sur le flux d'erreur afin de ne pas
    polluer un journal envoyé sur la sortie standard.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            stream: Flux de sortie (défaut: sys.stderr au moment
                de l'affichage).
            solutions: Dictionnaire {TypeException: "message solution"}
                prioritaire sur les suggestions intégrées.
        """
        self._stream = stream
        self.solutions = solutions or {}

    def _echo(self, message: str) -> None:
        print(message, file=self._stream or sys.stderr)

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console avec des messages utilisateur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, ApplicationError):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _solution_for(self, error: ApplicationError) -> str:
        """Retourne la suggestion de solution adaptée à l'erreur."""
        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                return solution
        if isinstance(error, ConfigIOError):
            return "Vérifiez le chemin et les permissions du fichier."
        if isinstance(error, ConfigurationError):
            return "Vérifiez votre fichier de configuration."
        if isinstance(error, InvalidArgumentError):
            return "Vérifiez les arguments passés à la commande."
        return "Consultez les logs pour plus de détails."

    def _handle_known_error(self, error: ApplicationError) -> None:
        """Gère les erreurs connues du projet.

        Args:
            error: L'exception métier à traiter.
        """
        self._echo(f"fatal: {type(error).__name__}: {error}")
        self._echo(f"Solution : {self._solution_for(error)}")

    def _handle_unknown_error(self, error: Exception) -> None:
        """Gère les erreurs inattendues.

        Args:
            error: L'exception non prévue à afficher.
        """
        self._echo(f"fatal: erreur inattendue: {error}")
        self._echo(f"Type: {type(error).__name__}")
