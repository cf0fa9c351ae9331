"""Implémentation concrète du logger console (stderr) avec fichier optionnel."""

import logging
import os
import sys
from typing import List, Optional, TextIO

from diag_snapshot.errors.exceptions import ConfigIOError
from diag_snapshot.logging.base import Logger

DEFAULT_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def level_for_verbosity(verbosity: int) -> int:
    """Traduit le niveau de verbosité de la CLI en niveau logging.

    Les erreurs restent toujours visibles, quel que soit le niveau.

    Args:
        verbosity: Nombre d'occurrences de -v.

    Returns:
        WARNING par défaut, INFO à partir de 2, DEBUG à partir de 3.
    """
    if verbosity >= 3:
        return logging.DEBUG
    if verbosity >= 2:
        return logging.INFO
    return logging.WARNING


class ConsoleLogger(Logger):
    """
    Logger qui écrit sur le flux d'erreur avec option fichier.

    Caractéristiques:
    - Logger unique par instance (évite les conflits)
    - Niveau console dérivé de la verbosité
    - Encodage UTF-8 explicite pour le fichier
    - Flush immédiat après chaque log
    - Pas de propagation (évite les logs en double)

    Le journal de collecte (enregistrements host:timestamp:...) n'est
    jamais écrit par ce logger : il ne reçoit que les messages de
    l'outil lui-même.
    """

    _instances = 0

    def __init__(
        self,
        verbosity: int = 0,
        log_file: Optional[str] = None,
        stream: Optional[TextIO] = None,
        name: str = "diag_snapshot",
    ) -> None:
        """
        Initialise le logger.

        Args:
            verbosity: Niveau de verbosité (nombre de -v)
            log_file: Fichier de log optionnel (niveau DEBUG)
            stream: Flux console (défaut: sys.stderr)
            name: Préfixe du nom du logger stdlib

        Raises:
            ConfigIOError: Si le fichier de log ne peut pas être ouvert.
        """
        ConsoleLogger._instances += 1
        self.log_file = log_file
        self.level = level_for_verbosity(verbosity)

        # Créer un logger unique par instance
        self.logger = logging.getLogger(
            f"{name}.{ConsoleLogger._instances}"
        )
        self.logger.setLevel(logging.DEBUG)
        self.handlers: List[logging.Handler] = []

        # Le fichier est ouvert avant d'attacher quoi que ce soit
        file_handler = self._open_file_handler(log_file) if log_file else None

        console_handler = logging.StreamHandler(stream or sys.stderr)
        console_handler.setLevel(self.level)
        console_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        self.logger.addHandler(console_handler)
        self.handlers.append(console_handler)

        if file_handler is not None:
            self.logger.addHandler(file_handler)
            self.handlers.append(file_handler)

        # Ne pas propager pour éviter les logs en double
        self.logger.propagate = False

    @staticmethod
    def _open_file_handler(log_file: str) -> logging.FileHandler:
        """Ouvre le fichier de log en créant son répertoire si besoin.

        Raises:
            ConfigIOError: Si le répertoire ou le fichier est inaccessible.
        """
        try:
            log_dir = os.path.dirname(log_file)
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
        except OSError as e:
            raise ConfigIOError(
                f"Ouverture du fichier de log impossible : {log_file}: {e}"
            ) from e
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        return file_handler

    def _flush(self) -> None:
        """Force l'écriture immédiate de tous les handlers."""
        for handler in self.handlers:
            handler.flush()

    def log_debug(self, message: str) -> None:
        """Log un message de diagnostic détaillé."""
        self.logger.debug(message)
        self._flush()

    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        self.logger.info(message)
        self._flush()

    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        self.logger.warning(message)
        self._flush()

    def log_error(self, message: str) -> None:
        """Log une erreur."""
        self.logger.error(message)
        self._flush()

    def close(self) -> None:
        """Détache et ferme les handlers de l'instance."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()
