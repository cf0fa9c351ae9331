"""Affichage de la progression en console, selon la verbosité.

    - verbosité 0 : rien ;
    - verbosité 1 : un point par commande, puis un résumé ;
    - verbosité 2 et plus : une ligne par commande (code retour et
      commande complète), puis un résumé.

La progression est écrite sur stderr pour ne jamais se mêler à un
journal envoyé sur stdout.
"""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from diag_snapshot.commands.base import ExecutionResult


class ProgressFormatter(ABC):
    """Interface abstraite pour formater les messages de progression."""

    @abstractmethod
    def format_result(self, result: ExecutionResult) -> str:
        """Formate la ligne d'une commande terminée.

        Args:
            result: Résultat de la commande.

        Returns:
            Ligne prête à l'affichage.
        """
        pass

    @abstractmethod
    def format_summary(self, output_path: str) -> str:
        """Formate le résumé final nommant le fichier produit."""
        pass


class PlainProgressFormatter(ProgressFormatter):
    """Formateur texte brut.

    Example :
        [0] web01: df -h
        Journal écrit dans /var/tmp/diag-snapshot/20261019T125300Z.log
    """

    def format_result(self, result: ExecutionResult) -> str:
        """Formate le code retour, l'hôte et la commande."""
        return f"[{result.exit_code}] {result.target}: {result.command}"

    def format_summary(self, output_path: str) -> str:
        """Formate le résumé final."""
        return f"Journal écrit dans {output_path}"


class AnsiProgressFormatter(PlainProgressFormatter):
    """Formateur ANSI coloré pour un terminal.

    Code retour 0 en vert, non nul en jaune-or gras. N'émet aucun
    code ANSI si le flux n'est pas un TTY.

    Styles ANSI :
        ok      → \\033[0;32m (vert normal)
        non nul → \\033[1;33m (jaune-or gras)
        reset   → \\033[0m
    """

    RESET = "\033[0m"
    OK_STYLE = "\033[0;32m"
    NONZERO_STYLE = "\033[1;33m"

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def _is_tty(self) -> bool:
        """Vérifie si le flux cible est un terminal interactif."""
        stream = self._stream or sys.stderr
        return hasattr(stream, "isatty") and stream.isatty()

    def format_result(self, result: ExecutionResult) -> str:
        """Formate la ligne avec style ANSI si TTY."""
        text = super().format_result(result)
        if not self._is_tty():
            return text
        style = self.OK_STYLE if result.exit_code == 0 else self.NONZERO_STYLE
        return f"{style}{text}{self.RESET}"


class ProgressReporter:
    """Affiche la progression de la collecte.

    Attributes:
        verbosity: Niveau de verbosité (nombre de -v).
    """

    def __init__(
        self,
        verbosity: int = 0,
        stream: Optional[TextIO] = None,
        formatter: Optional[ProgressFormatter] = None,
    ) -> None:
        self.verbosity = verbosity
        self._stream = stream
        self._formatter = formatter or AnsiProgressFormatter(stream)

    def _write(self, text: str) -> None:
        stream = self._stream or sys.stderr
        stream.write(text)
        stream.flush()

    def command_done(self, result: ExecutionResult) -> None:
        """Signale une commande terminée."""
        if self.verbosity == 1:
            self._write(".")
        elif self.verbosity >= 2:
            self._write(self._formatter.format_result(result) + "\n")

    def finish(self, output_path: str) -> None:
        """Termine la ligne de points et affiche le résumé."""
        if self.verbosity == 1:
            self._write("\n")
        if self.verbosity >= 1:
            self._write(self._formatter.format_summary(output_path) + "\n")
