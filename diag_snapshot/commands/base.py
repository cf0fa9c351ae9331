"""Interfaces abstraites et structures de données pour l'exécution
de commandes shell, locales ou distantes.

Ce module définit :
    - ExecutionResult : Résultat immuable d'une exécution.
    - ExecutionOutcome : Succès (avec résultat) ou échec (avec erreur).
    - CommandRunner : Interface abstraite pour les exécuteurs.
    - RemoteTransport : Stratégie injectable d'exécution distante.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

LOCALHOST = "localhost"


@dataclass(frozen=True)
class ExecutionResult:
    """Résultat de l'exécution d'une commande shell.

    Un code retour non nul est une donnée, pas une erreur.

    Attributes:
        command: Ligne de commande telle que demandée (non enveloppée).
        hostname: Hôte cible, None pour une exécution locale.
        exit_code: Code de sortie du processus (0-255).
        stdout: Sortie standard capturée, fins de ligne incluses.
        stderr: Sortie d'erreur capturée, fins de ligne incluses.
        duration: Durée d'exécution en secondes.
    """

    command: str
    hostname: Optional[str]
    exit_code: int
    stdout: str
    stderr: str
    duration: float = 0.0

    @property
    def target(self) -> str:
        """Nom d'hôte à afficher ("localhost" pour le local)."""
        return self.hostname or LOCALHOST


@dataclass(frozen=True)
class ExecutionOutcome:
    """Issue d'une exécution : soit un résultat, soit une erreur.

    Un échec signifie que le processus n'a pas pu être lancé ou que
    son statut de terminaison n'a pas pu être collecté ; aucun
    ExecutionResult n'est alors produit.

    Attributes:
        result: Résultat en cas de succès, None sinon.
        error: Description de l'erreur en cas d'échec, None sinon.
    """

    result: Optional[ExecutionResult] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        """Vérifie qu'exactement un des deux champs est renseigné."""
        if (self.result is None) == (self.error is None):
            raise ValueError(
                "ExecutionOutcome exige soit un résultat, soit une erreur."
            )

    @classmethod
    def success(cls, result: ExecutionResult) -> "ExecutionOutcome":
        """Construit une issue réussie."""
        return cls(result=result)

    @classmethod
    def failure(cls, error: str) -> "ExecutionOutcome":
        """Construit une issue en échec."""
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """True si un résultat a été produit."""
        return self.result is not None


ResultHandler = Callable[[ExecutionOutcome], None]


class CommandRunner(ABC):
    """Interface abstraite pour l'exécution de commandes shell."""

    @abstractmethod
    def run(
        self,
        command: str,
        hostname: Optional[str] = None,
    ) -> ExecutionOutcome:
        """Exécute une commande et retourne son issue.

        Bloque jusqu'à la fin du processus et la lecture complète
        de stdout et stderr.

        Args:
            command: Ligne de commande shell (non vide).
            hostname: Hôte distant, None pour une exécution locale.

        Returns:
            Issue de l'exécution.

        Raises:
            InvalidArgumentError: Si la commande est absente ou vide.
        """
        pass

    def submit(
        self,
        command: str,
        hostname: Optional[str],
        on_result: ResultHandler,
    ) -> None:
        """Exécute une commande et transmet l'issue au callback.

        Le callback est appelé exactement une fois par invocation.
        Une InvalidArgumentError est levée avant tout appel.

        Args:
            command: Ligne de commande shell.
            hostname: Hôte distant ou None.
            on_result: Callback recevant l'issue.
        """
        outcome = self.run(command, hostname)
        on_result(outcome)


class RemoteTransport(ABC):
    """Stratégie d'exécution d'une commande sur un hôte distant.

    Permet de substituer le mécanisme réel (ssh) par un faux
    transport dans les tests.
    """

    @abstractmethod
    def execute(self, command: str, hostname: str) -> ExecutionOutcome:
        """Exécute la commande sur l'hôte et retourne son issue.

        Args:
            command: Ligne de commande shell à exécuter à distance.
            hostname: Hôte cible.

        Returns:
            Issue dont le résultat porte command et hostname d'origine.
        """
        pass
