"""Transport distant par préfixe shell (ssh par défaut).

L'authentification est entièrement déléguée au client shell distant
(clés, agent, ~/.ssh/config).
"""

from typing import Optional

from diag_snapshot.commands.base import ExecutionOutcome, RemoteTransport
from diag_snapshot.commands.builder import (
    DEFAULT_REMOTE_SHELL,
    RemoteShellBuilder,
)
from diag_snapshot.commands.process import spawn_process


class RemoteShellTransport(RemoteTransport):
    """Exécute une commande distante via un client shell local.

    Attributes:
        _builder: Constructeur du préfixe (ex: ssh -o BatchMode=yes).
        _timeout: Délai maximal par commande, None pour aucun.
    """

    def __init__(
        self,
        builder: Optional[RemoteShellBuilder] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Initialise le transport.

        Args:
            builder: Préfixe shell distant (défaut: ssh non interactif).
            timeout: Délai maximal par commande en secondes.
        """
        self._builder = builder or RemoteShellBuilder.from_argv(
            DEFAULT_REMOTE_SHELL
        )
        self._timeout = timeout

    def execute(self, command: str, hostname: str) -> ExecutionOutcome:
        """Exécute la commande enveloppée pour l'hôte donné."""
        argv = self._builder.wrap(command, hostname)
        return spawn_process(
            argv, command, hostname=hostname, timeout=self._timeout
        )
