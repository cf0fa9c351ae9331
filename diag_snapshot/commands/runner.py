"""Exécuteur de commandes shell locales ou distantes.

Ce module fournit LinuxCommandRunner, une implémentation concrète de
CommandRunner :
    - sans hôte, la commande est passée à ``/bin/sh -c`` ;
    - avec un hôte, elle est confiée au RemoteTransport injecté
      (RemoteShellTransport/ssh par défaut).

Example :
    Exécution locale puis distante :

        from diag_snapshot.commands import LinuxCommandRunner

        runner = LinuxCommandRunner(logger=logger)
        outcome = runner.run("df -h")
        if outcome.ok:
            print(outcome.result.exit_code, outcome.result.stdout)

        outcome = runner.run("uptime", hostname="web01")
"""

from typing import Optional

from diag_snapshot.commands.base import (
    CommandRunner,
    ExecutionOutcome,
    RemoteTransport,
)
from diag_snapshot.commands.process import spawn_process
from diag_snapshot.commands.transport import RemoteShellTransport
from diag_snapshot.errors.exceptions import InvalidArgumentError
from diag_snapshot.logging.base import Logger

DEFAULT_SHELL = "/bin/sh"


class LinuxCommandRunner(CommandRunner):
    """Exécuteur de commandes shell via subprocess.

    Chaque appel lance exactement un processus enfant et ne partage
    aucun état mutable avec les autres appels.

    Attributes:
        _logger: Logger optionnel.
        _transport: Transport utilisé pour les hôtes distants.
        _timeout: Délai maximal par commande locale, None pour aucun.
        _shell: Shell local utilisé pour interpréter la commande.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        transport: Optional[RemoteTransport] = None,
        timeout: Optional[float] = None,
        shell: str = DEFAULT_SHELL,
    ) -> None:
        """Initialise l'exécuteur.

        Args:
            logger: Logger optionnel pour tracer les exécutions.
            transport: Transport distant (défaut: RemoteShellTransport
                avec le même timeout).
            timeout: Délai maximal en secondes ; None attend
                indéfiniment.
            shell: Shell local (défaut: /bin/sh).
        """
        self._logger = logger
        self._timeout = timeout
        self._transport = transport or RemoteShellTransport(
            timeout=timeout
        )
        self._shell = shell

    def _log(self, message: str) -> None:
        """Envoie un message de diagnostic au logger si disponible."""
        if self._logger:
            self._logger.log_debug(message)

    def _log_error(self, message: str) -> None:
        """Envoie un message d'erreur au logger si disponible."""
        if self._logger:
            self._logger.log_error(message)

    def run(
        self,
        command: str,
        hostname: Optional[str] = None,
    ) -> ExecutionOutcome:
        """Exécute une commande et retourne son issue.

        Un nom d'hôte vide est traité comme absent (exécution locale).

        Args:
            command: Ligne de commande shell.
            hostname: Hôte distant ou None.

        Returns:
            ExecutionOutcome ; un code retour non nul reste un succès.

        Raises:
            InvalidArgumentError: Si command est None ou vide.
        """
        if command is None or command == "":
            raise InvalidArgumentError("La commande est requise.")

        target = hostname or "localhost"
        self._log(f"[{target}] Exécution : {command}")

        if hostname:
            outcome = self._transport.execute(command, hostname)
        else:
            outcome = spawn_process(
                [self._shell, "-c", command],
                command,
                timeout=self._timeout,
            )

        if outcome.ok:
            self._log(
                f"[{target}] Code retour {outcome.result.exit_code} : "
                f"{command}"
            )
        else:
            self._log_error(f"[{target}] {command} : {outcome.error}")
        return outcome
