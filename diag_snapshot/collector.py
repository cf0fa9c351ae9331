"""Orchestration d'une collecte : commandes × hôtes.

Les commandes sont exécutées dans l'ordre de la configuration ; pour
chacune, les hôtes sont visités dans l'ordre configuré (boucle hôtes
imbriquée dans la boucle commandes) :

    cmd1@hostA, cmd1@hostB, cmd2@hostA, cmd2@hostB, ...

Avec ``parallel_hosts``, une commande est lancée simultanément sur
tous les hôtes, puis les résultats sont écrits dans l'ordre des hôtes.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from diag_snapshot.commands.base import (
    LOCALHOST,
    CommandRunner,
    ExecutionOutcome,
)
from diag_snapshot.logging.base import Logger
from diag_snapshot.report.progress import ProgressReporter
from diag_snapshot.report.writer import SnapshotWriter


@dataclass
class CollectionSummary:
    """Bilan d'une collecte.

    Attributes:
        executed: Exécutions ayant produit un résultat.
        failed: Exécutions en échec (lancement ou attente).
        skipped: Commandes blanches ignorées.
    """

    executed: int = 0
    failed: int = 0
    skipped: int = 0


class SnapshotCollector:
    """Exécute une liste de commandes et journalise les résultats.

    Un échec sur une commande ou un hôte n'interrompt jamais la
    collecte : il est loggé puis la collecte continue.
    """

    def __init__(
        self,
        runner: CommandRunner,
        writer: SnapshotWriter,
        progress: Optional[ProgressReporter] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._runner = runner
        self._writer = writer
        self._progress = progress
        self._logger = logger

    def _handle(
        self,
        outcome: ExecutionOutcome,
        command: str,
        hostname: Optional[str],
        summary: CollectionSummary,
    ) -> None:
        """Callback de résultat : journal, progression, bilan."""
        if not outcome.ok:
            summary.failed += 1
            if self._logger:
                self._logger.log_error(
                    f"{hostname or LOCALHOST}: {command}: {outcome.error}"
                )
            return
        summary.executed += 1
        self._writer.write_result(outcome.result)
        if self._progress:
            self._progress.command_done(outcome.result)

    def _run_parallel(
        self,
        command: str,
        targets: Sequence[Optional[str]],
    ) -> List[ExecutionOutcome]:
        """Lance une commande sur tous les hôtes en parallèle.

        Returns:
            Issues dans l'ordre de targets.
        """
        with ThreadPoolExecutor(max_workers=len(targets)) as pool:
            return list(
                pool.map(lambda host: self._runner.run(command, host), targets)
            )

    def collect(
        self,
        commands: Iterable[str],
        hosts: Sequence[str] = (),
        parallel_hosts: bool = False,
    ) -> CollectionSummary:
        """Exécute toutes les commandes sur tous les hôtes.

        Args:
            commands: Commandes dans l'ordre de la configuration.
            hosts: Hôtes distants ; vide pour une exécution locale.
            parallel_hosts: Exécute chaque commande sur tous les
                hôtes simultanément.

        Returns:
            Bilan de la collecte.
        """
        targets: List[Optional[str]] = list(hosts) or [None]
        summary = CollectionSummary()

        for command in commands:
            if not command.strip():
                summary.skipped += 1
                if self._logger:
                    self._logger.log_debug("Commande vide ignorée.")
                continue

            if parallel_hosts and len(targets) > 1:
                outcomes = self._run_parallel(command, targets)
                for host, outcome in zip(targets, outcomes):
                    self._handle(outcome, command, host, summary)
                continue

            for host in targets:
                self._runner.submit(
                    command,
                    host,
                    lambda outcome, command=command, host=host: (
                        self._handle(outcome, command, host, summary)
                    ),
                )

        if self._logger:
            self._logger.log_info(
                f"Collecte terminée : {summary.executed} exécution(s), "
                f"{summary.failed} échec(s), {summary.skipped} ignorée(s)."
            )
        return summary
