"""Écriture du journal de collecte sur un flux texte."""

from typing import TextIO

from diag_snapshot.commands.base import ExecutionResult
from diag_snapshot.report.formatter import RecordFormatter


class SnapshotWriter:
    """Ajoute les enregistrements de chaque résultat au flux.

    Le flux est vidé après chaque résultat pour qu'une collecte
    interrompue laisse un journal exploitable.
    """

    def __init__(self, stream: TextIO, formatter: RecordFormatter) -> None:
        self._stream = stream
        self._formatter = formatter
        self.records_written = 0

    def write_result(self, result: ExecutionResult) -> None:
        """Écrit tous les enregistrements d'un résultat."""
        records = self._formatter.format(result)
        for record in records:
            self._stream.write(record + "\n")
        self._stream.flush()
        self.records_written += len(records)
