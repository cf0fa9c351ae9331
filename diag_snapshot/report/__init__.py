"""Module de restitution : journal de collecte et progression.

Classes disponibles :
    RecordFormatter : Lignes host:horodatage:jeton:type:contenu.
    SnapshotWriter : Écriture des enregistrements sur un flux.
    ProgressFormatter : Interface abstraite de formatage console.
    PlainProgressFormatter : Formatage texte brut.
    AnsiProgressFormatter : Formatage ANSI coloré (TTY).
    ProgressReporter : Progression selon la verbosité.
"""

from diag_snapshot.report.formatter import (
    TIMESTAMP_FORMAT,
    RecordFormatter,
    command_token,
    format_timestamp,
)
from diag_snapshot.report.output import (
    STDOUT_PATH,
    default_output_path,
    open_output,
)
from diag_snapshot.report.progress import (
    AnsiProgressFormatter,
    PlainProgressFormatter,
    ProgressFormatter,
    ProgressReporter,
)
from diag_snapshot.report.writer import SnapshotWriter

__all__ = [
    "TIMESTAMP_FORMAT",
    "RecordFormatter",
    "command_token",
    "format_timestamp",
    "STDOUT_PATH",
    "default_output_path",
    "open_output",
    "SnapshotWriter",
    "ProgressFormatter",
    "PlainProgressFormatter",
    "AnsiProgressFormatter",
    "ProgressReporter",
]
