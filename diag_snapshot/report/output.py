"""Choix et ouverture du fichier de sortie."""

import sys
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, TextIO, Union

from diag_snapshot.errors.exceptions import ConfigIOError
from diag_snapshot.report.formatter import format_timestamp

STDOUT_PATH = "-"


def default_output_path(
    directory: Union[str, Path],
    started_at: datetime,
) -> Path:
    """Chemin de sortie par défaut : <répertoire>/<horodatage UTC>.log."""
    return Path(directory).expanduser() / f"{format_timestamp(started_at)}.log"


@contextmanager
def open_output(path: Union[str, Path]) -> Iterator[TextIO]:
    """Ouvre la destination du journal en ajout.

    "-" désigne la sortie standard, qui n'est pas fermée en sortie
    de contexte. Sinon les répertoires parents sont créés.

    Args:
        path: Chemin du fichier ou "-".

    Yields:
        Flux texte ouvert.

    Raises:
        ConfigIOError: Si le fichier ne peut pas être ouvert.
    """
    if str(path) == STDOUT_PATH:
        yield sys.stdout
        return

    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        stream = open(target, "a", encoding="utf-8")
    except OSError as e:
        raise ConfigIOError(
            f"Ouverture du fichier de sortie impossible: {target}: {e}"
        ) from e
    with stream:
        yield stream
