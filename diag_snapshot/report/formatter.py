"""Formatage des enregistrements du journal de collecte.

Chaque commande exécutée produit, dans cet ordre :

    <hôte>:<horodatage>:<jeton>:cmd:<commande complète>
    <hôte>:<horodatage>:<jeton>:ret:<code retour>
    <hôte>:<horodatage>:<jeton>:out:<ligne de stdout>   (une par ligne)
    <hôte>:<horodatage>:<jeton>:err:<ligne de stderr>   (une par ligne)

L'hôte vaut "localhost" pour une exécution locale ; le jeton est le
premier mot de la commande.
"""

from datetime import datetime, timezone
from typing import List, Optional

from diag_snapshot.commands.base import ExecutionResult
from diag_snapshot.text import split_lines

TIMESTAMP_FORMAT = "%Y%m%dT%H%M%SZ"


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """Horodatage UTC ISO-8601 (forme basique), à la seconde.

    Args:
        moment: Instant à formater (défaut: maintenant). Un datetime
            naïf est considéré comme déjà en UTC.

    Returns:
        Chaîne du type "20261019T125300Z".
    """
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(TIMESTAMP_FORMAT)


def command_token(command: str) -> str:
    """Premier mot d'une commande, chaîne vide si elle est blanche."""
    parts = command.split(None, 1)
    return parts[0] if parts else ""


class RecordFormatter:
    """Produit les lignes de journal d'un résultat d'exécution.

    Attributes:
        timestamp: Horodatage commun à toute la collecte.
    """

    def __init__(self, timestamp: str) -> None:
        self.timestamp = timestamp

    def _record(self, result: ExecutionResult, kind: str, payload) -> str:
        return (
            f"{result.target}:{self.timestamp}:"
            f"{command_token(result.command)}:{kind}:{payload}"
        )

    def format(self, result: ExecutionResult) -> List[str]:
        """Formate un résultat en lignes de journal (sans fin de ligne).

        Args:
            result: Résultat d'exécution.

        Returns:
            Lignes cmd, ret, puis out et err.
        """
        records = [
            self._record(result, "cmd", result.command),
            self._record(result, "ret", result.exit_code),
        ]
        records.extend(
            self._record(result, "out", line)
            for line in split_lines(result.stdout, strip_cr=True)
        )
        records.extend(
            self._record(result, "err", line)
            for line in split_lines(result.stderr, strip_cr=True)
        )
        return records
