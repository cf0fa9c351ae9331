"""Lancement d'un processus enfant avec capture complète des sorties.

stdout et stderr sont vidés simultanément par
``Popen.communicate`` : une commande très bavarde sur les deux flux
ne peut pas bloquer sur un tampon de pipe plein.

Les pipes restent binaires : les sorties sont décodées en UTF-8 sans
traduction des fins de ligne (``\\r`` et ``\\r\\n`` conservés tels quels).
"""

import subprocess  # nosec B404
import time
from typing import Optional, Sequence

from diag_snapshot.commands.base import ExecutionOutcome, ExecutionResult


def normalize_exit_code(returncode: int) -> int:
    """Ramène un code retour Popen dans la convention shell 0-255.

    Un processus tué par le signal N (code -N) donne 128+N.
    """
    if returncode < 0:
        return 128 + (-returncode)
    return returncode & 0xFF


def decode_output(data: Optional[bytes]) -> str:
    """Décode une sortie brute en UTF-8, octets invalides remplacés."""
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def spawn_process(
    argv: Sequence[str],
    command: str,
    hostname: Optional[str] = None,
    timeout: Optional[float] = None,
) -> ExecutionOutcome:
    """Lance un processus et attend sa fin.

    Aucune limite de taille n'est appliquée aux sorties : elles sont
    conservées entièrement en mémoire.

    Args:
        argv: Arguments réellement exécutés (commande enveloppée).
        command: Commande d'origine, reportée dans le résultat.
        hostname: Hôte cible reporté dans le résultat.
        timeout: Délai maximal en secondes, None pour attendre
            indéfiniment.

    Returns:
        Succès avec le résultat, ou échec si le lancement, l'attente
        ou le délai ont échoué.
    """
    start = time.monotonic()
    try:
        proc = subprocess.Popen(  # nosec B603
            list(argv),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except (OSError, ValueError) as e:
        return ExecutionOutcome.failure(f"lancement impossible : {e}")

    with proc:
        try:
            stdout, stderr = proc.communicate(timeout=timeout)
        except subprocess.TimeoutExpired:
            proc.kill()
            proc.communicate()
            return ExecutionOutcome.failure(
                f"délai de {timeout}s dépassé"
            )
        except OSError as e:
            proc.kill()
            return ExecutionOutcome.failure(f"attente impossible : {e}")

    return ExecutionOutcome.success(
        ExecutionResult(
            command=command,
            hostname=hostname,
            exit_code=normalize_exit_code(proc.returncode),
            stdout=decode_output(stdout),
            stderr=decode_output(stderr),
            duration=time.monotonic() - start,
        )
    )
