"""Module d'exécution de commandes shell.

Classes disponibles :
    ExecutionResult : Résultat immuable d'une exécution.
    ExecutionOutcome : Succès ou échec d'une exécution.
    CommandRunner : Interface abstraite pour les exécuteurs.
    RemoteTransport : Interface abstraite du transport distant.
    RemoteShellBuilder : Constructeur fluent du préfixe distant.
    RemoteShellTransport : Transport distant via ssh.
    LinuxCommandRunner : Exécuteur concret via subprocess.
"""

from diag_snapshot.commands.base import (
    LOCALHOST,
    CommandRunner,
    ExecutionOutcome,
    ExecutionResult,
    RemoteTransport,
    ResultHandler,
)
from diag_snapshot.commands.builder import (
    DEFAULT_REMOTE_SHELL,
    RemoteShellBuilder,
)
from diag_snapshot.commands.process import (
    normalize_exit_code,
    spawn_process,
)
from diag_snapshot.commands.runner import LinuxCommandRunner
from diag_snapshot.commands.transport import RemoteShellTransport

__all__ = [
    # Structures de données
    "LOCALHOST",
    "ExecutionResult",
    "ExecutionOutcome",
    "ResultHandler",
    # Interfaces abstraites
    "CommandRunner",
    "RemoteTransport",
    # Transport distant
    "DEFAULT_REMOTE_SHELL",
    "RemoteShellBuilder",
    "RemoteShellTransport",
    # Processus
    "normalize_exit_code",
    "spawn_process",
    # Implémentation Linux
    "LinuxCommandRunner",
]
