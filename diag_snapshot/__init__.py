"""
Diag Snapshot - Collecte d'instantanés de diagnostic sur hôtes Linux.

Modules disponibles:
- commands: Exécution de commandes shell locales ou distantes
  (LinuxCommandRunner, RemoteShellTransport)
- config: Liste de commandes avec directive #if, réglages TOML/JSON
- report: Journal host:horodatage:jeton:type:contenu et progression
- collector: Orchestration commandes × hôtes (SnapshotCollector)
- logging: Logger console/fichier (Logger, ConsoleLogger)
- errors: Exceptions et handlers d'erreurs
"""

__version__ = "1.0.0"

from diag_snapshot.logging import Logger, ConsoleLogger
from diag_snapshot.errors import (
    ApplicationError,
    ConfigurationError,
    ConfigIOError,
    ValidationError,
    InvalidArgumentError,
)
from diag_snapshot.commands import (
    ExecutionResult,
    ExecutionOutcome,
    CommandRunner,
    RemoteTransport,
    RemoteShellBuilder,
    RemoteShellTransport,
    LinuxCommandRunner,
)
from diag_snapshot.config import (
    DEFAULT_COMMAND_CONFIG,
    CommandConfigParser,
    parse_command_list,
    read_command_config,
    CollectorSettings,
    load_settings,
)
from diag_snapshot.report import (
    RecordFormatter,
    SnapshotWriter,
    ProgressReporter,
)
from diag_snapshot.collector import CollectionSummary, SnapshotCollector

__all__ = [
    # Logging
    "Logger",
    "ConsoleLogger",
    # Erreurs
    "ApplicationError",
    "ConfigurationError",
    "ConfigIOError",
    "ValidationError",
    "InvalidArgumentError",
    # Commands
    "ExecutionResult",
    "ExecutionOutcome",
    "CommandRunner",
    "RemoteTransport",
    "RemoteShellBuilder",
    "RemoteShellTransport",
    "LinuxCommandRunner",
    # Config
    "DEFAULT_COMMAND_CONFIG",
    "CommandConfigParser",
    "parse_command_list",
    "read_command_config",
    "CollectorSettings",
    "load_settings",
    # Report
    "RecordFormatter",
    "SnapshotWriter",
    "ProgressReporter",
    # Orchestration
    "CollectionSummary",
    "SnapshotCollector",
]
