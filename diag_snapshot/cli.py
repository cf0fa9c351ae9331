"""Point d'entrée CLI de diag-snapshot."""

from datetime import datetime, timezone
from typing import Optional, Tuple

import click

from diag_snapshot.collector import SnapshotCollector
from diag_snapshot.commands.builder import RemoteShellBuilder
from diag_snapshot.commands.runner import LinuxCommandRunner
from diag_snapshot.commands.transport import RemoteShellTransport
from diag_snapshot.config.loader import read_command_config
from diag_snapshot.config.parser import CommandConfigParser
from diag_snapshot.config.settings import CollectorSettings, load_settings
from diag_snapshot.errors.base import ErrorHandlerChain
from diag_snapshot.errors.console_handler import ConsoleErrorHandler
from diag_snapshot.errors.exceptions import ApplicationError
from diag_snapshot.errors.logger_handler import LoggerErrorHandler
from diag_snapshot.logging.console_logger import ConsoleLogger
from diag_snapshot.report.formatter import RecordFormatter, format_timestamp
from diag_snapshot.report.output import default_output_path, open_output
from diag_snapshot.report.progress import ProgressReporter
from diag_snapshot.report.writer import SnapshotWriter


def run_collection(
    settings: CollectorSettings,
    logger: ConsoleLogger,
    started_at: datetime,
) -> str:
    """Enchaîne lecture, interprétation, exécution et écriture.

    Toute erreur de mise en place (configuration, sortie) est levée
    avant l'exécution de la première commande.

    Returns:
        Chemin (ou "-") du journal produit.
    """
    transport = RemoteShellTransport(
        RemoteShellBuilder.from_argv(settings.remote_shell),
        timeout=settings.timeout,
    )
    runner = LinuxCommandRunner(
        logger=logger, transport=transport, timeout=settings.timeout
    )

    text = read_command_config(settings.config)
    output = settings.output or str(
        default_output_path(settings.output_dir, started_at)
    )

    with open_output(output) as stream:
        commands = CommandConfigParser(runner, logger).parse(text)
        writer = SnapshotWriter(
            stream, RecordFormatter(format_timestamp(started_at))
        )
        progress = ProgressReporter(settings.verbosity)
        SnapshotCollector(runner, writer, progress, logger).collect(
            commands, settings.hosts, settings.parallel_hosts
        )
        progress.finish(output)
    return output


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-H", "--host", "hosts", multiple=True,
    help="Hôte distant (répétable). Sans -H, collecte locale.",
)
@click.option(
    "-o", "--output",
    help="Fichier journal ('-' pour stdout). "
         "Défaut : <output-dir>/<horodatage UTC>.log",
)
@click.option(
    "--output-dir", type=click.Path(file_okay=False),
    help="Répertoire du journal par défaut.",
)
@click.option(
    "-c", "--config",
    help="Liste de commandes ('-' pour stdin). "
         "Défaut : configuration intégrée.",
)
@click.option(
    "-s", "--settings", "settings_path", type=click.Path(dir_okay=False),
    help="Fichier de réglages TOML ou JSON.",
)
@click.option(
    "-v", "--verbose", "verbosity", count=True,
    help="Verbosité (répétable : -v points, -vv détail, -vvv debug).",
)
@click.option(
    "--timeout", type=click.FloatRange(min=0, min_open=True),
    help="Délai maximal par commande, en secondes (défaut : aucun).",
)
@click.option(
    "--parallel-hosts", is_flag=True,
    help="Exécute chaque commande sur tous les hôtes en parallèle.",
)
def main(
    hosts: Tuple[str, ...],
    output: Optional[str],
    output_dir: Optional[str],
    config: Optional[str],
    settings_path: Optional[str],
    verbosity: int,
    timeout: Optional[float],
    parallel_hosts: bool,
) -> None:
    """Collecte un instantané de diagnostic sur un ou plusieurs hôtes."""
    started_at = datetime.now(timezone.utc)
    errors = ErrorHandlerChain(ConsoleErrorHandler())

    try:
        settings = load_settings(settings_path).merged_with(
            hosts=hosts,
            output=output,
            output_dir=output_dir,
            config=config,
            verbosity=verbosity,
            timeout=timeout,
            parallel_hosts=parallel_hosts,
        )
        logger = ConsoleLogger(settings.verbosity, log_file=settings.log_file)
    except ApplicationError as e:
        errors.handle_and_exit(e)

    if settings.log_file:
        errors.add_handler(LoggerErrorHandler(logger))
    try:
        run_collection(settings, logger, started_at)
    except ApplicationError as e:
        errors.handle_and_exit(e)
    finally:
        logger.close()


if __name__ == "__main__":
    main()
