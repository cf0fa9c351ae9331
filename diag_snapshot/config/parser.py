"""Interprète de la liste de commandes à collecter.

Format (une entrée par ligne) :
    - ``#if <sonde>`` : exécute la sonde en local ; les lignes
      suivantes ne sont retenues que si elle sort avec le code 0,
      jusqu'à la prochaine directive ``#if``.
    - ``#...`` : commentaire ignoré, sans effet sur la condition.
    - toute autre ligne (lignes vides comprises) : commande retenue
      si la condition courante est ouverte.

Le préfixe de directive est exactement ``"#if "`` : ``#if`` seul ou
suivi d'une tabulation est un simple commentaire.
"""

from typing import List, Optional

from diag_snapshot.commands.base import CommandRunner
from diag_snapshot.commands.runner import LinuxCommandRunner
from diag_snapshot.errors.exceptions import InvalidArgumentError
from diag_snapshot.logging.base import Logger
from diag_snapshot.text import split_lines

DIRECTIVE_IF = "#if "
COMMENT_PREFIX = "#"


class CommandConfigParser:
    """Produit la liste ordonnée des commandes d'une configuration.

    L'état de la condition est local à chaque appel de parse() :
    une instance peut être réutilisée sans effet de bord.

    Attributes:
        _runner: Exécuteur des sondes (toujours en local).
        _logger: Logger optionnel.
    """

    def __init__(
        self,
        runner: CommandRunner,
        logger: Optional[Logger] = None,
    ) -> None:
        """Initialise le parseur.

        Args:
            runner: Exécuteur utilisé pour les sondes ``#if``.
            logger: Logger optionnel.
        """
        self._runner = runner
        self._logger = logger

    def _probe(self, probe: str) -> bool:
        """Exécute une sonde locale et indique si elle a réussi.

        Un échec d'exécution ou un code non nul ferment la condition ;
        une sonde vide (``"#if "`` seul) est invalide et la ferme aussi.
        """
        if not probe:
            self._warn("Directive #if sans sonde : bloc désactivé.")
            return False
        outcome = self._runner.run(probe, None)
        if not outcome.ok:
            self._warn(f"Sonde '{probe}' non exécutée : {outcome.error}")
            return False
        enabled = outcome.result.exit_code == 0
        if self._logger:
            self._logger.log_debug(
                f"Sonde '{probe}' : code {outcome.result.exit_code}, "
                f"bloc {'activé' if enabled else 'désactivé'}"
            )
        return enabled

    def _warn(self, message: str) -> None:
        if self._logger:
            self._logger.log_warning(message)

    def parse(self, text: str) -> List[str]:
        """Interprète un texte de configuration.

        Args:
            text: Contenu de la configuration (peut être vide).

        Returns:
            Commandes retenues, dans l'ordre du texte.

        Raises:
            InvalidArgumentError: Si text est None.
        """
        if text is None:
            raise InvalidArgumentError("Le texte de configuration est requis.")

        commands: List[str] = []
        enabled = True
        for line in split_lines(text):
            if line.startswith(DIRECTIVE_IF):
                enabled = self._probe(line[len(DIRECTIVE_IF):])
            elif line.startswith(COMMENT_PREFIX):
                continue
            elif enabled:
                commands.append(line)
        return commands


def parse_command_list(
    text: str,
    runner: Optional[CommandRunner] = None,
    logger: Optional[Logger] = None,
) -> List[str]:
    """Raccourci : interprète un texte avec un LinuxCommandRunner local.

    Args:
        text: Contenu de la configuration.
        runner: Exécuteur des sondes (défaut: LinuxCommandRunner).
        logger: Logger optionnel.

    Returns:
        Commandes retenues, dans l'ordre du texte.
    """
    if runner is None:
        runner = LinuxCommandRunner(logger=logger)
    return CommandConfigParser(runner, logger).parse(text)
