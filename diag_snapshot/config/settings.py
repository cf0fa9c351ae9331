"""Réglages de la collecte, fusion fichier + ligne de commande."""

from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from diag_snapshot.commands.builder import DEFAULT_REMOTE_SHELL
from diag_snapshot.config.loader import ConfigLoader, FileConfigLoader
from diag_snapshot.errors.exceptions import InvalidArgumentError

DEFAULT_OUTPUT_DIR = "/var/tmp/diag-snapshot"


class CollectorSettings(BaseModel):
    """Réglages validés d'une collecte.

    Attributes:
        hosts: Hôtes distants visités dans l'ordre ; vide = local.
        output: Fichier de sortie, "-" pour stdout, None pour le
            chemin horodaté par défaut.
        output_dir: Répertoire du chemin de sortie par défaut.
        config: Fichier de commandes, "-" pour stdin, None pour la
            configuration intégrée.
        verbosity: Niveau de verbosité console.
        timeout: Délai maximal par commande (secondes), None = aucun.
        remote_shell: Préfixe de la commande distante.
        parallel_hosts: Exécute une commande sur tous les hôtes en
            parallèle.
        log_file: Fichier de log de l'outil lui-même.
    """

    model_config = ConfigDict(extra="forbid")

    hosts: List[str] = Field(default_factory=list)
    output: Optional[str] = None
    output_dir: str = DEFAULT_OUTPUT_DIR
    config: Optional[str] = None
    verbosity: int = Field(default=0, ge=0)
    timeout: Optional[float] = Field(default=None, gt=0)
    remote_shell: List[str] = Field(
        default_factory=lambda: list(DEFAULT_REMOTE_SHELL),
        min_length=1,
    )
    parallel_hosts: bool = False
    log_file: Optional[str] = None

    @field_validator("hosts")
    @classmethod
    def _hosts_non_vides(cls, hosts: List[str]) -> List[str]:
        """Refuse les noms d'hôte vides."""
        for host in hosts:
            if not host.strip():
                raise ValueError("nom d'hôte vide")
        return hosts

    def merged_with(self, **overrides: Any) -> "CollectorSettings":
        """Retourne une copie où les valeurs fournies remplacent.

        Les valeurs None, les séquences vides et False sont ignorés :
        une option CLI non fournie ne masque pas le fichier.

        Returns:
            Nouveaux réglages validés.

        Raises:
            InvalidArgumentError: Si une valeur fournie est invalide.
        """
        data = self.model_dump()
        for key, value in overrides.items():
            if value is None or value == () or value == [] or value is False:
                continue
            if key == "verbosity" and value == 0:
                continue
            data[key] = list(value) if isinstance(value, tuple) else value
        try:
            return CollectorSettings.model_validate(data)
        except PydanticValidationError as e:
            raise InvalidArgumentError(f"Option invalide: {e}") from e


def load_settings(
    settings_path: Optional[Union[str, Path]] = None,
    loader: Optional[ConfigLoader] = None,
) -> CollectorSettings:
    """Charge les réglages depuis un fichier TOML/JSON optionnel.

    Un fichier TOML peut placer les clés à la racine ou dans une
    table ``[collector]``.

    Args:
        settings_path: Chemin du fichier, None pour les défauts.
        loader: Chargeur injectable (défaut: FileConfigLoader).

    Returns:
        Réglages validés.

    Raises:
        ConfigIOError: Si le fichier est illisible ou invalide.
    """
    if settings_path is None:
        return CollectorSettings()
    loader = loader or FileConfigLoader()
    raw = loader.load(settings_path)
    if isinstance(raw, dict) and isinstance(raw.get("collector"), dict):
        raw = raw["collector"]
    return FileConfigLoader.validate_with_schema(
        raw, CollectorSettings, Path(settings_path)
    )
