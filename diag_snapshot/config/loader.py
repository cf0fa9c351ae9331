"""Fonctions de chargement de configuration.

Deux sources distinctes :
    - la liste de commandes (texte brut, fichier ou stdin) ;
    - le fichier de réglages optionnel (TOML ou JSON).
"""

import json
import sys
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, TextIO, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from diag_snapshot.config.defaults import DEFAULT_COMMAND_CONFIG
from diag_snapshot.errors.exceptions import ConfigIOError

STDIN_PATH = "-"


def read_command_config(
    config_path: Optional[Union[str, Path]] = None,
    stdin: Optional[TextIO] = None,
) -> str:
    """Lit le texte de la liste de commandes.

    Args:
        config_path: Chemin du fichier, "-" pour l'entrée standard,
            None pour la configuration intégrée.
        stdin: Flux utilisé pour "-" (défaut: sys.stdin).

    Returns:
        Texte brut de la configuration.

    Raises:
        ConfigIOError: Si le fichier ou le flux ne peut pas être lu.
    """
    if config_path is None:
        return DEFAULT_COMMAND_CONFIG
    if str(config_path) == STDIN_PATH:
        stream = stdin or sys.stdin
        try:
            return stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigIOError(
                f"Lecture de la configuration sur stdin impossible: {e}"
            ) from e
    path = Path(config_path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigIOError(
            f"Lecture de la configuration impossible: {path}: {e}"
        ) from e


class ConfigLoader(ABC):
    """
    Interface abstraite pour le chargement de réglages.

    Permet l'injection de dépendance et facilite les tests
    en permettant de substituer l'implémentation réelle par un mock.
    """

    @abstractmethod
    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """
        Charge un fichier de réglages.

        Args:
            config_path: Chemin vers le fichier
            schema: Classe Pydantic BaseModel optionnelle pour
                validation. Si fourni, retourne une instance
                du modèle. Si None, retourne un dict brut.

        Returns:
            Dictionnaire de configuration ou instance du schema

        Raises:
            ConfigIOError: Si le fichier est absent, illisible,
                mal formé ou invalide
            TypeError: Si schema n'est pas un BaseModel
        """
        pass


class FileConfigLoader(ConfigLoader):
    """
    Chargeur de réglages depuis fichiers TOML ou JSON.

    Le format est détecté par l'extension du fichier. Les erreurs de
    lecture, de syntaxe et de validation sont toutes converties en
    ConfigIOError, fatale pour la collecte.
    """

    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """
        Charge un fichier de réglages TOML ou JSON.

        Args:
            config_path: Chemin vers le fichier
            schema: Classe Pydantic BaseModel optionnelle

        Returns:
            Dictionnaire de configuration ou instance du schema

        Raises:
            ConfigIOError: Si le fichier est absent, illisible,
                mal formé, d'extension inconnue ou invalide
            TypeError: Si schema n'est pas un BaseModel
        """
        path = Path(config_path)
        suffix = path.suffix.lower()

        try:
            if suffix == ".toml":
                with open(path, "rb") as f:
                    raw_config = tomllib.load(f)
            elif suffix == ".json":
                with open(path, "r", encoding="utf-8") as f:
                    raw_config = json.load(f)
            else:
                raise ConfigIOError(
                    f"Extension non supportée: {suffix}. "
                    "Utilisez .toml ou .json"
                )
        except OSError as e:
            raise ConfigIOError(
                f"Lecture des réglages impossible: {path}: {e}"
            ) from e
        except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
            raise ConfigIOError(
                f"Réglages mal formés: {path}: {e}"
            ) from e

        if schema is None:
            return raw_config

        return self.validate_with_schema(raw_config, schema, path)

    @staticmethod
    def validate_with_schema(
        data: Dict[str, Any], schema: type, path: Path
    ) -> Any:
        """Valide un dict via un modèle Pydantic.

        Args:
            data: Dictionnaire brut à valider.
            schema: Classe Pydantic BaseModel.
            path: Fichier d'origine, pour le message d'erreur.

        Returns:
            Instance du modèle validé.

        Raises:
            TypeError: Si schema n'est pas un BaseModel.
            ConfigIOError: Si la validation échoue.
        """
        if not (
            isinstance(schema, type)
            and issubclass(schema, BaseModel)
        ):
            raise TypeError(
                f"Le schema doit être une sous-classe de "
                f"pydantic.BaseModel, reçu: {schema}"
            )

        try:
            return schema.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigIOError(
                f"Réglages invalides: {path}: {e}"
            ) from e
