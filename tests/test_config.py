"""Tests pour le chargement de configuration et les réglages."""

import io
import json

import pytest
from pydantic import BaseModel

from diag_snapshot.config import (
    DEFAULT_COMMAND_CONFIG,
    DEFAULT_OUTPUT_DIR,
    CollectorSettings,
    FileConfigLoader,
    load_settings,
    read_command_config,
)
from diag_snapshot.errors import ConfigIOError, InvalidArgumentError


class TestReadCommandConfig:
    """Tests pour read_command_config."""

    def test_sans_chemin_configuration_integree(self):
        """Test que None renvoie la configuration intégrée."""
        assert read_command_config(None) == DEFAULT_COMMAND_CONFIG

    def test_fichier(self, tmp_path):
        """Test de la lecture d'un fichier de commandes."""
        config_file = tmp_path / "commands.conf"
        config_file.write_text("uptime\n#if true\nw\n")

        assert read_command_config(config_file) == "uptime\n#if true\nw\n"

    def test_stdin(self):
        """Test que '-' lit l'entrée standard."""
        stdin = io.StringIO("id\ndate\n")
        assert read_command_config("-", stdin=stdin) == "id\ndate\n"

    def test_fichier_introuvable(self):
        """Test avec fichier inexistant."""
        with pytest.raises(ConfigIOError):
            read_command_config("/nonexistent/commands.conf")

    def test_repertoire(self, tmp_path):
        """Test qu'un répertoire n'est pas lisible comme configuration."""
        with pytest.raises(ConfigIOError):
            read_command_config(tmp_path)


class TestFileConfigLoader:
    """Tests pour FileConfigLoader."""

    def setup_method(self):
        """Initialise le loader avant chaque test."""
        self.loader = FileConfigLoader()

    def test_load_json(self, tmp_path):
        """Test du chargement d'un fichier JSON."""
        config_file = tmp_path / "settings.json"
        config_data = {"hosts": ["a", "b"], "verbosity": 2}
        config_file.write_text(json.dumps(config_data))

        assert self.loader.load(config_file) == config_data

    def test_load_toml(self, tmp_path):
        """Test du chargement d'un fichier TOML."""
        config_file = tmp_path / "settings.toml"
        config_file.write_text('[collector]\nhosts = ["web01"]\n')

        result = self.loader.load(config_file)

        assert result["collector"]["hosts"] == ["web01"]

    def test_file_not_found(self):
        """Test avec fichier inexistant."""
        with pytest.raises(ConfigIOError):
            self.loader.load("/nonexistent/settings.toml")

    def test_unsupported_extension(self, tmp_path):
        """Test avec extension non supportée."""
        config_file = tmp_path / "settings.xml"
        config_file.write_text("<config></config>")

        with pytest.raises(ConfigIOError, match="Extension non supportée"):
            self.loader.load(config_file)

    def test_toml_mal_forme(self, tmp_path):
        """Test qu'un TOML invalide lève ConfigIOError."""
        config_file = tmp_path / "settings.toml"
        config_file.write_text("hosts = [\n")

        with pytest.raises(ConfigIOError, match="mal formés"):
            self.loader.load(config_file)

    def test_schema_valide(self, tmp_path):
        """Test de la validation via un modèle Pydantic."""
        class Model(BaseModel):
            name: str

        config_file = tmp_path / "settings.json"
        config_file.write_text('{"name": "x"}')

        assert self.loader.load(config_file, Model).name == "x"

    def test_schema_invalide(self, tmp_path):
        """Test qu'une validation en échec lève ConfigIOError."""
        class Model(BaseModel):
            count: int

        config_file = tmp_path / "settings.json"
        config_file.write_text('{"count": "beaucoup"}')

        with pytest.raises(ConfigIOError, match="invalides"):
            self.loader.load(config_file, Model)

    def test_schema_non_basemodel(self, tmp_path):
        """Test qu'un schema non Pydantic lève TypeError."""
        config_file = tmp_path / "settings.json"
        config_file.write_text("{}")

        with pytest.raises(TypeError):
            self.loader.load(config_file, dict)


class TestCollectorSettings:
    """Tests pour CollectorSettings et load_settings."""

    def test_valeurs_par_defaut(self):
        """Test des réglages par défaut."""
        settings = load_settings(None)

        assert settings.hosts == []
        assert settings.output is None
        assert settings.output_dir == DEFAULT_OUTPUT_DIR
        assert settings.config is None
        assert settings.verbosity == 0
        assert settings.timeout is None
        assert settings.remote_shell == ["ssh", "-o", "BatchMode=yes"]
        assert settings.parallel_hosts is False

    def test_toml_table_collector(self, tmp_path):
        """Test du chargement d'une table [collector]."""
        config_file = tmp_path / "settings.toml"
        config_file.write_text(
            '[collector]\n'
            'hosts = ["web01", "web02"]\n'
            'timeout = 30\n'
            'remote_shell = ["ssh", "-p", "2222"]\n'
        )

        settings = load_settings(config_file)

        assert settings.hosts == ["web01", "web02"]
        assert settings.timeout == 30
        assert settings.remote_shell == ["ssh", "-p", "2222"]

    def test_json_a_la_racine(self, tmp_path):
        """Test du chargement de clés à la racine (JSON)."""
        config_file = tmp_path / "settings.json"
        config_file.write_text('{"output": "-", "verbosity": 1}')

        settings = load_settings(config_file)

        assert settings.output == "-"
        assert settings.verbosity == 1

    def test_cle_inconnue_refusee(self, tmp_path):
        """Test qu'une clé inconnue est refusée."""
        config_file = tmp_path / "settings.json"
        config_file.write_text('{"hots": ["web01"]}')

        with pytest.raises(ConfigIOError):
            load_settings(config_file)

    def test_hote_vide_refuse(self, tmp_path):
        """Test qu'un nom d'hôte vide est refusé."""
        config_file = tmp_path / "settings.json"
        config_file.write_text('{"hosts": [" "]}')

        with pytest.raises(ConfigIOError):
            load_settings(config_file)

    def test_merged_with_options_cli_prioritaires(self):
        """Test que les options fournies remplacent le fichier."""
        base = CollectorSettings(hosts=["a"], verbosity=1)

        merged = base.merged_with(hosts=("b", "c"), verbosity=2)

        assert merged.hosts == ["b", "c"]
        assert merged.verbosity == 2

    def test_merged_with_options_absentes_ignorees(self):
        """Test que les options non fournies ne masquent pas le fichier."""
        base = CollectorSettings(
            hosts=["a"], output="/tmp/x.log", parallel_hosts=True,
            verbosity=2,
        )

        merged = base.merged_with(
            hosts=(), output=None, parallel_hosts=False, verbosity=0,
        )

        assert merged == base

    def test_merged_with_valeur_invalide(self):
        """Test qu'une option invalide lève InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            CollectorSettings().merged_with(hosts=("",))
