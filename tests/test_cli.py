"""Tests pour la CLI diag-snapshot."""

import json
import re

from click.testing import CliRunner

from diag_snapshot.cli import main

RECORD = re.compile(r"^(?P<host>[^:]+):(?P<ts>\d{8}T\d{6}Z):")


class TestCli:
    """Tests de bout en bout via click.testing.CliRunner."""

    def setup_method(self):
        """Initialise le runner click."""
        self.runner = CliRunner()

    def _records(self, output):
        return [line for line in output.splitlines() if RECORD.match(line)]

    def test_help(self):
        """Test que -h affiche l'aide."""
        result = self.runner.invoke(main, ["-h"])
        assert result.exit_code == 0
        assert "--host" in result.output

    def test_config_fichier_vers_stdout(self, tmp_path):
        """Test d'une collecte locale écrite sur stdout."""
        config_file = tmp_path / "commands.conf"
        config_file.write_text("echo hello\n#if false\necho jamais\n")

        result = self.runner.invoke(
            main, ["-c", str(config_file), "-o", "-"]
        )

        assert result.exit_code == 0
        records = self._records(result.output)
        assert [r.split(":", 2)[2] for r in records] == [
            "echo:cmd:echo hello",
            "echo:ret:0",
            "echo:out:hello",
        ]
        assert all(r.startswith("localhost:") for r in records)

    def test_horodatage_commun(self, tmp_path):
        """Test qu'un seul horodatage est utilisé pour toute la collecte."""
        config_file = tmp_path / "commands.conf"
        config_file.write_text("echo a\necho b\n")

        result = self.runner.invoke(
            main, ["-c", str(config_file), "-o", "-"]
        )

        stamps = {
            RECORD.match(r).group("ts")
            for r in self._records(result.output)
        }
        assert len(stamps) == 1

    def test_config_sur_stdin(self):
        """Test que '-c -' lit les commandes sur stdin."""
        result = self.runner.invoke(
            main, ["-c", "-", "-o", "-"], input="echo depuis-stdin\n"
        )

        assert result.exit_code == 0
        assert "echo:out:depuis-stdin" in result.output

    def test_fichier_de_sortie(self, tmp_path):
        """Test de l'écriture dans un fichier désigné."""
        config_file = tmp_path / "commands.conf"
        config_file.write_text("echo fichier\n")
        output = tmp_path / "out" / "snap.log"

        result = self.runner.invoke(
            main, ["-c", str(config_file), "-o", str(output)]
        )

        assert result.exit_code == 0
        assert "echo:out:fichier" in output.read_text()

    def test_chemin_par_defaut_horodate(self, tmp_path):
        """Test du fichier horodaté créé dans --output-dir."""
        config_file = tmp_path / "commands.conf"
        config_file.write_text("true\n")
        out_dir = tmp_path / "snapshots"

        result = self.runner.invoke(
            main,
            ["-c", str(config_file), "--output-dir", str(out_dir)],
        )

        assert result.exit_code == 0
        files = list(out_dir.glob("*.log"))
        assert len(files) == 1
        assert re.fullmatch(r"\d{8}T\d{6}Z\.log", files[0].name)

    def test_verbosite_resume(self, tmp_path):
        """Test que -v affiche le résumé nommant la sortie."""
        config_file = tmp_path / "commands.conf"
        config_file.write_text("true\n")
        output = tmp_path / "snap.log"

        result = self.runner.invoke(
            main, ["-c", str(config_file), "-o", str(output), "-v"]
        )

        assert result.exit_code == 0
        assert f"Journal écrit dans {output}" in result.output

    def test_code_non_nul_pas_une_erreur(self, tmp_path):
        """Test qu'une commande en échec ne change pas le code de sortie."""
        config_file = tmp_path / "commands.conf"
        config_file.write_text("exit 7\n")

        result = self.runner.invoke(
            main, ["-c", str(config_file), "-o", "-"]
        )

        assert result.exit_code == 0
        assert "exit:ret:7" in result.output

    def test_config_introuvable_fatale(self, tmp_path):
        """Test qu'une configuration illisible arrête la collecte."""
        result = self.runner.invoke(
            main, ["-c", str(tmp_path / "absent.conf"), "-o", "-"]
        )

        assert result.exit_code == 1
        assert "ConfigIOError" in result.output

    def test_sortie_impossible_avant_toute_commande(self, tmp_path):
        """Test qu'aucune commande n'est lancée si la sortie échoue."""
        marker = tmp_path / "marker"
        config_file = tmp_path / "commands.conf"
        config_file.write_text(f"touch {marker}\n#if touch {marker}\n")
        blocker = tmp_path / "fichier"
        blocker.write_text("")

        result = self.runner.invoke(
            main,
            ["-c", str(config_file), "-o", str(blocker / "snap.log")],
        )

        assert result.exit_code == 1
        assert not marker.exists()

    def test_reglages_hotes_et_shell_distant(self, tmp_path):
        """Test des hôtes et du préfixe distant issus des réglages."""
        settings_file = tmp_path / "settings.json"
        settings_file.write_text(json.dumps({
            "hosts": ["web01", "web02"],
            "remote_shell": ["sh", "-c", "echo \"$0:$1\""],
        }))
        config_file = tmp_path / "commands.conf"
        config_file.write_text("id\n")

        result = self.runner.invoke(
            main,
            ["-s", str(settings_file), "-c", str(config_file), "-o", "-"],
        )

        assert result.exit_code == 0
        out_lines = [
            r for r in self._records(result.output) if ":out:" in r
        ]
        assert [r.split(":")[0] for r in out_lines] == ["web01", "web02"]
        assert out_lines[0].endswith(":id:out:web01:id")

    def test_option_host_prioritaire(self, tmp_path):
        """Test que -H remplace les hôtes des réglages."""
        settings_file = tmp_path / "settings.json"
        settings_file.write_text(json.dumps({
            "hosts": ["web01"],
            "remote_shell": ["sh", "-c", "echo \"$0\""],
        }))
        config_file = tmp_path / "commands.conf"
        config_file.write_text("id\n")

        result = self.runner.invoke(
            main,
            [
                "-s", str(settings_file), "-c", str(config_file),
                "-o", "-", "-H", "db01",
            ],
        )

        assert "db01:" in result.output
        assert "web01:" not in result.output

    def test_reglages_invalides_fatals(self, tmp_path):
        """Test qu'un fichier de réglages invalide arrête la collecte."""
        settings_file = tmp_path / "settings.json"
        settings_file.write_text('{"verbosity": -1}')

        result = self.runner.invoke(main, ["-s", str(settings_file)])

        assert result.exit_code == 1
        assert "ConfigIOError" in result.output

    def test_fichier_de_log_impossible_fatal(self, tmp_path):
        """Test qu'un log_file inaccessible arrête la collecte proprement."""
        blocker = tmp_path / "fichier"
        blocker.write_text("")
        settings_file = tmp_path / "settings.json"
        settings_file.write_text(json.dumps({
            "log_file": str(blocker / "sub" / "diag.log"),
        }))
        config_file = tmp_path / "commands.conf"
        config_file.write_text("id\n")

        result = self.runner.invoke(
            main,
            ["-s", str(settings_file), "-c", str(config_file), "-o", "-"],
        )

        assert result.exit_code == 1
        assert "ConfigIOError" in result.output
        assert ":cmd:" not in result.output
