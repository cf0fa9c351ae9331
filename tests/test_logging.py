"""Tests pour le module logging."""

import io
import logging

import pytest

from diag_snapshot.errors import ConfigIOError
from diag_snapshot.logging import ConsoleLogger, Logger, level_for_verbosity


class TestLevelForVerbosity:
    """Tests de la correspondance verbosité / niveau."""

    @pytest.mark.parametrize(
        "verbosity,expected",
        [
            (0, logging.WARNING),
            (1, logging.WARNING),
            (2, logging.INFO),
            (3, logging.DEBUG),
            (5, logging.DEBUG),
        ],
    )
    def test_niveaux(self, verbosity, expected):
        """Test du niveau console selon le nombre de -v."""
        assert level_for_verbosity(verbosity) == expected


class TestConsoleLogger:
    """Tests pour ConsoleLogger."""

    def test_implements_logger_interface(self):
        """Vérifie que ConsoleLogger implémente l'interface Logger."""
        assert isinstance(ConsoleLogger(stream=io.StringIO()), Logger)

    def test_erreurs_toujours_visibles(self):
        """Test qu'une erreur s'affiche même sans verbosité."""
        stream = io.StringIO()
        logger = ConsoleLogger(0, stream=stream)

        logger.log_error("web01: df -h: connexion refusée")

        assert stream.getvalue() == (
            "ERROR: web01: df -h: connexion refusée\n"
        )

    def test_info_masque_par_defaut(self):
        """Test que les infos sont masquées sans -vv."""
        stream = io.StringIO()
        logger = ConsoleLogger(1, stream=stream)

        logger.log_info("Info message")
        logger.log_debug("Debug message")

        assert stream.getvalue() == ""

    def test_info_visible_en_verbosite_deux(self):
        """Test que les infos apparaissent à partir de -vv."""
        stream = io.StringIO()
        logger = ConsoleLogger(2, stream=stream)

        logger.log_info("Info message")
        logger.log_debug("Debug message")

        assert "INFO: Info message" in stream.getvalue()
        assert "Debug message" not in stream.getvalue()

    def test_debug_visible_en_verbosite_trois(self):
        """Test que le debug apparaît à partir de -vvv."""
        stream = io.StringIO()
        logger = ConsoleLogger(3, stream=stream)

        logger.log_debug("Debug message")

        assert "DEBUG: Debug message" in stream.getvalue()

    def test_warning(self):
        """Test du logging warning."""
        stream = io.StringIO()
        ConsoleLogger(stream=stream).log_warning("Warning message")
        assert "WARNING: Warning message" in stream.getvalue()

    def test_fichier_recoit_tout(self, tmp_path):
        """Test que le fichier de log reçoit aussi le debug."""
        log_file = tmp_path / "sub" / "diag.log"
        logger = ConsoleLogger(0, log_file=str(log_file),
                               stream=io.StringIO())

        logger.log_debug("Debug éàü")
        logger.close()

        content = log_file.read_text(encoding="utf-8")
        assert "DEBUG - Debug éàü" in content

    def test_instances_independantes(self):
        """Test que deux instances n'écrivent pas l'une chez l'autre."""
        first, second = io.StringIO(), io.StringIO()
        ConsoleLogger(stream=first).log_error("un")
        ConsoleLogger(stream=second).log_error("deux")

        assert "deux" not in first.getvalue()
        assert "un" not in second.getvalue()

    def test_close_detache_les_handlers(self):
        """Test que close() retire les handlers."""
        logger = ConsoleLogger(stream=io.StringIO())
        logger.close()
        assert logger.logger.handlers == []

    def test_pas_de_propagation(self):
        """Test que les messages ne remontent pas au logger racine."""
        logger = ConsoleLogger(stream=io.StringIO())
        assert logger.logger.propagate is False

    def test_fichier_inaccessible_leve_config_io_error(self, tmp_path):
        """Test qu'un répertoire de log impossible lève ConfigIOError."""
        blocker = tmp_path / "fichier"
        blocker.write_text("")

        with pytest.raises(ConfigIOError):
            ConsoleLogger(log_file=str(blocker / "sub" / "diag.log"),
                          stream=io.StringIO())
