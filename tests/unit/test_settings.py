"""
Unit tests for environment configuration, logging setup and bootstrap.
"""

import glob
import logging
import os

import pytest

from porterlab.backends import SnowballBackend, StemmerFactory
from porterlab.bootstrap import bootstrap
from porterlab.logging_config import setup_logging
from porterlab.settings import Settings, load_env, load_settings


class TestLoadSettings:
    """Test Settings built from env vars and .env files"""

    def test_defaults(self, tmp_path):
        """Test defaults when nothing is configured"""
        settings = load_settings(root=tmp_path)

        assert settings == Settings()
        assert settings.stemmer_type == "porter"
        assert settings.log_level == "INFO"
        assert settings.log_file == "logs/porter-lab.log"
        assert settings.console_level == logging.INFO

    def test_from_environment(self, tmp_path, monkeypatch):
        """Test values are read and normalized from env vars"""
        monkeypatch.setenv("STEMMER_TYPE", "Snowball")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FILE", "/tmp/custom.log")

        settings = load_settings(root=tmp_path)

        assert settings.stemmer_type == "snowball"
        assert settings.log_level == "DEBUG"
        assert settings.log_file == "/tmp/custom.log"
        assert settings.console_level == logging.DEBUG

    def test_invalid_log_level(self, tmp_path, monkeypatch):
        """Test unknown log level is rejected"""
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValueError, match="Unknown LOG_LEVEL"):
            load_settings(root=tmp_path)

    def test_empty_stemmer_type(self, tmp_path, monkeypatch):
        """Test empty stemmer type is rejected"""
        monkeypatch.setenv("STEMMER_TYPE", "")

        with pytest.raises(ValueError, match="STEMMER_TYPE"):
            load_settings(root=tmp_path)

    def test_settings_are_frozen(self):
        """Test Settings cannot be mutated"""
        settings = Settings()
        with pytest.raises(AttributeError):
            settings.stemmer_type = "snowball"


class TestLoadEnv:
    """Test .env.local / .env loading priority"""

    def test_no_env_files(self, tmp_path):
        """Test nothing loaded without env files"""
        assert load_env(tmp_path) is None

    def test_env_file(self, tmp_path, monkeypatch):
        """Test .env is loaded when present"""
        # setenv first so monkeypatch restores the original afterwards
        monkeypatch.setenv("STEMMER_TYPE", "porter")
        (tmp_path / ".env").write_text("STEMMER_TYPE=snowball\n")

        assert load_env(tmp_path) == tmp_path / ".env"
        assert os.environ["STEMMER_TYPE"] == "snowball"

    def test_env_local_wins(self, tmp_path, monkeypatch):
        """Test .env.local has priority over .env"""
        monkeypatch.setenv("STEMMER_TYPE", "porter")
        (tmp_path / ".env").write_text("STEMMER_TYPE=porter\n")
        (tmp_path / ".env.local").write_text("STEMMER_TYPE=snowball\n")

        assert load_env(tmp_path) == tmp_path / ".env.local"
        assert load_settings(root=tmp_path).stemmer_type == "snowball"


class TestSetupLogging:
    """Test console + rotating file logging"""

    def test_handlers_configured(self, tmp_path, restore_root_logger):
        """Test console and file handlers are installed"""
        session_log = setup_logging(log_file=str(tmp_path / "logs" / "test.log"))

        handlers = restore_root_logger.handlers
        assert len(handlers) == 2
        assert session_log.exists()
        assert session_log.parent == tmp_path / "logs"
        assert session_log.name.startswith("test_")

    def test_file_receives_debug(self, tmp_path, restore_root_logger):
        """Test file handler captures DEBUG records"""
        session_log = setup_logging(
            log_file=str(tmp_path / "test.log"),
            console_level=logging.WARNING,
        )

        logging.getLogger("porterlab.test").debug("stemming details")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert "stemming details" in session_log.read_text(encoding="utf-8")

    def test_old_logs_cleaned_up(self, tmp_path, restore_root_logger):
        """Test only the newest session logs are kept"""
        for i in range(7):
            (tmp_path / f"test_2000010{i}_000000.log").write_text("old")

        setup_logging(log_file=str(tmp_path / "test.log"))

        remaining = glob.glob(str(tmp_path / "test_*.log"))
        assert len(remaining) == 5
        assert not (tmp_path / "test_20000100_000000.log").exists()


class TestBootstrap:
    """Test one-call startup"""

    def test_bootstrap(self, tmp_path, monkeypatch, restore_root_logger):
        """Test settings loaded, logging configured, stemmer created"""
        monkeypatch.setenv("STEMMER_TYPE", "snowball")
        monkeypatch.setenv("LOG_FILE", str(tmp_path / "logs" / "porter-lab.log"))

        settings = bootstrap(root=tmp_path)

        assert settings.stemmer_type == "snowball"
        assert isinstance(StemmerFactory._instance, SnowballBackend)
        assert glob.glob(str(tmp_path / "logs" / "porter-lab_*.log"))

    def test_bootstrap_invalid_config(self, tmp_path, monkeypatch, restore_root_logger):
        """Test bad configuration fails fast"""
        monkeypatch.setenv("STEMMER_TYPE", "invalid")
        monkeypatch.setenv("LOG_FILE", str(tmp_path / "porter-lab.log"))

        with pytest.raises(ValueError, match="Unknown stemmer type"):
            bootstrap(root=tmp_path)
