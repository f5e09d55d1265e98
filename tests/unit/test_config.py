"""
Tests de la configuration (pydantic-settings) et du logging (loguru).
"""

import json
import logging

import pytest
from loguru import logger
from pydantic import ValidationError as SettingsValidationError

from filmorate.config import Settings
from filmorate.logging_config import INTERCEPTED_LOGGERS, configure_logging


class TestSettings:
    def test_valeurs_par_defaut(self, monkeypatch):
        monkeypatch.delenv("FILMORATE_STORAGE_BACKEND", raising=False)
        settings = Settings()

        assert settings.storage_backend == "sql"
        assert settings.uses_database is True
        assert settings.popular_default_count == 10
        assert settings.port == 8080

    def test_surcharge_par_variable_d_environnement(self, monkeypatch):
        monkeypatch.setenv("FILMORATE_STORAGE_BACKEND", "memory")
        monkeypatch.setenv("FILMORATE_POPULAR_DEFAULT_COUNT", "3")

        settings = Settings()

        assert settings.storage_backend == "memory"
        assert settings.uses_database is False
        assert settings.popular_default_count == 3

    def test_backend_inconnu_refuse(self):
        with pytest.raises(SettingsValidationError):
            Settings(storage_backend="redis")

    def test_nombre_par_defaut_non_positif_refuse(self):
        with pytest.raises(SettingsValidationError):
            Settings(popular_default_count=0)

    def test_chemin_de_log_etendu(self):
        settings = Settings(log_file="~/filmorate.log")
        assert "~" not in str(settings.log_file)


class TestLogging:
    @pytest.fixture
    def log_settings(self, test_settings):
        """Settings de logging ; restaure les loggers standard apres le test."""
        saved = {
            name: (logging.getLogger(name).handlers[:], logging.getLogger(name).propagate)
            for name in INTERCEPTED_LOGGERS
        }
        yield test_settings.model_copy(update={"log_level": "WARNING"})
        logger.remove()
        for name, (handlers, propagate) in saved.items():
            std_logger = logging.getLogger(name)
            std_logger.handlers = handlers
            std_logger.propagate = propagate
            std_logger.setLevel(logging.NOTSET)

    @staticmethod
    def _records(settings) -> list[dict]:
        logger.complete()
        logger.remove()
        lines = settings.log_file.read_text().splitlines()
        return [json.loads(line)["record"] for line in lines]

    def test_fichier_json(self, log_settings):
        configure_logging(log_settings)
        logger.info("Film ajoute")

        messages = [record["message"] for record in self._records(log_settings)]
        assert "Film ajoute" in messages

    def test_fichier_cree_depuis_les_settings(self, log_settings):
        configure_logging(log_settings)
        logger.complete()

        assert log_settings.log_file.exists()

    def test_logs_uvicorn_rediriges(self, log_settings):
        """Un LogRecord emis par uvicorn arrive dans le fichier JSON."""
        configure_logging(log_settings)
        logging.getLogger("uvicorn.error").error("Port deja utilise")
        logging.getLogger("uvicorn.access").info("GET /films 200")

        records = {record["message"]: record for record in self._records(log_settings)}
        assert records["Port deja utilise"]["level"]["name"] == "ERROR"
        assert records["GET /films 200"]["level"]["name"] == "INFO"

    def test_requetes_sql_tracees_en_debug_seulement(self, log_settings):
        configure_logging(log_settings)
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

        configure_logging(log_settings.model_copy(update={"log_level": "DEBUG"}))
        assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
