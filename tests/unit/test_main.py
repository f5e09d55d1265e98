"""Tests des commandes CLI (typer)."""

from unittest.mock import MagicMock, patch

from dependency_injector import providers
from sqlmodel import Session, select
from typer.testing import CliRunner

from filmorate.config import Settings
from filmorate.container import Container
from filmorate.core.entities import Genre, Mpa
from filmorate.infrastructure.persistence.database import create_engine_for_url
from filmorate.infrastructure.persistence.models import GenreModel, MpaModel
from filmorate.main import app

runner = CliRunner()


def _mock_container(settings: Settings) -> MagicMock:
    container = MagicMock()
    container.config.return_value = settings
    container.mpa_service.return_value.get_all_mpa.return_value = [Mpa(id=1, name="G")]
    container.genre_service.return_value.get_all_genres.return_value = [
        Genre(id=1, name="Comedy")
    ]
    return container


class TestInitDb:
    def test_initialise_la_base_et_affiche_les_referentiels(self, tmp_path):
        db_url = f"sqlite:///{tmp_path}/cli.db"
        container = Container()
        container.config.override(
            providers.Object(Settings(storage_backend="sql", database_url=db_url))
        )

        with patch("filmorate.main.container", container):
            result = runner.invoke(app, ["init-db"])
        container.engine().dispose()

        assert result.exit_code == 0
        assert "NC-17" in result.output
        assert "Documentary" in result.output
        assert "Base initialisee" in result.output

        engine = create_engine_for_url(db_url)
        with Session(engine) as session:
            ratings = session.exec(select(MpaModel).order_by(MpaModel.id)).all()
            genres = session.exec(select(GenreModel).order_by(GenreModel.id)).all()
        engine.dispose()
        assert [mpa.name for mpa in ratings] == ["G", "PG", "PG-13", "R", "NC-17"]
        assert [genre.id for genre in genres] == [1, 2, 3, 4, 5, 6]

    def test_deuxieme_initialisation_sans_doublon(self, tmp_path):
        db_url = f"sqlite:///{tmp_path}/cli.db"
        for _ in range(2):
            container = Container()
            container.config.override(
                providers.Object(Settings(storage_backend="sql", database_url=db_url))
            )
            with patch("filmorate.main.container", container):
                result = runner.invoke(app, ["init-db"])
            container.engine().dispose()
            assert result.exit_code == 0

        engine = create_engine_for_url(db_url)
        with Session(engine) as session:
            assert len(session.exec(select(GenreModel)).all()) == 6
        engine.dispose()

    def test_backend_memoire_sans_base(self):
        container = _mock_container(Settings(storage_backend="memory"))

        with patch("filmorate.main.container", container):
            result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 0
        container.database.init.assert_not_called()


class TestInfo:
    def test_affiche_la_configuration(self):
        container = _mock_container(Settings(storage_backend="memory", port=9090))

        with patch("filmorate.main.container", container):
            result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "memory" in result.output
        assert "9090" in result.output


class TestServe:
    def test_lance_uvicorn_avec_la_configuration(self):
        container = _mock_container(Settings(host="0.0.0.0", port=8181))

        with patch("filmorate.main.container", container), patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve"])

        assert result.exit_code == 0
        mock_run.assert_called_once_with(
            "filmorate.web.app:app", host="0.0.0.0", port=8181, reload=False, log_config=None
        )
