"""
Implementation SQLModel du repository Film.

Implemente l'interface IFilmRepository pour la persistance des films.
L'agregat Film est reconstruit a partir de trois sources :
- la ligne films, jointe au nom de la classification MPA
- les lignes film_genres, jointes aux noms des genres
- pour le classement, le nombre de lignes likes par film

Les genres d'un ensemble de films sont charges en une seule requete
puis rattaches en memoire par film_id (jamais une requete par film).
"""

from dataclasses import replace
from typing import Iterable, Optional

from sqlalchemy import func
from sqlmodel import Session, col, select

from filmorate.core.entities import Film, Genre, Mpa
from filmorate.core.exceptions import NotFoundError
from filmorate.core.ports.repositories import IFilmRepository
from filmorate.infrastructure.persistence.models import (
    FilmGenreModel,
    FilmModel,
    GenreModel,
    LikeModel,
    MpaModel,
)


class SQLModelFilmRepository(IFilmRepository):
    """
    Repository SQLModel pour les films.

    Implemente IFilmRepository avec conversion bidirectionnelle
    entre l'entite Film (domaine) et FilmModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(
        self, model: FilmModel, mpa_name: Optional[str], genres: list[Genre]
    ) -> Film:
        """
        Convertit une ligne films (et ses donnees jointes) en entite domaine.

        Args :
            model : Le modele FilmModel depuis la DB
            mpa_name : Nom de la classification jointe
            genres : Genres du film, deja tries par id

        Retourne :
            L'entite Film correspondante
        """
        return Film(
            id=model.id,
            name=model.name,
            description=model.description,
            release_date=model.release_date,
            duration=model.duration,
            mpa=Mpa(id=model.mpa_id, name=mpa_name),
            genres=genres,
        )

    def _to_model(self, entity: Film) -> FilmModel:
        """Convertit une entite domaine en modele DB (l'id est attribue par la base)."""
        return FilmModel(
            name=entity.name,
            description=entity.description,
            release_date=entity.release_date,
            duration=entity.duration,
            mpa_id=entity.mpa.id,
        )

    def _load_genres(
        self, film_ids: Optional[list[int]] = None
    ) -> dict[int, list[Genre]]:
        """
        Charge les genres de plusieurs films en une requete.

        Args :
            film_ids : Films concernes, ou None pour tous les films

        Retourne :
            Dictionnaire film_id -> genres tries par id croissant
        """
        statement = (
            select(FilmGenreModel.film_id, GenreModel.id, GenreModel.name)
            .join(GenreModel, FilmGenreModel.genre_id == GenreModel.id)
            .order_by(FilmGenreModel.film_id, GenreModel.id)
        )
        if film_ids is not None:
            statement = statement.where(col(FilmGenreModel.film_id).in_(film_ids))

        genres_by_film: dict[int, list[Genre]] = {}
        for film_id, genre_id, genre_name in self._session.exec(statement).all():
            genres_by_film.setdefault(film_id, []).append(Genre(id=genre_id, name=genre_name))
        return genres_by_film

    def _replace_genre_relations(self, film_id: int, genres: Iterable[Genre]) -> None:
        """Supprime les liens film_genres du film puis insere le nouvel ensemble."""
        existing_links = self._session.exec(
            select(FilmGenreModel).where(FilmGenreModel.film_id == film_id)
        ).all()
        for link in existing_links:
            self._session.delete(link)
        self._session.flush()
        self._add_genre_relations(film_id, genres)

    def _add_genre_relations(self, film_id: int, genres: Iterable[Genre]) -> None:
        # dict.fromkeys : dedoublonnage en conservant l'ordre
        for genre_id in dict.fromkeys(genre.id for genre in genres):
            self._session.add(FilmGenreModel(film_id=film_id, genre_id=genre_id))

    def add(self, film: Film) -> Film:
        """Insere un film et ses liens de genres."""
        model = self._to_model(film)
        self._session.add(model)
        self._session.flush()  # attribue l'id

        self._add_genre_relations(model.id, film.genres)
        self._session.commit()
        return replace(film, id=model.id)

    def update(self, film: Film) -> Film:
        """Remplace les colonnes d'un film et l'ensemble de ses genres."""
        existing = self._session.get(FilmModel, film.id) if film.id else None
        if existing is None:
            raise NotFoundError(f"Film avec l'ID {film.id} introuvable")

        existing.name = film.name
        existing.description = film.description
        existing.release_date = film.release_date
        existing.duration = film.duration
        existing.mpa_id = film.mpa.id
        self._session.add(existing)

        self._replace_genre_relations(existing.id, film.genres)
        self._session.commit()
        return film

    def find_by_id(self, film_id: int) -> Optional[Film]:
        """Recupere un film avec le nom de sa classification et ses genres."""
        statement = (
            select(FilmModel, MpaModel.name)
            .join(MpaModel, FilmModel.mpa_id == MpaModel.id)
            .where(FilmModel.id == film_id)
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None

        model, mpa_name = row
        genres = self._load_genres([model.id]).get(model.id, [])
        return self._to_entity(model, mpa_name, genres)

    def exists_by_id(self, film_id: int) -> bool:
        return self._session.get(FilmModel, film_id) is not None

    def get_all(self) -> list[Film]:
        """
        Liste tous les films.

        Deux requetes : films + noms MPA, puis tous les liens de genres.
        """
        statement = (
            select(FilmModel, MpaModel.name)
            .join(MpaModel, FilmModel.mpa_id == MpaModel.id)
            .order_by(FilmModel.id)
        )
        rows = self._session.exec(statement).all()
        if not rows:
            return []

        genres_by_film = self._load_genres()
        return [
            self._to_entity(model, mpa_name, genres_by_film.get(model.id, []))
            for model, mpa_name in rows
        ]

    def get_popular(self, count: int) -> list[Film]:
        """
        Classe les films par nombre de likes decroissant, puis par id.

        La jointure externe sur likes conserve les films sans like (0).
        """
        likes_count = func.count(LikeModel.user_id).label("likes_count")
        statement = (
            select(FilmModel, MpaModel.name, likes_count)
            .join(MpaModel, FilmModel.mpa_id == MpaModel.id)
            .outerjoin(LikeModel, LikeModel.film_id == FilmModel.id)
            .group_by(FilmModel.id, MpaModel.name)
            .order_by(likes_count.desc(), FilmModel.id)
            .limit(count)
        )
        rows = self._session.exec(statement).all()
        if not rows:
            return []

        genres_by_film = self._load_genres([model.id for model, _, _ in rows])
        return [
            self._to_entity(model, mpa_name, genres_by_film.get(model.id, []))
            for model, mpa_name, _ in rows
        ]
