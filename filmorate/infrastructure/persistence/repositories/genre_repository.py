"""
Implementation SQLModel du referentiel des genres.
"""

from typing import Optional

from sqlmodel import Session, select

from filmorate.core.entities import Genre
from filmorate.core.ports.repositories import IGenreRepository
from filmorate.infrastructure.persistence.models import GenreModel


class SQLModelGenreRepository(IGenreRepository):
    """Repository SQLModel (lecture seule) pour les genres."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, model: GenreModel) -> Genre:
        return Genre(id=model.id, name=model.name)

    def get_all(self) -> list[Genre]:
        """Liste tous les genres par id croissant."""
        statement = select(GenreModel).order_by(GenreModel.id)
        return [self._to_entity(model) for model in self._session.exec(statement).all()]

    def find_by_id(self, genre_id: int) -> Optional[Genre]:
        """Recupere un genre par son ID."""
        model = self._session.get(GenreModel, genre_id)
        if model:
            return self._to_entity(model)
        return None

    def exists_by_id(self, genre_id: int) -> bool:
        """Verifie l'existence d'un genre."""
        return self._session.get(GenreModel, genre_id) is not None
