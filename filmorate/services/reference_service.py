"""
Services des referentiels (genres et classifications MPA).

Simples passe-plats vers les repositories, qui traduisent une absence
en NotFoundError.
"""

from filmorate.core.entities import Genre, Mpa
from filmorate.core.exceptions import NotFoundError
from filmorate.core.ports.repositories import IGenreRepository, IMpaRepository


class GenreService:
    """Lecture du referentiel des genres."""

    def __init__(self, genre_repo: IGenreRepository) -> None:
        self._genre_repo = genre_repo

    def get_all_genres(self) -> list[Genre]:
        return self._genre_repo.get_all()

    def find_genre_by_id(self, genre_id: int) -> Genre:
        genre = self._genre_repo.find_by_id(genre_id)
        if genre is None:
            raise NotFoundError(f"Genre avec l'ID {genre_id} introuvable")
        return genre


class MpaService:
    """Lecture du referentiel des classifications MPA."""

    def __init__(self, mpa_repo: IMpaRepository) -> None:
        self._mpa_repo = mpa_repo

    def get_all_mpa(self) -> list[Mpa]:
        return self._mpa_repo.get_all()

    def find_mpa_by_id(self, mpa_id: int) -> Mpa:
        mpa = self._mpa_repo.find_by_id(mpa_id)
        if mpa is None:
            raise NotFoundError(f"Classification MPA avec l'ID {mpa_id} introuvable")
        return mpa
