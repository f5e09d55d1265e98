"""
Service des films.

Orchestre les repositories et services lies aux films :
- resolution de la classification MPA et des genres (NotFoundError si inconnus)
- remplacement complet (update) ou partiel (patch) d'un film
- likes, apres verification de l'existence du film et de l'utilisateur
- classement des films populaires
"""

from dataclasses import replace
from typing import Optional

from loguru import logger

from filmorate.core.entities import Film, FilmUpdate, Genre, Mpa
from filmorate.core.exceptions import NotFoundError, ValidationError
from filmorate.core.ports.repositories import IFilmRepository
from filmorate.services.like_service import LikeService
from filmorate.services.reference_service import GenreService, MpaService
from filmorate.services.user_service import UserService


class FilmService:
    """
    Service des films.

    Example:
        service = FilmService(
            film_repo=repo,
            user_service=user_service,
            mpa_service=mpa_service,
            genre_service=genre_service,
            like_service=like_service,
        )
        film = service.add_film(Film(name="Alien", mpa=Mpa(id=4), ...))
        top = service.get_popular_films(10)
    """

    def __init__(
        self,
        film_repo: IFilmRepository,
        user_service: UserService,
        mpa_service: MpaService,
        genre_service: GenreService,
        like_service: LikeService,
    ) -> None:
        """
        Initialise le service des films.

        Args:
            film_repo: Repository des films
            user_service: Service des utilisateurs (existence avant un like)
            mpa_service: Referentiel des classifications
            genre_service: Referentiel des genres
            like_service: Service des likes
        """
        self._film_repo = film_repo
        self._user_service = user_service
        self._mpa_service = mpa_service
        self._genre_service = genre_service
        self._like_service = like_service

    def add_film(self, film: Film) -> Film:
        """Cree un film apres resolution de sa classification et de ses genres."""
        film = replace(
            film,
            mpa=self._resolve_mpa(film.mpa),
            genres=self._resolve_genres(film.genres or []),
        )

        added = self._film_repo.add(film)
        logger.debug(f"Film ajoute : {added}")
        return added

    def update_film(self, film: Film) -> Film:
        """
        Remplace entierement un film existant.

        Des genres absents (None) signifient "aucun genre".
        """
        self.validate_film_exists(film.id)
        film = replace(
            film,
            mpa=self._resolve_mpa(film.mpa),
            genres=self._resolve_genres(film.genres or []),
        )

        updated = self._film_repo.update(film)
        logger.debug(f"Film entierement mis a jour : {updated}")
        return updated

    def patch_film(self, update: FilmUpdate) -> Film:
        """Met a jour les seuls champs fournis ; classification et genres conserves."""
        existing = self.find_film_by_id(update.id)

        if update.name is not None:
            existing.name = update.name
        if update.description is not None:
            existing.description = update.description
        if update.release_date is not None:
            existing.release_date = update.release_date
        if update.duration is not None:
            existing.duration = update.duration

        updated = self._film_repo.update(existing)
        logger.debug(f"Film mis a jour : {updated}")
        return updated

    def find_film_by_id(self, film_id: int) -> Film:
        film = self._film_repo.find_by_id(film_id)
        if film is None:
            raise NotFoundError(f"Film avec l'ID {film_id} introuvable")
        return film

    def get_all_films(self) -> list[Film]:
        return self._film_repo.get_all()

    def add_like(self, film_id: int, user_id: int) -> None:
        self.validate_film_exists(film_id)
        self._user_service.validate_user_exists(user_id)

        self._like_service.add_like(film_id, user_id)
        logger.debug(f"L'utilisateur {user_id} a like le film {film_id}")

    def remove_like(self, film_id: int, user_id: int) -> None:
        self.validate_film_exists(film_id)
        self._user_service.validate_user_exists(user_id)

        self._like_service.remove_like(film_id, user_id)
        logger.debug(f"L'utilisateur {user_id} a retire son like du film {film_id}")

    def get_popular_films(self, count: int) -> list[Film]:
        """
        Retourne les count films les plus likes.

        Le nombre par defaut de l'API vient de Settings.popular_default_count.
        """
        if count <= 0:
            raise ValidationError("Le nombre de films affiches doit etre positif.")
        return self._film_repo.get_popular(count)

    def validate_film_exists(self, film_id: Optional[int]) -> None:
        if film_id is None or not self._film_repo.exists_by_id(film_id):
            raise NotFoundError(f"Film avec l'ID {film_id} introuvable")

    def _resolve_mpa(self, mpa: Optional[Mpa]) -> Mpa:
        if mpa is None:
            raise ValidationError("La classification MPA est obligatoire.")
        return self._mpa_service.find_mpa_by_id(mpa.id)

    def _resolve_genres(self, genres: list[Genre]) -> list[Genre]:
        """Dedoublonne par id, verifie chaque genre et trie par id croissant."""
        unique_ids = sorted(set(genre.id for genre in genres))
        return [self._genre_service.find_genre_by_id(genre_id) for genre_id in unique_ids]
