"""
Service des likes.

Un utilisateur ne peut liker un film qu'une seule fois : un second like
est refuse (DuplicateError). Retirer un like absent est sans effet.
"""

from loguru import logger

from filmorate.core.exceptions import DuplicateError
from filmorate.core.ports.repositories import ILikeRepository


class LikeService:
    """Gestion de la relation film x utilisateur."""

    def __init__(self, like_repo: ILikeRepository) -> None:
        self._like_repo = like_repo

    def is_film_liked_by_user(self, film_id: int, user_id: int) -> bool:
        return self._like_repo.exists(film_id, user_id)

    def add_like(self, film_id: int, user_id: int) -> None:
        if self.is_film_liked_by_user(film_id, user_id):
            logger.debug(f"L'utilisateur {user_id} a deja like le film {film_id}")
            raise DuplicateError(f"L'utilisateur {user_id} a deja like le film {film_id}")

        self._like_repo.add(film_id, user_id)

    def remove_like(self, film_id: int, user_id: int) -> None:
        if not self.is_film_liked_by_user(film_id, user_id):
            logger.debug(f"Like de l'utilisateur {user_id} pour le film {film_id} introuvable")
            return

        self._like_repo.remove(film_id, user_id)
