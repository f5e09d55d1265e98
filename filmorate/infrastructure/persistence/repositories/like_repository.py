"""
Implementation SQLModel de la relation likes (film x utilisateur).

La cle primaire composite (film_id, user_id) empeche les doublons ;
une insertion en double est traduite en DuplicateError, un film ou un
utilisateur absent (cle etrangere) en NotFoundError.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import FlushError
from sqlmodel import Session

from filmorate.core.exceptions import DuplicateError, NotFoundError
from filmorate.core.ports.repositories import ILikeRepository
from filmorate.infrastructure.persistence.database import is_foreign_key_violation
from filmorate.infrastructure.persistence.models import LikeModel


class SQLModelLikeRepository(ILikeRepository):
    """Repository SQLModel pour les likes."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def exists(self, film_id: int, user_id: int) -> bool:
        return self._session.get(LikeModel, (film_id, user_id)) is not None

    def add(self, film_id: int, user_id: int) -> None:
        """Ajoute un like ; le couple doit etre nouveau."""
        self._session.add(LikeModel(film_id=film_id, user_id=user_id))
        try:
            self._session.commit()
        except IntegrityError as e:
            self._session.rollback()
            if is_foreign_key_violation(e):
                raise NotFoundError(
                    f"Film {film_id} ou utilisateur {user_id} introuvable"
                ) from e
            raise DuplicateError(
                f"L'utilisateur {user_id} a deja like le film {film_id}"
            ) from e
        except FlushError as e:
            # FlushError : le couple est deja present dans la session
            self._session.rollback()
            raise DuplicateError(
                f"L'utilisateur {user_id} a deja like le film {film_id}"
            ) from e

    def remove(self, film_id: int, user_id: int) -> None:
        """Supprime un like ; sans effet s'il n'existe pas."""
        like = self._session.get(LikeModel, (film_id, user_id))
        if like is None:
            return
        self._session.delete(like)
        self._session.commit()
