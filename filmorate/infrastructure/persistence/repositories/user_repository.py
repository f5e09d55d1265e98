"""
Implementation SQLModel du repository User.

Implemente l'interface IUserRepository : utilisateurs, controles d'unicite
(email, login) et relations d'amitie orientees de la table friends.
"""

from dataclasses import replace
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import aliased
from sqlalchemy.orm.exc import FlushError
from sqlmodel import Session, col, select

from filmorate.core.entities import User
from filmorate.core.exceptions import DuplicateError, NotFoundError
from filmorate.core.ports.repositories import IUserRepository
from filmorate.infrastructure.persistence.database import is_foreign_key_violation
from filmorate.infrastructure.persistence.models import FriendModel, UserModel


class SQLModelUserRepository(IUserRepository):
    """
    Repository SQLModel pour les utilisateurs.

    Les ids d'amis ne sont charges que par find_by_id ; les listes
    d'utilisateurs (get_all, get_friends...) laissent friends vide.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, model: UserModel, friends: Optional[set[int]] = None) -> User:
        return User(
            id=model.id,
            email=model.email,
            login=model.login,
            name=model.name,
            birthday=model.birthday,
            friends=friends if friends is not None else set(),
        )

    def _to_model(self, entity: User) -> UserModel:
        return UserModel(
            email=entity.email,
            login=entity.login,
            name=entity.name,
            birthday=entity.birthday,
        )

    def add(self, user: User) -> User:
        """Insere un utilisateur."""
        model = self._to_model(user)
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return replace(user, id=model.id, friends=set())

    def update(self, user: User) -> User:
        """Remplace les champs d'un utilisateur existant."""
        existing = self._session.get(UserModel, user.id) if user.id else None
        if existing is None:
            raise NotFoundError(f"Utilisateur avec l'ID {user.id} introuvable")

        existing.email = user.email
        existing.login = user.login
        existing.name = user.name
        existing.birthday = user.birthday
        self._session.add(existing)
        self._session.commit()
        self._session.refresh(existing)
        return self._to_entity(existing, self._friend_ids(existing.id))

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Recupere un utilisateur et l'ensemble des ids de ses amis."""
        model = self._session.get(UserModel, user_id)
        if model is None:
            return None
        return self._to_entity(model, self._friend_ids(model.id))

    def get_all(self) -> list[User]:
        statement = select(UserModel).order_by(UserModel.id)
        return [self._to_entity(model) for model in self._session.exec(statement).all()]

    def exists_by_id(self, user_id: int) -> bool:
        return self._session.get(UserModel, user_id) is not None

    def exists_by_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """Verifie si l'email est pris par un autre utilisateur que exclude_id."""
        statement = select(func.count()).select_from(UserModel).where(UserModel.email == email)
        if exclude_id is not None:
            statement = statement.where(UserModel.id != exclude_id)
        return self._session.exec(statement).one() > 0

    def exists_by_login(self, login: str, exclude_id: Optional[int] = None) -> bool:
        """Verifie si le login est pris par un autre utilisateur que exclude_id."""
        statement = select(func.count()).select_from(UserModel).where(UserModel.login == login)
        if exclude_id is not None:
            statement = statement.where(UserModel.id != exclude_id)
        return self._session.exec(statement).one() > 0

    def add_friend(self, user_id: int, friend_id: int) -> None:
        """Ajoute l'arete user_id -> friend_id (DuplicateError si deja presente)."""
        self._session.add(FriendModel(user_id=user_id, friend_id=friend_id))
        try:
            self._session.commit()
        except IntegrityError as e:
            self._session.rollback()
            if is_foreign_key_violation(e):
                raise NotFoundError(
                    f"Utilisateur {user_id} ou {friend_id} introuvable"
                ) from e
            raise DuplicateError(
                f"L'utilisateur {friend_id} est deja ami de {user_id}"
            ) from e
        except FlushError as e:
            self._session.rollback()
            raise DuplicateError(
                f"L'utilisateur {friend_id} est deja ami de {user_id}"
            ) from e

    def remove_friend(self, user_id: int, friend_id: int) -> None:
        link = self._session.get(FriendModel, (user_id, friend_id))
        if link is None:
            return
        self._session.delete(link)
        self._session.commit()

    def get_friends(self, user_id: int) -> list[User]:
        """Liste les utilisateurs vers lesquels pointe user_id."""
        statement = (
            select(UserModel)
            .join(FriendModel, UserModel.id == FriendModel.friend_id)
            .where(FriendModel.user_id == user_id)
            .order_by(UserModel.id)
        )
        return [self._to_entity(model) for model in self._session.exec(statement).all()]

    def get_common_friends(self, user_id: int, other_id: int) -> list[User]:
        """
        Liste les amis communs de deux utilisateurs.

        Intersection calculee par auto-jointure de friends, puis les ids
        sont developpes en utilisateurs complets en une seule requete.
        """
        other_friends = aliased(FriendModel)
        ids_statement = (
            select(FriendModel.friend_id)
            .join(other_friends, FriendModel.friend_id == other_friends.friend_id)
            .where(FriendModel.user_id == user_id)
            .where(other_friends.user_id == other_id)
        )
        common_ids = list(self._session.exec(ids_statement).all())
        if not common_ids:
            return []

        statement = (
            select(UserModel)
            .where(col(UserModel.id).in_(common_ids))
            .order_by(UserModel.id)
        )
        return [self._to_entity(model) for model in self._session.exec(statement).all()]

    def _friend_ids(self, user_id: int) -> set[int]:
        statement = select(FriendModel.friend_id).where(FriendModel.user_id == user_id)
        return set(self._session.exec(statement).all())
