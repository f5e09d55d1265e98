"""
Service des utilisateurs.

Centralise les regles metier sur les utilisateurs :
- unicite de l'email et du login (en ignorant l'utilisateur lui-meme lors d'une mise a jour)
- nom par defaut egal au login quand il est vide
- amities orientees : pas d'ami soi-meme, pas de doublon, retrait idempotent
"""

from dataclasses import replace
from typing import Optional

from loguru import logger

from filmorate.core.entities import User, UserUpdate
from filmorate.core.exceptions import DuplicateError, NotFoundError
from filmorate.core.ports.repositories import IUserRepository


class UserService:
    """
    Service des utilisateurs et de leurs amities.

    Example:
        service = UserService(user_repo=repo)
        user = service.add_user(User(email="a@b.c", login="neo"))
        service.add_friend(user.id, other.id)
    """

    def __init__(self, user_repo: IUserRepository) -> None:
        """
        Initialise le service.

        Args:
            user_repo: Repository des utilisateurs et des amities
        """
        self._user_repo = user_repo

    def add_user(self, user: User) -> User:
        """Cree un utilisateur apres controle d'unicite de l'email et du login."""
        self._check_uniqueness(user.email, user.login, exclude_id=None)
        user = self._with_default_name(user)

        added = self._user_repo.add(user)
        logger.debug(f"Utilisateur cree : {added}")
        return added

    def update_user(self, user: User) -> User:
        """Remplace entierement un utilisateur existant (amities inchangees)."""
        self.validate_user_exists(user.id)
        self._check_uniqueness(user.email, user.login, exclude_id=user.id)
        user = self._with_default_name(user)

        updated = self._user_repo.update(user)
        logger.debug(f"Utilisateur entierement mis a jour : {updated}")
        return updated

    def patch_user(self, update: UserUpdate) -> User:
        """
        Met a jour les seuls champs fournis d'un utilisateur.

        Un email ou un login vide est ignore, un nom vide aussi.
        """
        existing = self.find_user_by_id(update.id)

        if update.email:
            self._check_email(update.email, exclude_id=update.id)
            existing.email = update.email
        if update.login:
            self._check_login(update.login, exclude_id=update.id)
            existing.login = update.login
        if update.name is not None and update.name.strip():
            existing.name = update.name
        if update.birthday is not None:
            existing.birthday = update.birthday

        updated = self._user_repo.update(existing)
        logger.debug(f"Utilisateur mis a jour : {updated}")
        return updated

    def find_user_by_id(self, user_id: int) -> User:
        user = self._user_repo.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"Utilisateur avec l'ID {user_id} introuvable")
        return user

    def get_all_users(self) -> list[User]:
        return self._user_repo.get_all()

    def validate_user_exists(self, user_id: Optional[int]) -> None:
        if user_id is None or not self._user_repo.exists_by_id(user_id):
            raise NotFoundError(f"Utilisateur avec l'ID {user_id} introuvable")

    def add_friend(self, user_id: int, friend_id: int) -> None:
        """
        Ajoute friend_id aux amis de user_id (arete orientee).

        Raises:
            DuplicateError: ami soi-meme, ou deja ami
            NotFoundError: l'un des deux utilisateurs n'existe pas
        """
        if user_id == friend_id:
            logger.debug(f"L'utilisateur {user_id} tente de s'ajouter lui-meme en ami")
            raise DuplicateError("Impossible de s'ajouter soi-meme en ami")

        self.validate_user_exists(user_id)
        self.validate_user_exists(friend_id)

        user = self.find_user_by_id(user_id)
        if friend_id in user.friends:
            logger.debug(f"L'utilisateur {user_id} tente d'ajouter {friend_id} deux fois")
            raise DuplicateError("Impossible d'ajouter deux fois le meme ami")

        self._user_repo.add_friend(user_id, friend_id)
        logger.debug(f"L'utilisateur {user_id} a ajoute {friend_id} en ami")

    def remove_friend(self, user_id: int, friend_id: int) -> None:
        """Retire friend_id des amis de user_id ; sans effet si absent."""
        if user_id == friend_id:
            logger.debug(f"L'utilisateur {user_id} tente de se retirer lui-meme de ses amis")
            raise DuplicateError("Impossible de se retirer soi-meme de ses amis")

        self.validate_user_exists(user_id)
        self.validate_user_exists(friend_id)

        user = self.find_user_by_id(user_id)
        if friend_id not in user.friends:
            logger.debug(f"Amitie {user_id} -> {friend_id} introuvable")
            return

        self._user_repo.remove_friend(user_id, friend_id)
        logger.debug(f"L'utilisateur {user_id} a retire {friend_id} de ses amis")

    def get_friends(self, user_id: int) -> list[User]:
        self.validate_user_exists(user_id)
        return self._user_repo.get_friends(user_id)

    def get_common_friends(self, user_id: int, other_id: int) -> list[User]:
        self.validate_user_exists(user_id)
        self.validate_user_exists(other_id)
        return self._user_repo.get_common_friends(user_id, other_id)

    def _check_uniqueness(self, email: str, login: str, exclude_id: Optional[int]) -> None:
        self._check_email(email, exclude_id)
        self._check_login(login, exclude_id)

    def _check_email(self, email: str, exclude_id: Optional[int]) -> None:
        if self._user_repo.exists_by_email(email, exclude_id):
            logger.warning(f"Email {email} deja utilise par un autre utilisateur")
            raise DuplicateError(f"L'email {email} est deja utilise par un autre utilisateur")

    def _check_login(self, login: str, exclude_id: Optional[int]) -> None:
        if self._user_repo.exists_by_login(login, exclude_id):
            logger.warning(f"Login {login} deja utilise par un autre utilisateur")
            raise DuplicateError(f"Le login {login} est deja utilise par un autre utilisateur")

    @staticmethod
    def _with_default_name(user: User) -> User:
        # Nom vide ou absent : on prend le login
        if user.name is None or not user.name.strip():
            return replace(user, name=user.login)
        return user
