"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) definissant les contrats pour la persistance des donnees.
Les implementations (adaptateurs) fournissent les mecanismes de stockage concrets
(SQLite/SQL via SQLModel, en memoire protege par un verrou).
"""

from abc import ABC, abstractmethod
from typing import Optional

from filmorate.core.entities import Film, Genre, Mpa, User


class IGenreRepository(ABC):
    """
    Interface de lecture du referentiel des genres.

    Les genres sont pre-remplis et jamais modifies par l'application.
    """

    @abstractmethod
    def get_all(self) -> list[Genre]:
        """Liste tous les genres par id croissant."""
        ...

    @abstractmethod
    def find_by_id(self, genre_id: int) -> Optional[Genre]:
        """Recupere un genre par son ID."""
        ...

    @abstractmethod
    def exists_by_id(self, genre_id: int) -> bool:
        """Verifie l'existence d'un genre."""
        ...


class IMpaRepository(ABC):
    """
    Interface de lecture du referentiel des classifications MPA.
    """

    @abstractmethod
    def get_all(self) -> list[Mpa]:
        """Liste toutes les classifications par id croissant."""
        ...

    @abstractmethod
    def find_by_id(self, mpa_id: int) -> Optional[Mpa]:
        """Recupere une classification par son ID."""
        ...

    @abstractmethod
    def exists_by_id(self, mpa_id: int) -> bool:
        """Verifie l'existence d'une classification."""
        ...


class IFilmRepository(ABC):
    """
    Interface de stockage des films.

    Definit les operations pour persister les films et reconstruire
    l'agregat (ligne film + nom MPA + liste ordonnee des genres).
    """

    @abstractmethod
    def add(self, film: Film) -> Film:
        """Insere un film et ses genres. Retourne le film avec son id."""
        ...

    @abstractmethod
    def update(self, film: Film) -> Film:
        """
        Remplace un film existant et l'ensemble de ses genres.

        Leve NotFoundError si aucun film ne porte cet id.
        """
        ...

    @abstractmethod
    def find_by_id(self, film_id: int) -> Optional[Film]:
        """Recupere un film complet par son ID."""
        ...

    @abstractmethod
    def exists_by_id(self, film_id: int) -> bool:
        """Verifie l'existence d'un film."""
        ...

    @abstractmethod
    def get_all(self) -> list[Film]:
        """Liste tous les films avec MPA et genres, sans requete par film."""
        ...

    @abstractmethod
    def get_popular(self, count: int) -> list[Film]:
        """
        Classe les films par nombre de likes decroissant.

        Args :
            count : Nombre maximum de films retournes (positif)

        Retourne :
            Au plus count films, ex aequo departages par id croissant
        """
        ...


class IUserRepository(ABC):
    """
    Interface de stockage des utilisateurs et de leurs relations d'amitie.

    L'amitie est une arete orientee (user_id -> friend_id).
    """

    @abstractmethod
    def add(self, user: User) -> User:
        """Insere un utilisateur. Retourne l'utilisateur avec son id."""
        ...

    @abstractmethod
    def update(self, user: User) -> User:
        """
        Remplace les champs d'un utilisateur existant (amities inchangees).

        Leve NotFoundError si aucun utilisateur ne porte cet id.
        """
        ...

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]:
        """Recupere un utilisateur avec l'ensemble des ids de ses amis."""
        ...

    @abstractmethod
    def get_all(self) -> list[User]:
        """Liste tous les utilisateurs par id croissant."""
        ...

    @abstractmethod
    def exists_by_id(self, user_id: int) -> bool:
        """Verifie l'existence d'un utilisateur."""
        ...

    @abstractmethod
    def exists_by_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """Verifie si l'email est deja pris, en ignorant exclude_id s'il est fourni."""
        ...

    @abstractmethod
    def exists_by_login(self, login: str, exclude_id: Optional[int] = None) -> bool:
        """Verifie si le login est deja pris, en ignorant exclude_id s'il est fourni."""
        ...

    @abstractmethod
    def add_friend(self, user_id: int, friend_id: int) -> None:
        """Ajoute l'arete user_id -> friend_id."""
        ...

    @abstractmethod
    def remove_friend(self, user_id: int, friend_id: int) -> None:
        """Supprime l'arete user_id -> friend_id si elle existe."""
        ...

    @abstractmethod
    def get_friends(self, user_id: int) -> list[User]:
        """Liste les utilisateurs vers lesquels pointe user_id."""
        ...

    @abstractmethod
    def get_common_friends(self, user_id: int, other_id: int) -> list[User]:
        """Liste les amis communs aux deux utilisateurs."""
        ...


class ILikeRepository(ABC):
    """
    Interface de stockage de la relation film x utilisateur (likes).

    Un couple (film_id, user_id) est unique.
    """

    @abstractmethod
    def exists(self, film_id: int, user_id: int) -> bool:
        """Verifie si l'utilisateur a deja like le film."""
        ...

    @abstractmethod
    def add(self, film_id: int, user_id: int) -> None:
        """Ajoute un like. Leve DuplicateError si le couple existe deja."""
        ...

    @abstractmethod
    def remove(self, film_id: int, user_id: int) -> None:
        """Supprime un like s'il existe (sans erreur sinon)."""
        ...
