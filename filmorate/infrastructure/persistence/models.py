"""
Modeles SQLModel pour la base de donnees Filmorate.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- mpa: Classifications MPA (reference, lecture seule)
- genres: Genres (reference, lecture seule)
- films: Films, avec la classification MPA en cle etrangere
- film_genres: Relation film x genre
- users: Utilisateurs (email et login uniques)
- friends: Amities orientees (user_id -> friend_id)
- likes: Relation film x utilisateur

Les tables de relation utilisent une cle primaire composite, ce qui
interdit les doublons quel que soit le service appelant.
"""

from datetime import date
from typing import Optional

from sqlmodel import Field, SQLModel


class MpaModel(SQLModel, table=True):
    """Classification MPA (G, PG, PG-13, R, NC-17)."""

    __tablename__ = "mpa"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(unique=True)


class GenreModel(SQLModel, table=True):
    """Genre de film."""

    __tablename__ = "genres"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(unique=True)


class FilmModel(SQLModel, table=True):
    """
    Modele representant un film dans la base de donnees.

    Le nom de la classification et les genres sont reconstruits
    par jointure dans le repository.
    """

    __tablename__ = "films"

    id: int | None = Field(default=None, primary_key=True)
    name: str
    description: Optional[str] = Field(default=None, max_length=200)
    release_date: date
    duration: int
    mpa_id: int = Field(foreign_key="mpa.id", index=True)


class FilmGenreModel(SQLModel, table=True):
    """Relation film x genre."""

    __tablename__ = "film_genres"

    film_id: int = Field(foreign_key="films.id", primary_key=True)
    genre_id: int = Field(foreign_key="genres.id", primary_key=True)


class UserModel(SQLModel, table=True):
    """Modele representant un utilisateur."""

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True)
    login: str = Field(unique=True, index=True)
    name: str
    birthday: date | None = None


class FriendModel(SQLModel, table=True):
    """Arete d'amitie orientee user_id -> friend_id."""

    __tablename__ = "friends"

    user_id: int = Field(foreign_key="users.id", primary_key=True)
    friend_id: int = Field(foreign_key="users.id", primary_key=True)


class LikeModel(SQLModel, table=True):
    """Like d'un utilisateur pour un film."""

    __tablename__ = "likes"

    film_id: int = Field(foreign_key="films.id", primary_key=True)
    user_id: int = Field(foreign_key="users.id", primary_key=True, index=True)
