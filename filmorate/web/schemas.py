"""
Schemas JSON de l'API.

Les schemas pydantic ne controlent que la forme et les types des corps de
requete (les regles metier sont dans filmorate.core.validation). Les noms de
champs sont exposes en camelCase (releaseDate), les noms snake_case sont aussi
acceptes en entree.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from filmorate.core.entities import Film, FilmUpdate, Genre, Mpa, User, UserUpdate


class _Schema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MpaRef(_Schema):
    id: int
    name: Optional[str] = None


class GenreRef(_Schema):
    id: int
    name: Optional[str] = None


class MpaOut(_Schema):
    id: int
    name: Optional[str] = None

    @classmethod
    def from_entity(cls, mpa: Mpa) -> "MpaOut":
        return cls(id=mpa.id, name=mpa.name)


class GenreOut(_Schema):
    id: int
    name: Optional[str] = None

    @classmethod
    def from_entity(cls, genre: Genre) -> "GenreOut":
        return cls(id=genre.id, name=genre.name)


class FilmIn(_Schema):
    """Corps de POST /films et PUT /films."""

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    release_date: Optional[date] = None
    duration: Optional[int] = None
    mpa: Optional[MpaRef] = None
    genres: Optional[list[GenreRef]] = None

    def to_entity(self) -> Film:
        return Film(
            id=self.id,
            name=self.name,
            description=self.description,
            release_date=self.release_date,
            duration=self.duration,
            mpa=Mpa(id=self.mpa.id) if self.mpa is not None else None,
            genres=[Genre(id=genre.id) for genre in self.genres or []],
        )


class FilmPatchIn(_Schema):
    """Corps de PATCH /films : seuls les champs presents sont appliques."""

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    release_date: Optional[date] = None
    duration: Optional[int] = None

    def to_update(self) -> FilmUpdate:
        return FilmUpdate(
            id=self.id,
            name=self.name,
            description=self.description,
            release_date=self.release_date,
            duration=self.duration,
        )


class FilmOut(_Schema):
    id: int
    name: str
    description: Optional[str] = None
    release_date: Optional[date] = None
    duration: Optional[int] = None
    mpa: Optional[MpaOut] = None
    genres: list[GenreOut] = []

    @classmethod
    def from_entity(cls, film: Film) -> "FilmOut":
        return cls(
            id=film.id,
            name=film.name,
            description=film.description,
            release_date=film.release_date,
            duration=film.duration,
            mpa=MpaOut.from_entity(film.mpa) if film.mpa is not None else None,
            genres=[GenreOut.from_entity(genre) for genre in film.genres],
        )


class UserIn(_Schema):
    """Corps de POST /users et PUT /users. Les amis eventuels sont ignores."""

    id: Optional[int] = None
    email: Optional[str] = None
    login: Optional[str] = None
    name: Optional[str] = None
    birthday: Optional[date] = None

    def to_entity(self) -> User:
        return User(
            id=self.id,
            email=self.email or "",
            login=self.login,
            name=self.name,
            birthday=self.birthday,
        )


class UserPatchIn(_Schema):
    """Corps de PATCH /users."""

    id: Optional[int] = None
    email: Optional[str] = None
    login: Optional[str] = None
    name: Optional[str] = None
    birthday: Optional[date] = None

    def to_update(self) -> UserUpdate:
        return UserUpdate(
            id=self.id,
            email=self.email,
            login=self.login,
            name=self.name,
            birthday=self.birthday,
        )


class UserOut(_Schema):
    id: int
    email: str
    login: str
    name: Optional[str] = None
    birthday: Optional[date] = None
    friends: list[int] = []

    @classmethod
    def from_entity(cls, user: User) -> "UserOut":
        return cls(
            id=user.id,
            email=user.email,
            login=user.login,
            name=user.name,
            birthday=user.birthday,
            friends=sorted(user.friends),
        )
