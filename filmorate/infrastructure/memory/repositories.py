"""
Implementations en memoire des ports de stockage.

Meme contrat que les repositories SQLModel, sur les tables d'un
InMemoryStore partage. Chaque methode prend store.lock pour toute sa duree,
ce qui rend le backend utilisable depuis plusieurs threads.

Les entites sont copiees a l'entree et a la sortie : un appelant qui
modifie un objet retourne ne modifie pas l'etat stocke.
"""

from collections import Counter
from copy import deepcopy
from dataclasses import replace
from typing import Optional

from filmorate.core.entities import Film, Genre, Mpa, User
from filmorate.core.exceptions import DuplicateError, NotFoundError
from filmorate.core.ports.repositories import (
    IFilmRepository,
    IGenreRepository,
    ILikeRepository,
    IMpaRepository,
    IUserRepository,
)
from filmorate.infrastructure.memory.store import InMemoryStore


class InMemoryGenreRepository(IGenreRepository):
    """Referentiel des genres en memoire."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def get_all(self) -> list[Genre]:
        with self._store.lock:
            return [Genre(id=gid, name=name) for gid, name in sorted(self._store.genres.items())]

    def find_by_id(self, genre_id: int) -> Optional[Genre]:
        with self._store.lock:
            name = self._store.genres.get(genre_id)
        return Genre(id=genre_id, name=name) if name is not None else None

    def exists_by_id(self, genre_id: int) -> bool:
        with self._store.lock:
            return genre_id in self._store.genres


class InMemoryMpaRepository(IMpaRepository):
    """Referentiel des classifications MPA en memoire."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def get_all(self) -> list[Mpa]:
        with self._store.lock:
            return [Mpa(id=mid, name=name) for mid, name in sorted(self._store.mpa.items())]

    def find_by_id(self, mpa_id: int) -> Optional[Mpa]:
        with self._store.lock:
            name = self._store.mpa.get(mpa_id)
        return Mpa(id=mpa_id, name=name) if name is not None else None

    def exists_by_id(self, mpa_id: int) -> bool:
        with self._store.lock:
            return mpa_id in self._store.mpa


class InMemoryFilmRepository(IFilmRepository):
    """
    Films en memoire.

    Les films sont stockes avec des genres reduits a leurs ids ; les noms
    (genres, MPA) sont recomposes depuis les tables de reference a la lecture.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _to_stored(self, film: Film, film_id: int) -> Film:
        genre_ids = dict.fromkeys(genre.id for genre in film.genres)
        return replace(
            deepcopy(film),
            id=film_id,
            mpa=Mpa(id=film.mpa.id),
            genres=[Genre(id=gid) for gid in genre_ids],
        )

    def _compose(self, stored: Film) -> Film:
        genres = sorted(
            (Genre(id=g.id, name=self._store.genres.get(g.id)) for g in stored.genres),
            key=lambda genre: genre.id,
        )
        return replace(
            deepcopy(stored),
            mpa=Mpa(id=stored.mpa.id, name=self._store.mpa.get(stored.mpa.id)),
            genres=genres,
        )

    def add(self, film: Film) -> Film:
        with self._store.lock:
            film_id = InMemoryStore.next_id(self._store.films)
            self._store.films[film_id] = self._to_stored(film, film_id)
        return replace(film, id=film_id)

    def update(self, film: Film) -> Film:
        with self._store.lock:
            if film.id not in self._store.films:
                raise NotFoundError(f"Film avec l'ID {film.id} introuvable")
            self._store.films[film.id] = self._to_stored(film, film.id)
        return film

    def find_by_id(self, film_id: int) -> Optional[Film]:
        with self._store.lock:
            stored = self._store.films.get(film_id)
            return self._compose(stored) if stored is not None else None

    def exists_by_id(self, film_id: int) -> bool:
        with self._store.lock:
            return film_id in self._store.films

    def get_all(self) -> list[Film]:
        with self._store.lock:
            return [self._compose(self._store.films[fid]) for fid in sorted(self._store.films)]

    def get_popular(self, count: int) -> list[Film]:
        with self._store.lock:
            likes_by_film = Counter(film_id for film_id, _ in self._store.likes)
            ranked = sorted(self._store.films, key=lambda fid: (-likes_by_film[fid], fid))
            return [self._compose(self._store.films[fid]) for fid in ranked[:count]]


class InMemoryUserRepository(IUserRepository):
    """Utilisateurs et amities orientees en memoire."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _copy(self, user: User, with_friends: bool = False) -> User:
        friends = set(self._store.friends.get(user.id, ())) if with_friends else set()
        return replace(deepcopy(user), friends=friends)

    def add(self, user: User) -> User:
        with self._store.lock:
            user_id = InMemoryStore.next_id(self._store.users)
            self._store.users[user_id] = replace(deepcopy(user), id=user_id, friends=set())
        return replace(user, id=user_id, friends=set())

    def update(self, user: User) -> User:
        with self._store.lock:
            if user.id not in self._store.users:
                raise NotFoundError(f"Utilisateur avec l'ID {user.id} introuvable")
            self._store.users[user.id] = replace(deepcopy(user), friends=set())
            return self._copy(self._store.users[user.id], with_friends=True)

    def find_by_id(self, user_id: int) -> Optional[User]:
        with self._store.lock:
            user = self._store.users.get(user_id)
            return self._copy(user, with_friends=True) if user is not None else None

    def get_all(self) -> list[User]:
        with self._store.lock:
            return [self._copy(self._store.users[uid]) for uid in sorted(self._store.users)]

    def exists_by_id(self, user_id: int) -> bool:
        with self._store.lock:
            return user_id in self._store.users

    def exists_by_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        with self._store.lock:
            return any(
                u.email == email and uid != exclude_id for uid, u in self._store.users.items()
            )

    def exists_by_login(self, login: str, exclude_id: Optional[int] = None) -> bool:
        with self._store.lock:
            return any(
                u.login == login and uid != exclude_id for uid, u in self._store.users.items()
            )

    def add_friend(self, user_id: int, friend_id: int) -> None:
        with self._store.lock:
            friends = self._store.friends.setdefault(user_id, set())
            if friend_id in friends:
                raise DuplicateError(f"L'utilisateur {friend_id} est deja ami de {user_id}")
            friends.add(friend_id)

    def remove_friend(self, user_id: int, friend_id: int) -> None:
        with self._store.lock:
            self._store.friends.get(user_id, set()).discard(friend_id)

    def get_friends(self, user_id: int) -> list[User]:
        with self._store.lock:
            ids = self._store.friends.get(user_id, set())
            return self._expand(ids)

    def get_common_friends(self, user_id: int, other_id: int) -> list[User]:
        with self._store.lock:
            common = self._store.friends.get(user_id, set()) & self._store.friends.get(
                other_id, set()
            )
            return self._expand(common)

    def _expand(self, ids: set[int]) -> list[User]:
        return [self._copy(self._store.users[uid]) for uid in sorted(ids) if uid in self._store.users]


class InMemoryLikeRepository(ILikeRepository):
    """Likes en memoire (ensemble de couples film_id, user_id)."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def exists(self, film_id: int, user_id: int) -> bool:
        with self._store.lock:
            return (film_id, user_id) in self._store.likes

    def add(self, film_id: int, user_id: int) -> None:
        with self._store.lock:
            if (film_id, user_id) in self._store.likes:
                raise DuplicateError(f"L'utilisateur {user_id} a deja like le film {film_id}")
            self._store.likes.add((film_id, user_id))

    def remove(self, film_id: int, user_id: int) -> None:
        with self._store.lock:
            self._store.likes.discard((film_id, user_id))
