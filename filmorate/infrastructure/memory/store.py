"""
Etat partage du backend memoire.

Un seul InMemoryStore est partage par tous les repositories memoire
d'un container. Toute lecture ou ecriture se fait sous store.lock.
"""

import threading
from dataclasses import dataclass, field

from filmorate.core.entities import Film, User
from filmorate.infrastructure.reference_data import GENRES, MPA_RATINGS


@dataclass
class InMemoryStore:
    """
    Tables en memoire.

    Attributs:
        mpa: id -> nom de la classification (pre-rempli)
        genres: id -> nom du genre (pre-rempli)
        films: id -> film (genres reduits a leurs ids)
        users: id -> utilisateur (sans amis)
        friends: user_id -> ids des amis (aretes orientees)
        likes: couples (film_id, user_id)
        lock: verrou reentrant protegeant l'ensemble des tables
    """

    mpa: dict[int, str] = field(default_factory=lambda: dict(MPA_RATINGS))
    genres: dict[int, str] = field(default_factory=lambda: dict(GENRES))
    films: dict[int, Film] = field(default_factory=dict)
    users: dict[int, User] = field(default_factory=dict)
    friends: dict[int, set[int]] = field(default_factory=dict)
    likes: set[tuple[int, int]] = field(default_factory=set)
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    @staticmethod
    def next_id(table: dict[int, object]) -> int:
        """Id suivant : plus grand id existant + 1 (1 pour une table vide)."""
        return max(table, default=0) + 1
