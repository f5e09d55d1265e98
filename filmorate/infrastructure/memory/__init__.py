"""
Backend de stockage en memoire.

Alternative au backend SQLModel, selectionnee par FILMORATE_STORAGE_BACKEND=memory.
Toutes les tables vivent dans un InMemoryStore partage et protege par un verrou.
"""

from filmorate.infrastructure.memory.repositories import (
    InMemoryFilmRepository,
    InMemoryGenreRepository,
    InMemoryLikeRepository,
    InMemoryMpaRepository,
    InMemoryUserRepository,
)
from filmorate.infrastructure.memory.store import InMemoryStore

__all__ = [
    "InMemoryFilmRepository",
    "InMemoryGenreRepository",
    "InMemoryLikeRepository",
    "InMemoryMpaRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
