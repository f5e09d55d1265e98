"""
Business entities representing core domain concepts.

Exports:
- Film: Film aggregate with its MPA rating and genres
- FilmUpdate: Partial film update
- Genre: Genre reference entry
- Mpa: MPA rating classification reference entry
- User: User aggregate with its friend ids
- UserUpdate: Partial user update
"""

from filmorate.core.entities.film import Film, FilmUpdate, Genre, Mpa
from filmorate.core.entities.user import User, UserUpdate

__all__ = [
    "Film",
    "FilmUpdate",
    "Genre",
    "Mpa",
    "User",
    "UserUpdate",
]
