"""
Film catalog entities.

Entities representing films together with the reference data attached to them
(MPA rating classification and genres).
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass
class Mpa:
    """
    MPA rating classification (G, PG, PG-13, R, NC-17).

    Pre-seeded reference entry, read-only for the application.
    Incoming films usually carry only the id; the name is filled on lookup.
    """

    id: int
    name: Optional[str] = None


@dataclass
class Genre:
    """
    Genre tag attachable to a film (many-to-many).

    Pre-seeded reference entry, read-only for the application.
    """

    id: int
    name: Optional[str] = None


@dataclass
class Film:
    """
    Film aggregate.

    Composed from the films row, the joined MPA name and the ordered
    list of genres taken from the film_genres relation.

    Attributes:
        id: Store-assigned identifier
        name: Film title
        description: Short summary (200 characters max)
        release_date: Release date (not before 1895-12-28)
        duration: Runtime in minutes
        mpa: Rating classification
        genres: Genres, ascending id, no duplicates
    """

    id: Optional[int] = None
    name: str = ""
    description: Optional[str] = None
    release_date: Optional[date] = None
    duration: Optional[int] = None
    mpa: Optional[Mpa] = None
    genres: list[Genre] = field(default_factory=list)


@dataclass
class FilmUpdate:
    """
    Partial update of a film.

    Only the fields that are not None replace the stored values.
    MPA and genres are not part of a partial update.
    """

    id: int
    name: Optional[str] = None
    description: Optional[str] = None
    release_date: Optional[date] = None
    duration: Optional[int] = None
