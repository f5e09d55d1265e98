"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin du stockage sans specifier comment ces besoins
sont satisfaits.

Ports repository :
- IFilmRepository : Stockage des films et de leurs genres
- IUserRepository : Stockage des utilisateurs et des amities
- ILikeRepository : Relation film x utilisateur
- IGenreRepository : Referentiel des genres (lecture seule)
- IMpaRepository : Referentiel des classifications MPA (lecture seule)
"""

from filmorate.core.ports.repositories import (
    IFilmRepository,
    IGenreRepository,
    ILikeRepository,
    IMpaRepository,
    IUserRepository,
)

__all__ = [
    "IFilmRepository",
    "IGenreRepository",
    "ILikeRepository",
    "IMpaRepository",
    "IUserRepository",
]
