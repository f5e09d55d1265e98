"""
Couche application : services metier de Filmorate.

- FilmService : films, likes, classement des films populaires
- UserService : utilisateurs et amities
- LikeService : relation film x utilisateur
- GenreService / MpaService : referentiels en lecture seule
"""

from filmorate.services.film_service import FilmService
from filmorate.services.like_service import LikeService
from filmorate.services.reference_service import GenreService, MpaService
from filmorate.services.user_service import UserService

__all__ = [
    "FilmService",
    "GenreService",
    "LikeService",
    "MpaService",
    "UserService",
]
