"""
Dependances partagees des routes.

Les services sont obtenus depuis le Container DI attache a l'application
(app.state.container), une instance fraiche par requete. Avec le backend sql,
les repositories d'une requete partagent une session, fermee par
close_request_session() une fois la reponse produite.

Les dependances sont asynchrones : elles s'executent dans le contexte de la
requete, celui ou vit la session du container.
"""

from collections.abc import AsyncIterator

from fastapi import Request

from filmorate.config import Settings
from filmorate.services import FilmService, GenreService, MpaService, UserService


async def close_request_session(request: Request) -> AsyncIterator[None]:
    container = request.app.state.container
    try:
        yield
    finally:
        if container.config().uses_database:
            container.session().close()
            container.session.reset()


async def get_settings(request: Request) -> Settings:
    return request.app.state.container.config()


async def get_film_service(request: Request) -> FilmService:
    return request.app.state.container.film_service()


async def get_user_service(request: Request) -> UserService:
    return request.app.state.container.user_service()


async def get_genre_service(request: Request) -> GenreService:
    return request.app.state.container.genre_service()


async def get_mpa_service(request: Request) -> MpaService:
    return request.app.state.container.mpa_service()
