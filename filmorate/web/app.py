"""
Application FastAPI de Filmorate.

Initialise l'application web avec le Container DI, enregistre les handlers
d'erreurs et monte les routes.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from loguru import logger

from ..container import Container
from .deps import close_request_session
from .errors import register_exception_handlers
from .routes.films import router as films_router
from .routes.references import router as references_router
from .routes.users import router as users_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise la base au demarrage (backend sql) et libere les ressources a l'arret."""
    container: Container = app.state.container
    settings = container.config()
    if settings.uses_database:
        container.database.init()
    logger.info(f"Filmorate demarre (stockage : {settings.storage_backend})")
    yield
    container.shutdown_resources()
    if settings.uses_database:
        container.engine().dispose()


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application.

    Args:
        container: Container DI a utiliser (un nouveau par defaut). Les tests
            fournissent un container dont la config selectionne le backend
            memoire ou une base SQLite temporaire.
    """
    app = FastAPI(
        title="Filmorate",
        lifespan=lifespan,
        dependencies=[Depends(close_request_session)],
    )
    app.state.container = container or Container()

    register_exception_handlers(app)

    # Routes
    app.include_router(films_router)
    app.include_router(users_router)
    app.include_router(references_router)
    return app


app = create_app()
