"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour le CLI et l'API web.
Le backend de stockage (SQLModel ou memoire) est choisi a la composition
d'apres Settings.storage_backend.
"""

from dependency_injector import containers, providers
from sqlmodel import Session

from .config import Settings
from .infrastructure.memory import (
    InMemoryFilmRepository,
    InMemoryGenreRepository,
    InMemoryLikeRepository,
    InMemoryMpaRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from .infrastructure.persistence.database import create_engine_for_url, init_db
from .infrastructure.persistence.repositories import (
    SQLModelFilmRepository,
    SQLModelGenreRepository,
    SQLModelLikeRepository,
    SQLModelMpaRepository,
    SQLModelUserRepository,
)
from .services import FilmService, GenreService, LikeService, MpaService, UserService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois (backend sql)
        film_service = container.film_service()

    La base et le backend suivent la config ; pour les tests on la surcharge :
        container.config.override(providers.Object(Settings(storage_backend="memory")))
        container.config.override(providers.Object(Settings(database_url="sqlite:////tmp/t.db")))

    La session SQL est propre au contexte courant : l'API web la ferme et
    la reinitialise en fin de requete (voir web/deps.py).
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine - construit une fois depuis l'URL de la configuration
    engine = providers.Singleton(create_engine_for_url, config.provided.database_url)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db, engine=engine)

    # Session - une par contexte (requete HTTP), partagee par les repositories
    session = providers.ContextLocalSingleton(Session, engine)

    # Etat du backend memoire - partage par tous les repositories memoire
    memory_store = providers.Singleton(InMemoryStore)

    # Repositories - selection du backend d'apres la configuration
    film_repository = providers.Selector(
        config.provided.storage_backend,
        sql=providers.Factory(SQLModelFilmRepository, session=session),
        memory=providers.Factory(InMemoryFilmRepository, store=memory_store),
    )
    user_repository = providers.Selector(
        config.provided.storage_backend,
        sql=providers.Factory(SQLModelUserRepository, session=session),
        memory=providers.Factory(InMemoryUserRepository, store=memory_store),
    )
    like_repository = providers.Selector(
        config.provided.storage_backend,
        sql=providers.Factory(SQLModelLikeRepository, session=session),
        memory=providers.Factory(InMemoryLikeRepository, store=memory_store),
    )
    genre_repository = providers.Selector(
        config.provided.storage_backend,
        sql=providers.Factory(SQLModelGenreRepository, session=session),
        memory=providers.Factory(InMemoryGenreRepository, store=memory_store),
    )
    mpa_repository = providers.Selector(
        config.provided.storage_backend,
        sql=providers.Factory(SQLModelMpaRepository, session=session),
        memory=providers.Factory(InMemoryMpaRepository, store=memory_store),
    )

    # Services - Factory, construits a chaque requete
    genre_service = providers.Factory(GenreService, genre_repo=genre_repository)
    mpa_service = providers.Factory(MpaService, mpa_repo=mpa_repository)
    like_service = providers.Factory(LikeService, like_repo=like_repository)
    user_service = providers.Factory(UserService, user_repo=user_repository)

    film_service = providers.Factory(
        FilmService,
        film_repo=film_repository,
        user_service=user_service,
        mpa_service=mpa_service,
        genre_service=genre_service,
        like_service=like_service,
    )
