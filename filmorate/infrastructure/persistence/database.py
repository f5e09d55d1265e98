"""
Configuration de la base de donnees pour Filmorate.

Ce module fournit :
- Engine SQLAlchemy construit depuis l'URL des Settings (FILMORATE_DATABASE_URL)
- Fonction d'initialisation des tables et des donnees de reference
- Detection des violations de cle etrangere

Pour SQLite, les cles etrangeres sont activees sur chaque connexion.
"""

from pathlib import Path

from loguru import logger
from sqlalchemy import Engine, event
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, create_engine

from filmorate.infrastructure.reference_data import GENRES, MPA_RATINGS


def create_engine_for_url(db_url: str) -> Engine:
    """
    Cree un engine pour l'URL donnee.

    Pour un fichier SQLite, le repertoire parent est cree si besoin et
    chaque connexion active PRAGMA foreign_keys.
    """
    connect_args = {}
    is_sqlite = db_url.startswith("sqlite")
    if is_sqlite:
        connect_args["check_same_thread"] = False
        if db_url.startswith("sqlite:///") and not db_url.startswith("sqlite:///:memory:"):
            db_path = Path(db_url.replace("sqlite:///", ""))
            db_path.parent.mkdir(exist_ok=True, parents=True)

    engine = create_engine(db_url, echo=False, connect_args=connect_args)

    if is_sqlite:

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def is_foreign_key_violation(error: IntegrityError) -> bool:
    """Vrai si l'erreur provient d'une cle etrangere (et non d'un doublon)."""
    return "FOREIGN KEY" in str(error.orig).upper()


def init_db(engine: Engine) -> None:
    """
    Initialise la base de donnees : tables et donnees de reference.

    Idempotent : les tables existantes et les references deja presentes
    sont conservees.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # Import des modeles pour enregistrer leurs metadonnees
    from filmorate.infrastructure.persistence import models

    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        for mpa_id, name in MPA_RATINGS:
            if session.get(models.MpaModel, mpa_id) is None:
                session.add(models.MpaModel(id=mpa_id, name=name))
        for genre_id, name in GENRES:
            if session.get(models.GenreModel, genre_id) is None:
                session.add(models.GenreModel(id=genre_id, name=name))
        session.commit()

    logger.debug("Base de donnees initialisee", url=str(engine.url))
