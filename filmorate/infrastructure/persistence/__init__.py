"""
Module de persistance relationnelle pour Filmorate.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Construction de l'engine, initialisation du schema et des referentiels
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementations des ports de stockage

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from filmorate.infrastructure.persistence import create_engine_for_url, init_db

    engine = create_engine_for_url(settings.database_url)
    init_db(engine)  # Cree les tables et les references si necessaire
"""

from filmorate.infrastructure.persistence.database import (
    create_engine_for_url,
    init_db,
    is_foreign_key_violation,
)

__all__ = [
    "create_engine_for_url",
    "init_db",
    "is_foreign_key_violation",
]
