"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe FILMORATE_,
et peut optionnellement etre fournie via un fichier .env.

Le backend de stockage (SQL ou memoire) est choisi ici et applique par le container.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env a la racine du projet (parent de filmorate/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe FILMORATE_.
    Exemple : FILMORATE_STORAGE_BACKEND=memory
    """

    model_config = SettingsConfigDict(
        env_prefix="FILMORATE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de donnees
    database_url: str = Field(default="sqlite:///filmorate.db")

    # "sql" : SQLModel / SQLAlchemy, "memory" : dictionnaires proteges par un verrou
    storage_backend: Literal["sql", "memory"] = Field(default="sql")

    # Classement des films populaires
    popular_default_count: int = Field(default=10, ge=1)

    # Serveur HTTP
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=1, le=65535)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/filmorate.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Etend ~ vers le repertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def uses_database(self) -> bool:
        """Vrai si le backend relationnel est selectionne."""
        return self.storage_backend == "sql"
