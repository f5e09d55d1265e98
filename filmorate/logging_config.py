"""
Configuration du logging de Filmorate via loguru.

Deux sorties, parametrees par les Settings (FILMORATE_LOG_*) :
- console : coloree, au niveau log_level
- fichier : une ligne JSON par evenement, avec rotation et retention

Les loggers de la bibliotheque standard utilises par uvicorn et SQLAlchemy
sont rediriges vers loguru, pour que les acces HTTP et les erreurs du serveur
arrivent dans les memes sorties que les logs applicatifs.
"""

import logging
import sys

from loguru import logger

from filmorate.config import Settings

# Loggers standard rediriges vers loguru
INTERCEPTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine")


class InterceptHandler(logging.Handler):
    """Transmet les LogRecord de la bibliotheque standard a loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Remonte jusqu'a l'appelant reel, hors du module logging
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _intercept_standard_logging(level: str) -> None:
    handler = InterceptHandler()
    for name in INTERCEPTED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [handler]
        std_logger.propagate = False
        std_logger.setLevel(logging.INFO)
    # Les requetes SQL (niveau INFO de SQLAlchemy) ne sont tracees qu'en DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if level == "DEBUG" else logging.WARNING
    )


def configure_logging(settings: Settings) -> None:
    """Configure les sorties loguru depuis les Settings.

    Peut etre rappelee : les handlers precedents sont remplaces.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=settings.log_level,
        format=(
            "<green>{time:HH:mm:ss}</green> "
            "<level>{level: <8}</level> "
            "<cyan>{name}</cyan> | <level>{message}</level>"
        ),
        colorize=True,
    )

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    _intercept_standard_logging(settings.log_level)

    logger.debug(
        "Logging configure",
        log_file=str(settings.log_file),
        log_level=settings.log_level,
        storage=settings.storage_backend,
    )
