"""
Validateurs explicites des entrees.

Chaque fonction recoit une entite (ou une mise a jour partielle) et retourne
la liste des violations par champ. Une liste vide signifie que l'entree est valide.
ensure_valid() transforme une liste non vide en ValidationError.

Regles :
- Film : nom non vide, description <= 200 caracteres, date de sortie entre
  le 28/12/1895 et aujourd'hui, duree positive, MPA obligatoire, ids positifs
- Utilisateur : email valide, login non vide et sans espace, anniversaire
  pas dans le futur
"""

import re
from datetime import date
from typing import Iterable, Optional

from email_validator import EmailNotValidError, validate_email

from filmorate.core.entities import Film, FilmUpdate, User, UserUpdate
from filmorate.core.exceptions import FieldViolation, ValidationError

MIN_RELEASE_DATE = date(1895, 12, 28)
MAX_DESCRIPTION_LENGTH = 200

_WHITESPACE_PATTERN = re.compile(r"\s")


def _today(today: Optional[date]) -> date:
    return today if today is not None else date.today()


def _check_identifier(
    violations: list[FieldViolation], value: Optional[int], required: bool
) -> None:
    # A la creation, l'id recu est ignore (attribue par le store)
    if not required:
        return
    if value is None:
        violations.append(FieldViolation("id", "l'id est obligatoire"))
    elif value <= 0:
        violations.append(FieldViolation("id", "l'id doit etre positif"))


def _check_film_fields(
    violations: list[FieldViolation],
    name: Optional[str],
    description: Optional[str],
    release_date: Optional[date],
    duration: Optional[int],
    today: date,
) -> None:
    if name is not None and not name.strip():
        violations.append(FieldViolation("name", "le nom du film ne peut pas etre vide"))

    if description is not None and len(description) > MAX_DESCRIPTION_LENGTH:
        violations.append(
            FieldViolation(
                "description",
                f"la description ne doit pas depasser {MAX_DESCRIPTION_LENGTH} caracteres",
            )
        )

    if release_date is not None:
        if release_date < MIN_RELEASE_DATE:
            violations.append(
                FieldViolation(
                    "releaseDate",
                    f"la date de sortie ne peut pas preceder le {MIN_RELEASE_DATE.isoformat()}",
                )
            )
        if release_date > today:
            violations.append(
                FieldViolation("releaseDate", "la date de sortie ne peut pas etre dans le futur")
            )

    if duration is not None and duration <= 0:
        violations.append(FieldViolation("duration", "la duree doit etre positive"))


def validate_film(
    film: Film, today: Optional[date] = None, require_id: bool = False
) -> list[FieldViolation]:
    """
    Valide un film complet.

    Args :
        film : Film a valider
        today : Date de reference (aujourd'hui par defaut)
        require_id : True pour un remplacement, ou l'id designe le film cible
    """
    violations: list[FieldViolation] = []
    _check_identifier(violations, film.id, require_id)

    if film.name is None:
        violations.append(FieldViolation("name", "le nom du film ne peut pas etre vide"))
    if film.release_date is None:
        violations.append(FieldViolation("releaseDate", "la date de sortie est obligatoire"))
    if film.duration is None:
        violations.append(FieldViolation("duration", "la duree est obligatoire"))

    _check_film_fields(
        violations,
        film.name,
        film.description,
        film.release_date,
        film.duration,
        _today(today),
    )

    if film.mpa is None:
        violations.append(FieldViolation("mpa", "la classification MPA est obligatoire"))
    elif film.mpa.id <= 0:
        violations.append(FieldViolation("mpa.id", "l'id MPA doit etre positif"))

    for genre in film.genres or []:
        if genre.id <= 0:
            violations.append(FieldViolation("genres.id", "l'id de genre doit etre positif"))
            break

    return violations


def validate_film_update(
    update: FilmUpdate, today: Optional[date] = None
) -> list[FieldViolation]:
    """Valide une mise a jour partielle de film (seuls les champs fournis)."""
    violations: list[FieldViolation] = []
    _check_identifier(violations, update.id, required=True)
    _check_film_fields(
        violations,
        update.name,
        update.description,
        update.release_date,
        update.duration,
        _today(today),
    )
    return violations


def _check_user_fields(
    violations: list[FieldViolation],
    email: Optional[str],
    login: Optional[str],
    birthday: Optional[date],
    today: date,
) -> None:
    if email is not None:
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            violations.append(FieldViolation("email", "l'email doit etre valide"))

    if login is not None:
        if not login.strip():
            violations.append(FieldViolation("login", "le login ne peut pas etre vide"))
        elif _WHITESPACE_PATTERN.search(login):
            violations.append(
                FieldViolation("login", "le login ne doit pas contenir d'espaces")
            )

    if birthday is not None and birthday > today:
        violations.append(
            FieldViolation("birthday", "la date de naissance ne peut pas etre dans le futur")
        )


def validate_user(
    user: User, today: Optional[date] = None, require_id: bool = False
) -> list[FieldViolation]:
    """Valide un utilisateur complet (creation, ou remplacement avec require_id)."""
    violations: list[FieldViolation] = []
    _check_identifier(violations, user.id, require_id)

    if not user.email:
        violations.append(FieldViolation("email", "l'email est obligatoire"))
    if user.login is None:
        violations.append(FieldViolation("login", "le login ne peut pas etre vide"))

    _check_user_fields(
        violations,
        user.email or None,
        user.login,
        user.birthday,
        _today(today),
    )
    return violations


def validate_user_update(
    update: UserUpdate, today: Optional[date] = None
) -> list[FieldViolation]:
    """Valide une mise a jour partielle d'utilisateur."""
    violations: list[FieldViolation] = []
    _check_identifier(violations, update.id, required=True)
    _check_user_fields(
        violations,
        update.email or None,
        update.login or None,
        update.birthday,
        _today(today),
    )
    return violations


def ensure_valid(violations: Iterable[FieldViolation]) -> None:
    """Leve ValidationError si au moins une violation est presente."""
    violations = list(violations)
    if violations:
        raise ValidationError.from_violations(violations)
