"""
Erreurs du domaine Filmorate.

Chaque erreur correspond a une categorie visible par l'appelant :
- NotFoundError : film, utilisateur, genre ou MPA inexistant (404)
- DuplicateError : violation d'unicite ou relation en double (400)
- ValidationError : entree structurellement invalide (400)

Toute autre exception est consideree comme une erreur interne (500).
"""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class FieldViolation:
    """Violation d'une regle de validation sur un champ."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class FilmorateError(Exception):
    """Base exception for the application"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(FilmorateError):
    pass


class DuplicateError(FilmorateError):
    pass


class ValidationError(FilmorateError):
    """Entree invalide, avec la liste des violations par champ (eventuellement vide)."""

    def __init__(
        self, message: str, violations: Iterable[FieldViolation] = ()
    ) -> None:
        super().__init__(message)
        self.violations = list(violations)

    @classmethod
    def from_violations(cls, violations: Iterable[FieldViolation]) -> "ValidationError":
        violations = list(violations)
        message = "Erreurs de validation: " + "; ".join(str(v) for v in violations)
        return cls(message, violations)
