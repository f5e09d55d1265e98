"""
Implementation SQLModel du referentiel des classifications MPA.
"""

from typing import Optional

from sqlmodel import Session, select

from filmorate.core.entities import Mpa
from filmorate.core.ports.repositories import IMpaRepository
from filmorate.infrastructure.persistence.models import MpaModel


class SQLModelMpaRepository(IMpaRepository):
    """Repository SQLModel (lecture seule) pour les classifications MPA."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, model: MpaModel) -> Mpa:
        return Mpa(id=model.id, name=model.name)

    def get_all(self) -> list[Mpa]:
        statement = select(MpaModel).order_by(MpaModel.id)
        return [self._to_entity(model) for model in self._session.exec(statement).all()]

    def find_by_id(self, mpa_id: int) -> Optional[Mpa]:
        model = self._session.get(MpaModel, mpa_id)
        if model:
            return self._to_entity(model)
        return None

    def exists_by_id(self, mpa_id: int) -> bool:
        return self._session.get(MpaModel, mpa_id) is not None
