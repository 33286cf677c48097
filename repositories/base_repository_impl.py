"""SQLAlchemy implementation of the repository contract."""
import logging
from typing import Any, Dict, List, Type

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.base_model import BaseModel
from repositories.base_repository import BaseRepository

logger = logging.getLogger(__name__)


class InstanceNotFoundError(Exception):
    """Raised when no row matches the requested key."""

    def __init__(self, message: str = "Instance not found"):
        self.message = message
        super().__init__(message)


class BaseRepositoryImpl(BaseRepository):
    """
    Generic repository backed by a SQLAlchemy session.

    Writes are flushed, never committed: the owner of the session (the request
    dependency, a script or a test) decides when the transaction ends.
    """

    def __init__(self, model: Type[BaseModel], session: Session):
        self._model = model
        self._session = session

    @property
    def model(self) -> Type[BaseModel]:
        return self._model

    @property
    def session(self) -> Session:
        return self._session

    def find(self, id_key: int) -> BaseModel:
        instance = self._session.get(self._model, id_key)
        if instance is None:
            raise InstanceNotFoundError(f"{self._model.__name__} with id {id_key} not found")
        return instance

    def find_all(self, skip: int = 0, limit: int = 100) -> List[BaseModel]:
        stmt = select(self._model).order_by(self._model.id_key).offset(skip).limit(limit)
        return list(self._session.scalars(stmt))

    def save(self, model: BaseModel) -> BaseModel:
        self._session.add(model)
        self._session.flush()
        self._session.refresh(model)
        logger.debug(f"Saved {model!r}")
        return model

    def update(self, id_key: int, changes: Dict[str, Any]) -> BaseModel:
        instance = self.find(id_key)
        columns = set(self._model.__table__.columns.keys())
        for key, value in changes.items():
            if key == "id_key" or key not in columns:
                continue
            setattr(instance, key, value)
        self._session.flush()
        self._session.refresh(instance)
        logger.debug(f"Updated {instance!r}")
        return instance

    def remove(self, id_key: int) -> None:
        instance = self.find(id_key)
        self._session.delete(instance)
        self._session.flush()
        logger.debug(f"Removed {self._model.__name__} with id {id_key}")

    def count(self) -> int:
        return self._session.scalar(select(func.count()).select_from(self._model))
