"""Abstract repository contract."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Type

from models.base_model import BaseModel


class BaseRepository(ABC):
    """Store operations every repository exposes over one model."""

    @property
    @abstractmethod
    def model(self) -> Type[BaseModel]:
        pass

    @abstractmethod
    def find(self, id_key: int) -> BaseModel:
        pass

    @abstractmethod
    def find_all(self, skip: int = 0, limit: int = 100) -> List[BaseModel]:
        pass

    @abstractmethod
    def save(self, model: BaseModel) -> BaseModel:
        pass

    @abstractmethod
    def update(self, id_key: int, changes: Dict[str, Any]) -> BaseModel:
        pass

    @abstractmethod
    def remove(self, id_key: int) -> None:
        pass

    @abstractmethod
    def count(self) -> int:
        pass
