"""Abstract service contract."""
from abc import ABC, abstractmethod
from typing import List

from schemas.base_schema import BaseSchema


class ServiceConflictError(ValueError):
    """A write was refused because it conflicts with data already stored."""


class BaseService(ABC):

    @abstractmethod
    def get_all(self, skip: int = 0, limit: int = 100) -> List[BaseSchema]:
        pass

    @abstractmethod
    def get_one(self, id_key: int) -> BaseSchema:
        pass

    @abstractmethod
    def save(self, schema: BaseSchema) -> BaseSchema:
        pass

    @abstractmethod
    def update(self, id_key: int, schema: BaseSchema) -> BaseSchema:
        pass

    @abstractmethod
    def delete(self, id_key: int) -> None:
        pass
