"""Generic CRUD service translating between schemas and models."""
from typing import List, Type

from sqlalchemy.orm import Session

from models.base_model import BaseModel
from repositories.base_repository_impl import BaseRepositoryImpl
from schemas.base_schema import BaseSchema
from services.base_service import BaseService


class BaseServiceImpl(BaseService):
    """
    Plain CRUD over one repository.

    Args:
        repository_class: Repository type, instantiated with the session
        model: SQLAlchemy model the repository persists
        schema: Pydantic schema returned to callers
        db: Session owned by the caller
    """

    def __init__(
        self,
        repository_class: Type[BaseRepositoryImpl],
        model: Type[BaseModel],
        schema: Type[BaseSchema],
        db: Session,
    ):
        self._repository = repository_class(db)
        self._model = model
        self._schema = schema

    @property
    def repository(self) -> BaseRepositoryImpl:
        return self._repository

    def get_all(self, skip: int = 0, limit: int = 100) -> List[BaseSchema]:
        return [self._to_schema(instance) for instance in self._repository.find_all(skip=skip, limit=limit)]

    def get_one(self, id_key: int) -> BaseSchema:
        return self._to_schema(self._repository.find(id_key))

    def save(self, schema: BaseSchema) -> BaseSchema:
        return self._to_schema(self._repository.save(self._to_model(schema)))

    def update(self, id_key: int, schema: BaseSchema) -> BaseSchema:
        changes = schema.model_dump(exclude_unset=True, exclude={"id_key"})
        return self._to_schema(self._repository.update(id_key, changes))

    def delete(self, id_key: int) -> None:
        self._repository.remove(id_key)

    def _to_model(self, schema: BaseSchema) -> BaseModel:
        return self._model(**schema.model_dump(exclude={"id_key"}))

    def _to_schema(self, instance: BaseModel) -> BaseSchema:
        return self._schema.model_validate(instance)
