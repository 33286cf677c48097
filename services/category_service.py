"""Category service enforcing unique category names."""
import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.category import CategoryModel
from repositories.base_repository_impl import InstanceNotFoundError
from repositories.category_repository import CategoryRepository
from schemas.category_schema import CategorySchema
from services.base_service import ServiceConflictError
from services.base_service_impl import BaseServiceImpl

logger = logging.getLogger(__name__)


class DuplicateNameError(ServiceConflictError):
    """Raised when a category name is already taken by another category."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"A category with the name {name} already exists.")


class CategoryService(BaseServiceImpl):
    """
    CRUD for categories.

    Names are unique across all categories. The check runs before every write,
    and a unique-constraint violation raised by the database (two writers
    racing on the same name) is reported the same way. Each write runs in a
    savepoint, so a rejected row never discards the caller's earlier work.
    """

    def __init__(self, db: Session):
        super().__init__(
            repository_class=CategoryRepository,
            model=CategoryModel,
            schema=CategorySchema,
            db=db,
        )

    def get_all(self, skip: int = 0, limit: int = 100) -> List[CategorySchema]:
        """
        Return categories ordered by id.

        Raises:
            InstanceNotFoundError: the store holds no categories at all
        """
        categories = super().get_all(skip=skip, limit=limit)
        if not categories and self._repository.count() == 0:
            raise InstanceNotFoundError(
                "There are no categories in the database. Please add a category and try again."
            )
        return categories

    def get_by_name(self, name: str) -> CategorySchema:
        # Stored names are stripped on the way in.
        name = name.strip()
        category = self._repository.find_by_name(name)
        if category is None:
            raise InstanceNotFoundError(f"Category with name {name} not found")
        return self._to_schema(category)

    def save(self, schema: CategorySchema) -> CategorySchema:
        if self._repository.exists_by_name(schema.name):
            logger.warning(f"Rejected category creation, name already in use: {schema.name}")
            raise DuplicateNameError(schema.name)

        try:
            with self._repository.session.begin_nested():
                created = super().save(schema)
        except IntegrityError as e:
            self._raise_duplicate(schema.name, e)

        logger.info(f"Category created: id_key={created.id_key} name={created.name}")
        return created

    def update(self, id_key: int, schema: CategorySchema) -> CategorySchema:
        current = self._repository.find(id_key)

        # Keeping the current name is always allowed.
        if current.name != schema.name and self._repository.exists_by_name(schema.name, exclude_id=id_key):
            logger.warning(f"Rejected rename of category {id_key}, name already in use: {schema.name}")
            raise DuplicateNameError(schema.name)

        try:
            with self._repository.session.begin_nested():
                updated = super().update(id_key, schema)
        except IntegrityError as e:
            self._raise_duplicate(schema.name, e)

        logger.info(f"Category updated: id_key={id_key} name={updated.name}")
        return updated

    def delete(self, id_key: int) -> None:
        super().delete(id_key)
        logger.info(f"Category deleted: id_key={id_key}")

    def _raise_duplicate(self, name: str, error: IntegrityError):
        logger.warning(f"Unique constraint rejected category name {name}: {error.orig}")
        raise DuplicateNameError(name) from error
