"""Category controller."""
from fastapi import Depends, status
from sqlalchemy.orm import Session

from config.database import get_db
from controllers.base_controller_impl import BaseControllerImpl
from schemas.category_schema import CategorySchema
from services.category_service import CategoryService


class CategoryController(BaseControllerImpl):
    """
    Controller for Category entity with CRUD operations.

    Adds lookup by name; a taken name answers 409 Conflict.
    """

    conflict_status = status.HTTP_409_CONFLICT

    def __init__(self):
        super().__init__(
            schema=CategorySchema,
            service_factory=lambda db: CategoryService(db),
            tags=["Categories"]
        )

    def _register_routes(self):
        @self.router.get("/name/{name}", response_model=self.schema, status_code=status.HTTP_200_OK)
        async def get_by_name(name: str, db: Session = Depends(get_db)):
            """Get a category by its exact name."""
            return self._call(lambda service: service.get_by_name(name), db)

        super()._register_routes()
