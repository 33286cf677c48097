"""Base controller implementation module with FastAPI dependency injection."""
import logging
from typing import Any, Callable, Dict, List, Set, Type, Union

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from starlette.responses import Response

from config.database import get_db
from controllers.base_controller import BaseController
from repositories.base_repository_impl import InstanceNotFoundError
from schemas.base_schema import BaseSchema
from services.base_service import BaseService, ServiceConflictError

logger = logging.getLogger(__name__)


class BaseControllerImpl(BaseController):
    """
    Base controller implementation using FastAPI dependency injection.

    This class creates standard CRUD endpoints and properly manages database sessions.
    Service errors are turned into HTTP errors: missing rows become 404 and
    conflicting writes (``ServiceConflictError``) become ``conflict_status``.
    """

    conflict_status = status.HTTP_400_BAD_REQUEST

    def __init__(
        self,
        schema: Type[BaseSchema],
        service_factory: Callable[[Session], BaseService],
        tags: List[str] = None,
        exclude_on_get: Union[Set[str], Dict[str, Any]] = None,
    ):
        """
        Initialize the controller with dependency injection support.

        Args:
            schema: The Pydantic schema class for validation
            service_factory: A callable that creates a service instance given a DB session
            tags: Optional list of tags for API documentation
            exclude_on_get: A set or dict of field names to exclude from the response on get requests
        """
        self.schema = schema
        self.service_factory = service_factory
        self.router = APIRouter(tags=tags or [])
        self.exclude_on_get = exclude_on_get

        self._register_routes()

    def _register_routes(self):
        """Register all CRUD routes with proper dependency injection."""

        @self.router.get(
            "/",
            response_model=List[self.schema],
            status_code=status.HTTP_200_OK,
            response_model_exclude=self.exclude_on_get,
        )
        async def get_all(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
            """Get all records with pagination."""
            return self._call(lambda service: service.get_all(skip=skip, limit=limit), db)

        @self.router.get(
            "/{id_key}",
            response_model=self.schema,
            status_code=status.HTTP_200_OK,
            response_model_exclude=self.exclude_on_get,
        )
        async def get_one(id_key: int, db: Session = Depends(get_db)):
            """Get a single record by id."""
            return self._call(lambda service: service.get_one(id_key), db)

        @self.router.post("/", response_model=self.schema, status_code=status.HTTP_201_CREATED)
        async def create(schema_in: self.schema, db: Session = Depends(get_db)):
            """Create a new record."""
            return self._call(lambda service: service.save(schema_in), db)

        @self.router.put("/{id_key}", response_model=self.schema, status_code=status.HTTP_200_OK)
        async def update(id_key: int, schema_in: self.schema, db: Session = Depends(get_db)):
            """Update an existing record."""
            return self._call(lambda service: service.update(id_key, schema_in), db)

        @self.router.delete("/{id_key}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
        async def delete(id_key: int, db: Session = Depends(get_db)):
            """Delete a record."""
            self._call(lambda service: service.delete(id_key), db)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

        logger.debug(f"{type(self).__name__}: Registered {len(self.router.routes)} routes.")

    def _call(self, operation: Callable[[BaseService], Any], db: Session):
        service = self.service_factory(db)
        try:
            return operation(service)
        except InstanceNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
        except ServiceConflictError as e:
            raise HTTPException(status_code=self.conflict_status, detail=str(e))
