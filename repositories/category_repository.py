"""Category repository."""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from models.category import CategoryModel
from repositories.base_repository_impl import BaseRepositoryImpl


class CategoryRepository(BaseRepositoryImpl):

    def __init__(self, session: Session):
        super().__init__(CategoryModel, session)

    def find_by_name(self, name: str) -> Optional[CategoryModel]:
        stmt = select(CategoryModel).where(CategoryModel.name == name)
        return self.session.scalars(stmt).first()

    def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """True when another category already uses ``name``; ``exclude_id`` skips the row being edited."""
        stmt = select(CategoryModel.id_key).where(CategoryModel.name == name)
        if exclude_id is not None:
            stmt = stmt.where(CategoryModel.id_key != exclude_id)
        return self.session.scalars(stmt).first() is not None
