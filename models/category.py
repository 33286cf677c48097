from sqlalchemy import Column, String

from models.base_model import BaseModel

CATEGORY_NAME_MAX_LENGTH = 100


class CategoryModel(BaseModel):
    __tablename__ = "categories"

    name = Column(String(CATEGORY_NAME_MAX_LENGTH), unique=True, index=True, nullable=False)

    def __repr__(self):
        return f"<CategoryModel id_key={self.id_key} name={self.name!r}>"
