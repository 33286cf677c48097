"""Category payload; name bounds follow the ``categories.name`` column."""
from pydantic import Field

from models.category import CATEGORY_NAME_MAX_LENGTH
from schemas.base_schema import BaseSchema


class CategorySchema(BaseSchema):
    """A category as sent and returned by the API. ``name`` is unique across categories."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=CATEGORY_NAME_MAX_LENGTH,
        description="Category name, stripped of surrounding whitespace",
        examples=["Electronics"],
    )
