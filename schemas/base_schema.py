"""Base schema shared by every API payload."""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    # Built straight from ORM rows; surrounding whitespace is dropped before length checks.
    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)

    id_key: Optional[int] = None
