from sqlalchemy import Column, Integer
from sqlalchemy.orm import declarative_base


base = declarative_base()


class BaseModel(base):
    """Abstract base for every table: integer surrogate key generated by the database."""

    __abstract__ = True

    id_key = Column(Integer, primary_key=True, autoincrement=True)

    def to_dict(self) -> dict:
        return {column.name: getattr(self, column.name) for column in self.__table__.columns}

    def __repr__(self):
        return f"<{type(self).__name__} id_key={self.id_key}>"
