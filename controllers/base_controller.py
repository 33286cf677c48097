"""Abstract controller contract."""
from abc import ABC, abstractmethod

from fastapi import APIRouter


class BaseController(ABC):
    router: APIRouter

    @abstractmethod
    def _register_routes(self):
        """Attach the controller's endpoints to ``self.router``."""
