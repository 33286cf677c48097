"""FastAPI application factory."""
import logging

from fastapi import FastAPI, HTTPException, status

from config.database import check_connection
from config.logging_config import setup_logging
from controllers.category_controller import CategoryController

logger = logging.getLogger(__name__)


def create_fastapi_app() -> FastAPI:
    setup_logging()

    app = FastAPI(title="Category Service", version="1.0.0")

    app.include_router(CategoryController().router, prefix="/categories")

    @app.get("/health_check/", tags=["Health"])
    async def health_check():
        if not check_connection():
            raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Database unavailable")
        return {"status": "ok", "database": "ok"}

    logger.info("Category Service application created")
    return app
