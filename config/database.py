"""Database engine, session factory and FastAPI session dependency."""
import logging
import os
from typing import Generator

from dotenv import load_dotenv
from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL
from sqlalchemy.orm import Session, sessionmaker

from models.base_model import base as Base
# Registers every table on Base.metadata.
from models.category import CategoryModel  # noqa: F401

logger = logging.getLogger(__name__)

load_dotenv()


def get_database_url() -> str:
    """DATABASE_URL wins; otherwise build a PostgreSQL URL from the POSTGRES_* variables."""
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        return database_url

    return URL.create(
        "postgresql+psycopg2",
        username=os.getenv("POSTGRES_USER", "postgres"),
        password=os.getenv("POSTGRES_PASSWORD", "postgres"),
        host=os.getenv("POSTGRES_HOST", "localhost"),
        port=int(os.getenv("POSTGRES_PORT", "5432")),
        database=os.getenv("POSTGRES_DB", "categories"),
    ).render_as_string(hide_password=False)


def _engine_options(database_url: str) -> dict:
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}

    # Sized per uvicorn worker
    return {
        "pool_size": int(os.getenv("DB_POOL_SIZE", "50")),
        "max_overflow": int(os.getenv("DB_MAX_OVERFLOW", "100")),
        "pool_timeout": int(os.getenv("DB_POOL_TIMEOUT", "30")),
        "pool_recycle": int(os.getenv("DB_POOL_RECYCLE", "3600")),
        "pool_pre_ping": True,
    }


DATABASE_URL = get_database_url()

engine = create_engine(DATABASE_URL, echo=False, **_engine_options(DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a session for one request; commit on success, roll back on any error."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception as e:
        logger.debug(f"Rolling back session after {type(e).__name__}")
        db.rollback()
        raise
    finally:
        db.close()


def create_tables():
    """Create missing tables directly, for local runs without Alembic."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")


def check_connection() -> bool:
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False
