"""Seed categories from categories.json straight into the database."""
import os
import sys

from dotenv import load_dotenv

# Add the project root to the Python path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config.database import SessionLocal  # noqa: E402
from schemas.category_schema import CategorySchema  # noqa: E402
from scripts.upload_via_api import load_category_names  # noqa: E402
from services.category_service import CategoryService, DuplicateNameError  # noqa: E402


def upload_data(names=None) -> int:
    """Create every missing category in one transaction; returns how many were created."""
    load_dotenv()
    names = names if names is not None else load_category_names()

    created = 0
    with SessionLocal() as db:
        service = CategoryService(db)
        for name in names:
            try:
                service.save(CategorySchema(name=name))
                created += 1
                print(f"Successfully created category: {name}")
            except DuplicateNameError:
                print(f"Category '{name}' already exists. Skipping.")
        db.commit()

    print(f"\nUploaded {created} of {len(names)} categories.")
    return created


if __name__ == "__main__":
    try:
        upload_data()
    except FileNotFoundError:
        print("Error: categories.json not found in the project root.")
        sys.exit(1)
