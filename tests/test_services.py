"""Unit tests for service layer with business logic validation."""
import pytest
from unittest.mock import MagicMock, Mock, patch

from sqlalchemy.exc import IntegrityError

from repositories.base_repository_impl import InstanceNotFoundError
from repositories.category_repository import CategoryRepository
from schemas.category_schema import CategorySchema
from services.category_service import CategoryService, DuplicateNameError


class TestCategoryService:
    """Tests for CategoryService."""

    def test_get_all_categories(self, db_session_factory, seeded_db):
        """Test getting all categories."""
        service = CategoryService(db_session_factory())
        result = service.get_all()

        assert [c.name for c in result] == ["Electronics", "Books"]
        assert all(isinstance(c, CategorySchema) for c in result)

    def test_get_all_empty_store_raises(self, db_session_factory):
        service = CategoryService(db_session_factory())

        with pytest.raises(InstanceNotFoundError):
            service.get_all()

    def test_get_all_page_past_end_is_empty(self, db_session_factory, seeded_db):
        service = CategoryService(db_session_factory())

        assert service.get_all(skip=10) == []

    def test_get_one_category(self, db_session_factory, seeded_db):
        """Test getting a single category."""
        service = CategoryService(db_session_factory())
        category = seeded_db["category"]

        result = service.get_one(category.id_key)

        assert result.id_key == category.id_key
        assert result.name == "Electronics"

    def test_get_one_not_found(self, db_session_factory):
        service = CategoryService(db_session_factory())

        with pytest.raises(InstanceNotFoundError):
            service.get_one(999)

    def test_get_by_name(self, db_session_factory, seeded_db):
        service = CategoryService(db_session_factory())

        result = service.get_by_name("Books")

        assert result.id_key == seeded_db["other_category"].id_key

    def test_get_by_name_strips_whitespace(self, db_session_factory, seeded_db):
        service = CategoryService(db_session_factory())

        with pytest.raises(DuplicateNameError):
            service.save(CategorySchema(name=" Books "))
        result = service.get_by_name(" Books ")

        assert result.id_key == seeded_db["other_category"].id_key

    def test_get_by_name_not_found(self, db_session_factory, seeded_db):
        service = CategoryService(db_session_factory())

        with pytest.raises(InstanceNotFoundError):
            service.get_by_name("Music")

    def test_save_category(self, db_session_factory):
        """Test saving a new category."""
        service = CategoryService(db_session_factory())
        schema = CategorySchema(name="Books")

        result = service.save(schema)

        assert result.id_key is not None
        assert result.name == "Books"
        assert service.get_one(result.id_key).name == "Books"
        assert service.get_by_name("Books").id_key == result.id_key

    def test_save_duplicate_name(self, db_session_factory, seeded_db):
        service = CategoryService(db_session_factory())

        with pytest.raises(DuplicateNameError) as exc_info:
            service.save(CategorySchema(name="Electronics"))

        assert exc_info.value.name == "Electronics"
        assert "Electronics" in str(exc_info.value)

    def test_save_strips_name_before_duplicate_check(self, db_session_factory, seeded_db):
        service = CategoryService(db_session_factory())

        with pytest.raises(DuplicateNameError):
            service.save(CategorySchema(name="  Electronics "))

    def test_update_category(self, db_session_factory, seeded_db):
        """Test updating a category."""
        service = CategoryService(db_session_factory())
        category = seeded_db["category"]
        schema = CategorySchema(name="Updated Electronics")

        result = service.update(category.id_key, schema)

        assert result.id_key == category.id_key
        assert result.name == "Updated Electronics"
        assert service.get_by_name("Updated Electronics").id_key == category.id_key

    def test_update_keeps_own_name(self, db_session_factory, seeded_db):
        service = CategoryService(db_session_factory())
        category = seeded_db["category"]

        result = service.update(category.id_key, CategorySchema(name="Electronics"))

        assert result.name == "Electronics"

    def test_update_to_name_of_other_category(self, db_session_factory, seeded_db):
        service = CategoryService(db_session_factory())
        category = seeded_db["category"]

        with pytest.raises(DuplicateNameError):
            service.update(category.id_key, CategorySchema(name="Books"))

        assert service.get_one(category.id_key).name == "Electronics"

    def test_update_not_found(self, db_session_factory, seeded_db):
        service = CategoryService(db_session_factory())

        with pytest.raises(InstanceNotFoundError):
            service.update(999, CategorySchema(name="Music"))

    def test_update_ignores_id_in_payload(self, db_session_factory, seeded_db):
        service = CategoryService(db_session_factory())
        category = seeded_db["category"]

        result = service.update(category.id_key, CategorySchema(id_key=999, name="Gadgets"))

        assert result.id_key == category.id_key

    def test_delete_category(self, db_session_factory, seeded_db):
        """Test deleting a category."""
        service = CategoryService(db_session_factory())
        schema = CategorySchema(name="Temporary")
        saved = service.save(schema)

        service.delete(saved.id_key)

        with pytest.raises(InstanceNotFoundError):
            service.get_one(saved.id_key)
        assert "Temporary" not in [c.name for c in service.get_all()]

    def test_delete_not_found(self, db_session_factory, seeded_db):
        service = CategoryService(db_session_factory())

        with pytest.raises(InstanceNotFoundError):
            service.delete(999)

    def test_delete_last_category_empties_list(self, db_session_factory):
        service = CategoryService(db_session_factory())
        saved = service.save(CategorySchema(name="Only"))

        service.delete(saved.id_key)

        with pytest.raises(InstanceNotFoundError):
            service.get_all()


class TestCategoryServiceConstraintRace:
    """A concurrent writer can take the name between the check and the flush."""

    def test_save_integrity_error_becomes_duplicate(self):
        session = MagicMock()
        service = CategoryService(session)
        error = IntegrityError("INSERT INTO categories", {}, Exception("UNIQUE constraint failed"))

        with patch.object(CategoryRepository, "exists_by_name", return_value=False), \
             patch.object(CategoryRepository, "save", side_effect=error):
            with pytest.raises(DuplicateNameError) as exc_info:
                service.save(CategorySchema(name="Books"))

        assert exc_info.value.__cause__ is error
        session.begin_nested.assert_called_once()
        session.rollback.assert_not_called()

    def test_update_integrity_error_becomes_duplicate(self):
        session = MagicMock()
        service = CategoryService(session)
        current = Mock(id_key=1)
        current.name = "Electronics"
        error = IntegrityError("UPDATE categories", {}, Exception("UNIQUE constraint failed"))

        with patch.object(CategoryRepository, "find", return_value=current), \
             patch.object(CategoryRepository, "exists_by_name", return_value=False), \
             patch.object(CategoryRepository, "update", side_effect=error):
            with pytest.raises(DuplicateNameError):
                service.update(1, CategorySchema(name="Books"))

        session.begin_nested.assert_called_once()
        session.rollback.assert_not_called()

    def test_rejected_duplicate_keeps_earlier_writes(self, db_session_factory):
        session = db_session_factory()
        service = CategoryService(session)
        service.save(CategorySchema(name="Books"))
        service.save(CategorySchema(name="Toys"))

        with patch.object(CategoryRepository, "exists_by_name", return_value=False):
            with pytest.raises(DuplicateNameError):
                service.save(CategorySchema(name="Toys"))
        session.commit()

        names = [c.name for c in CategoryService(db_session_factory()).get_all()]
        assert names == ["Books", "Toys"]

    def test_rejected_rename_leaves_row_unchanged(self, db_session_factory):
        session = db_session_factory()
        service = CategoryService(session)
        books = service.save(CategorySchema(name="Books"))
        service.save(CategorySchema(name="Toys"))

        with patch.object(CategoryRepository, "exists_by_name", return_value=False):
            with pytest.raises(DuplicateNameError):
                service.update(books.id_key, CategorySchema(name="Toys"))

        assert service.get_one(books.id_key).name == "Books"
