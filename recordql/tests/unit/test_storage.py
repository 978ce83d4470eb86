"""
Tests for the in-memory storage backend and shared cursor pagination.
"""

from types import SimpleNamespace

import pytest

from recordql.core.exceptions import PaginationError, RecordNotFoundError
from recordql.storage import InMemoryStorage, get_record_value
from recordql.testing import run

pytestmark = pytest.mark.unit


def _ids(connection):
    return [node["id"] for node in connection["nodes"]]


class TestPagination:
    @pytest.fixture
    def books(self, library_storage):
        return run(library_storage.get_all, None, "Book")

    def test_without_arguments(self, library_storage, books):
        connection = library_storage.apply_pagination(books, {})
        assert _ids(connection) == ["b1", "b2", "b3", "b4"]
        assert connection["count"] == 4
        assert connection["page_info"]["has_next_page"] is False
        assert connection["page_info"]["has_previous_page"] is False

    def test_first(self, library_storage, books):
        connection = library_storage.apply_pagination(books, {"first": 2})
        assert _ids(connection) == ["b1", "b2"]
        assert connection["count"] == 4
        assert connection["page_info"]["has_next_page"] is True
        assert connection["page_info"]["start_cursor"] == connection["edges"][0]["cursor"]
        assert connection["page_info"]["end_cursor"] == connection["edges"][1]["cursor"]

    def test_after_cursor(self, library_storage, books):
        first_page = library_storage.apply_pagination(books, {"first": 2})
        second_page = library_storage.apply_pagination(
            books, {"first": 2, "after": first_page["page_info"]["end_cursor"]}
        )
        assert _ids(second_page) == ["b3", "b4"]
        assert second_page["page_info"]["has_next_page"] is False

    def test_last(self, library_storage, books):
        connection = library_storage.apply_pagination(books, {"last": 1})
        assert _ids(connection) == ["b4"]
        assert connection["page_info"]["has_previous_page"] is True

    def test_none_arguments_are_ignored(self, library_storage, books):
        connection = library_storage.apply_pagination(
            books, {"first": None, "after": None, "unrelated": 3}
        )
        assert connection["count"] == 4
        assert len(connection["edges"]) == 4

    def test_empty_result(self, library_storage):
        connection = library_storage.apply_pagination([], {"first": 5})
        assert connection["edges"] == []
        assert connection["count"] == 0
        assert connection["page_info"]["start_cursor"] is None

    @pytest.mark.parametrize("value", [-1, 11, True, "2"])
    def test_invalid_page_size(self, library_storage, books, value):
        with pytest.raises(PaginationError) as exc_info:
            library_storage.apply_pagination(books, {"first": value})
        assert exc_info.value.argument == "first"
        assert exc_info.value.value == value

    def test_unbounded_page_size(self, books):
        storage = InMemoryStorage()
        connection = storage.apply_pagination(books, {"first": 1000})
        assert connection["count"] == 4


class TestInMemoryStorage:
    def test_get_by_id(self, library_storage):
        author = run(library_storage.get_by_id, None, "Author", "a2")
        assert author == {"id": "a2", "name": "Italo Calvino"}

    def test_get_by_id_missing(self, library_storage):
        with pytest.raises(RecordNotFoundError) as exc_info:
            run(library_storage.get_by_id, None, "Author", "nope")
        assert exc_info.value.type_name == "Author"
        assert exc_info.value.record_id == "nope"

    def test_get_all_unknown_type(self, library_storage):
        assert run(library_storage.get_all, None, "Magazine") == []

    def test_get_all_by_index(self, library_storage):
        books = run(library_storage.get_all_by_index, None, "Book", "a1", "authorId")
        assert [b["id"] for b in books] == ["b1", "b2", "b3"]

        assert run(library_storage.get_all_by_index, None, "Book", None, "authorId") == []

    def test_returned_records_are_copies(self, library_storage):
        author = run(library_storage.get_by_id, None, "Author", "a1")
        author["name"] = "Changed"
        assert run(library_storage.get_by_id, None, "Author", "a1")["name"] == "Ursula K. Le Guin"

    def test_create_assigns_id(self, library_storage):
        created = run(
            library_storage.create, None, "Author", {"id": "ignored", "name": "Borges"}
        )
        assert created["id"] != "ignored"
        assert created["name"] == "Borges"
        assert run(library_storage.get_by_id, None, "Author", created["id"]) == created

    def test_update_merges_fields(self, library_storage):
        updated = run(
            library_storage.update, None, "Book", "b4", {"title": "Le città invisibili"}
        )
        assert updated["title"] == "Le città invisibili"
        assert updated["authorId"] == "a2"

    def test_update_missing(self, library_storage):
        with pytest.raises(RecordNotFoundError):
            run(library_storage.update, None, "Book", "b9", {"title": "?"})

    def test_delete(self, library_storage):
        deleted = run(library_storage.delete, None, "Book", "b1")
        assert deleted["title"] == "A Wizard of Earthsea"
        with pytest.raises(RecordNotFoundError):
            run(library_storage.get_by_id, None, "Book", "b1")

    def test_deleted_record_is_a_copy(self, library_storage):
        stored = library_storage._records["Book"]["b2"]
        deleted = run(library_storage.delete, None, "Book", "b2")
        assert deleted == stored
        assert deleted is not stored

    def test_ids_are_strings(self):
        storage = InMemoryStorage({"Counter": [{"id": 7, "value": 1}]})
        assert run(storage.get_by_id, None, "Counter", 7)["id"] == "7"


class TestGetRecordValue:
    def test_mapping(self):
        assert get_record_value({"name": "x"}, "name") == "x"
        assert get_record_value({}, "name", "default") == "default"

    def test_object(self):
        assert get_record_value(SimpleNamespace(name="x"), "name") == "x"

    def test_none(self):
        assert get_record_value(None, "name", "default") == "default"
