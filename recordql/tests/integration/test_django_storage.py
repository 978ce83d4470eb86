"""
Integration tests for the database-backed metadata store and ORM storage.
"""

import pytest

from recordql.core.exceptions import RecordNotFoundError
from recordql.core.meta_loader import load_metadata, load_metadata_from_database
from recordql.core.metadata import ConnectionKind, ReferenceKind
from recordql.models import RecordField, RecordType, StoredRecord
from recordql.schema import build_schema
from recordql.storage.orm import DjangoStorage
from recordql.testing import execute_schema, run

pytestmark = [pytest.mark.integration, pytest.mark.django_db]


@pytest.fixture
def stored_metadata():
    author = RecordType.objects.create(name="Author", position=0)
    book = RecordType.objects.create(name="Book", position=1, description="A published book")

    RecordField.objects.create(
        record_type=author, name="id", type="id", is_required=True, position=0
    )
    RecordField.objects.create(
        record_type=author, name="name", type="string", is_required=True, position=1
    )
    RecordField.objects.create(
        record_type=author,
        name="books",
        type="connection",
        target="Book",
        reverse_name="authorId",
        position=2,
    )
    RecordField.objects.create(
        record_type=book, name="id", type="id", is_required=True, position=0
    )
    RecordField.objects.create(
        record_type=book, name="title", type="string", is_required=True, position=1
    )
    RecordField.objects.create(
        record_type=book, name="authorId", type="Author", is_required=True, position=2
    )
    return [author, book]


@pytest.fixture
def storage():
    return DjangoStorage(max_page_size=20)


class TestDatabaseMetadata:
    def test_load(self, stored_metadata):
        metadata = load_metadata_from_database()

        assert [t.name for t in metadata] == ["Author", "Book"]
        author, book = metadata
        assert [f.name for f in author.fields] == ["id", "name", "books"]
        assert author.get_field("books").kind == ConnectionKind("Book", "authorId")
        assert book.get_field("authorId").kind == ReferenceKind("Author")
        assert book.description == "A published book"
        assert author.get_field("name").description is None

    def test_database_source(self, stored_metadata):
        assert len(load_metadata("database")) == 2

    def test_payload_from_field(self, stored_metadata):
        field = RecordField.objects.get(record_type__name="Author", name="books")
        assert field.to_metadata_payload() == {
            "name": "books",
            "type": "connection",
            "isRequired": False,
            "isDeprecated": False,
            "target": "Book",
            "reverseName": "authorId",
            "description": None,
        }


class TestDjangoStorage:
    def test_create_and_get(self, storage):
        created = run(storage.create, None, "Author", {"id": "ignored", "name": "Le Guin"})

        assert created["id"] != "ignored"
        assert run(storage.get_by_id, None, "Author", created["id"]) == created
        stored = StoredRecord.objects.get(record_id=created["id"])
        assert stored.type_name == "Author"
        assert stored.data == {"name": "Le Guin"}

    def test_get_missing(self, storage):
        with pytest.raises(RecordNotFoundError) as exc_info:
            run(storage.get_by_id, None, "Author", "missing")
        assert exc_info.value.record_id == "missing"

    def test_types_are_separate(self, storage):
        author = run(storage.create, None, "Author", {"name": "Le Guin"})
        with pytest.raises(RecordNotFoundError):
            run(storage.get_by_id, None, "Book", author["id"])

    def test_get_all_and_index(self, storage):
        author = run(storage.create, None, "Author", {"name": "Le Guin"})
        other = run(storage.create, None, "Author", {"name": "Calvino"})
        run(storage.create, None, "Book", {"title": "Earthsea", "authorId": author["id"]})
        run(storage.create, None, "Book", {"title": "Lathe", "authorId": author["id"]})
        run(storage.create, None, "Book", {"title": "Cosmicomics", "authorId": other["id"]})

        assert len(run(storage.get_all, None, "Book")) == 3
        books = run(storage.get_all_by_index, None, "Book", author["id"], "authorId")
        assert sorted(b["title"] for b in books) == ["Earthsea", "Lathe"]
        assert run(storage.get_all_by_index, None, "Book", None, "authorId") == []

    def test_update(self, storage):
        book = run(storage.create, None, "Book", {"title": "Earthsea", "pages": 200})
        updated = run(storage.update, None, "Book", book["id"], {"title": "A Wizard of Earthsea"})

        assert updated == {"id": book["id"], "title": "A Wizard of Earthsea", "pages": 200}
        assert StoredRecord.objects.get(record_id=book["id"]).data["title"] == (
            "A Wizard of Earthsea"
        )

    def test_delete(self, storage):
        book = run(storage.create, None, "Book", {"title": "Earthsea"})
        deleted = run(storage.delete, None, "Book", book["id"])

        assert deleted == book
        assert not StoredRecord.objects.filter(record_id=book["id"]).exists()


class TestSchemaOnDatabase:
    def test_create_and_query(self, stored_metadata, storage):
        schema = build_schema(load_metadata_from_database(), storage)

        created = execute_schema(
            schema,
            """
            mutation {
              createAuthor(input: {name: "Ursula K. Le Guin"}, clientMutationId: "c1") {
                clientMutationId
                Author { id }
              }
            }
            """,
        )
        assert created.errors is None
        author_id = created.data["createAuthor"]["Author"]["id"]

        execute_schema(
            schema,
            """
            mutation Add($author: String!) {
              createBook(input: {title: "The Dispossessed", authorId: $author}) {
                Book { id }
              }
            }
            """,
            variables={"author": author_id},
        )

        result = execute_schema(
            schema,
            """
            query Author($id: ID!) {
              getAuthor(id: $id) {
                name
                books { count nodes { title authorId { name } } }
              }
            }
            """,
            variables={"id": author_id},
        )
        assert result.errors is None
        assert result.data["getAuthor"] == {
            "name": "Ursula K. Le Guin",
            "books": {
                "count": 1,
                "nodes": [
                    {"title": "The Dispossessed", "authorId": {"name": "Ursula K. Le Guin"}}
                ],
            },
        }
