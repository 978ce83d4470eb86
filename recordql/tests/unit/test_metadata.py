"""
Tests for record metadata parsing.

This module tests:
- Field kind selection (primitive, connection, reference)
- Required/deprecated flags and their snake_case aliases
- Parse-time configuration errors
"""

import pytest

from recordql.core.exceptions import InvalidFieldError, SchemaConfigurationError
from recordql.core.metadata import (
    ConnectionKind,
    FieldMetadata,
    PrimitiveKind,
    ReferenceKind,
    is_valid_name,
    parse_field_metadata,
    parse_metadata,
    parse_type_metadata,
)

pytestmark = pytest.mark.unit


class TestFieldKinds:
    def test_primitive_kinds(self):
        for kind in ("id", "string", "integer", "number", "boolean", "datetime"):
            field = parse_field_metadata({"name": "value", "type": kind})
            assert field.kind == PrimitiveKind(kind)
            assert field.referenced_type is None

    def test_connection_kind(self):
        field = parse_field_metadata(
            {
                "name": "books",
                "type": "connection",
                "target": "Book",
                "reverseName": "authorId",
            }
        )
        assert field.kind == ConnectionKind(target="Book", reverse_name="authorId")
        assert field.referenced_type == "Book"

    def test_unknown_type_string_is_a_reference(self):
        field = parse_field_metadata({"name": "author", "type": "Author"})
        assert field.kind == ReferenceKind("Author")
        assert field.referenced_type == "Author"

    def test_invalid_type_string(self):
        with pytest.raises(InvalidFieldError):
            parse_field_metadata({"name": "author", "type": "not a type"})


class TestConnectionValidation:
    def test_missing_target(self):
        with pytest.raises(InvalidFieldError) as exc_info:
            parse_field_metadata(
                {"name": "books", "type": "connection", "reverseName": "authorId"},
                type_name="Author",
            )
        assert exc_info.value.type_name == "Author"
        assert exc_info.value.field_name == "books"
        assert "target" in str(exc_info.value)

    def test_missing_reverse_name(self):
        with pytest.raises(InvalidFieldError) as exc_info:
            parse_field_metadata(
                {"name": "books", "type": "connection", "target": "Book"},
                type_name="Author",
            )
        assert "reverseName" in str(exc_info.value)

    def test_snake_case_reverse_name(self):
        field = parse_field_metadata(
            {
                "name": "books",
                "type": "connection",
                "target": "Book",
                "reverse_name": "author_id",
            }
        )
        assert field.kind.reverse_name == "author_id"


class TestFlags:
    def test_defaults(self):
        field = parse_field_metadata({"name": "title", "type": "string"})
        assert field.is_required is False
        assert field.is_deprecated is False
        assert field.description is None

    def test_camel_case_flags(self):
        field = parse_field_metadata(
            {"name": "title", "type": "string", "isRequired": True, "isDeprecated": True}
        )
        assert field.is_required is True
        assert field.is_deprecated is True

    def test_snake_case_flags(self):
        field = parse_field_metadata(
            {"name": "title", "type": "string", "is_required": 1, "is_deprecated": 0}
        )
        assert field.is_required is True
        assert field.is_deprecated is False


class TestTypeMetadata:
    def test_field_order_is_preserved(self, author_book_metadata):
        author = author_book_metadata[0]
        assert [f.name for f in author.fields] == ["id", "name", "books"]
        assert isinstance(author.get_field("name"), FieldMetadata)
        assert author.get_field("missing") is None

    def test_duplicate_field_names(self):
        with pytest.raises(InvalidFieldError):
            parse_type_metadata(
                {
                    "name": "Author",
                    "fields": [
                        {"name": "name", "type": "string"},
                        {"name": "name", "type": "integer"},
                    ],
                }
            )

    def test_missing_field_type(self):
        with pytest.raises(InvalidFieldError):
            parse_type_metadata({"name": "Author", "fields": [{"name": "name"}]})

    def test_non_mapping_descriptor(self):
        with pytest.raises(SchemaConfigurationError):
            parse_metadata(["Author"])

    def test_metadata_is_immutable(self, author_book_metadata):
        with pytest.raises(AttributeError):
            author_book_metadata[0].name = "Writer"


class TestNames:
    @pytest.mark.parametrize("name", ["Author", "_private", "book2", "authorId"])
    def test_valid(self, name):
        assert is_valid_name(name)

    @pytest.mark.parametrize("name", ["", "2books", "__typename", "Meta", "has space", None])
    def test_invalid(self, name):
        assert not is_valid_name(name)

    def test_invalid_type_name_is_rejected(self):
        with pytest.raises(InvalidFieldError):
            parse_type_metadata({"name": "__Author", "fields": []})
