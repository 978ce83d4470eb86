"""
Shared fixtures for recordql tests.
"""

import pytest

from recordql.core.metadata import parse_metadata
from recordql.storage import InMemoryStorage

AUTHOR_BOOK_METADATA = [
    {
        "name": "Author",
        "fields": [
            {"name": "id", "type": "id", "isRequired": True},
            {"name": "name", "type": "string", "isRequired": True},
            {
                "name": "books",
                "type": "connection",
                "target": "Book",
                "reverseName": "authorId",
            },
        ],
    },
    {
        "name": "Book",
        "fields": [
            {"name": "id", "type": "id", "isRequired": True},
            {"name": "title", "type": "string", "isRequired": True},
            {"name": "author", "type": "Author", "isRequired": True},
        ],
    },
]


@pytest.fixture
def author_book_payload():
    return [dict(t, fields=[dict(f) for f in t["fields"]]) for t in AUTHOR_BOOK_METADATA]


@pytest.fixture
def author_book_metadata(author_book_payload):
    return parse_metadata(author_book_payload)


@pytest.fixture
def library_storage():
    return InMemoryStorage(
        {
            "Author": [
                {"id": "a1", "name": "Ursula K. Le Guin"},
                {"id": "a2", "name": "Italo Calvino"},
            ],
            "Book": [
                {"id": "b1", "title": "A Wizard of Earthsea", "author": "a1", "authorId": "a1"},
                {"id": "b2", "title": "The Dispossessed", "author": "a1", "authorId": "a1"},
                {"id": "b3", "title": "The Left Hand of Darkness", "author": "a1", "authorId": "a1"},
                {"id": "b4", "title": "Invisible Cities", "author": "a2", "authorId": "a2"},
            ],
        },
        max_page_size=10,
    )
