"""Root test configuration: shared document builders"""

from datetime import datetime

import pytest

from docstore.memory_repo import DocumentStore
from docstore.models import Author, Document


@pytest.fixture(name="store")
def store_fixture():
    """Empty append-mode store; one per test."""
    return DocumentStore()


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    """Factory for fully populated Documents with overridable fields."""
    def _make(
        title: str = "Title",
        content: str = "Body",
        author_id: str = "a1",
        created: datetime = datetime(2024, 1, 1),
        doc_id: str = None,
        ) -> Document:
        return Document(
            id=doc_id,
            title=title,
            content=content,
            author=Author(id=author_id, name=f"Author {author_id}"),
            created=created,
        )
    return _make
