"""Shared fixtures for crud unit tests"""

from datetime import datetime, timezone

import pytest

from docstore.crud.memory_repo import DocumentStore
from docstore.crud.models import Author, Document


ALICE = Author(id="author1", name="Alice")
BOB = Author(id="author2", name="Bob")


@pytest.fixture(name="store")
def store_fixture():
    """Store prepopulated with three documents (doc1..doc3)."""
    s = DocumentStore()
    s.save(Document(id="doc1", title="Java Programming Guide", content="Content about Java basics",
                    author=ALICE, created=datetime(2024, 1, 1, tzinfo=timezone.utc)))
    s.save(Document(id="doc2", title="Python Guide", content="Content about Python programming",
                    author=BOB, created=datetime(2024, 2, 1, tzinfo=timezone.utc)))
    s.save(Document(id="doc3", title="Advanced Java Concepts", content="Content about advanced Java topics",
                    author=ALICE, created=datetime(2024, 3, 1, tzinfo=timezone.utc)))
    return s
