"""In-memory document store: upsert with id/created assignment, id lookup, filtered scan"""

import logging
import threading
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from docstore.core.filters import matches
from docstore.crud.models import Document, SearchRequest, as_utc
from docstore.crud.repo import DocumentRepo


logger = logging.getLogger(__name__)


@dataclass(eq=False)
class MemoryRepo(DocumentRepo):
    """Documents keyed by id in a plain dict; no indexes, nothing persisted.

    Not thread-safe unless constructed with thread_safe=True, in which case every
    operation holds a re-entrant lock. Values are deep-copied on the way in and out
    so callers never share state with the store.
    """
    thread_safe: bool = False
    _docs: dict[str, Document] = field(default_factory=dict, init=False, repr=False)
    _lock: AbstractContextManager = field(init=False, repr=False)

    def __post_init__(self):
        self._lock = threading.RLock() if self.thread_safe else nullcontext()

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs

    def save(self, document: Document) -> Document:
        """Insert or fully replace the document at its id.

        An empty or missing id gets a fresh uuid4. created is resolved as:
        incoming value if set, else the existing entry's value, else now (UTC).
        """
        with self._lock:
            doc_id = document.id or str(uuid4())
            existing = self._docs.get(doc_id)
            created = as_utc(document.created)
            if created is None:
                created = existing.created if existing else datetime.now(timezone.utc)

            stored = document.model_copy(update={"id": doc_id, "created": created}, deep=True)
            self._docs[doc_id] = stored
            logger.debug("%s document %s", "replaced" if existing else "inserted", doc_id)
            return stored.model_copy(deep=True)

    def find_by_id(self, doc_id: str) -> Document | None:
        """Return a copy of the stored document, or None if the id is unknown."""
        with self._lock:
            doc = self._docs.get(doc_id)
            return doc.model_copy(deep=True) if doc else None

    def search(self, request: SearchRequest) -> list[Document]:
        """Return documents matching every set criterion of request (which must not be None).

        Result order follows internal enumeration and is not guaranteed.
        """
        with self._lock:
            results = [doc.model_copy(deep=True) for doc in self._docs.values() if matches(doc, request)]
            logger.debug("search matched %d of %d documents", len(results), len(self._docs))
        return results


DocumentStore = MemoryRepo
