"""Search predicates: one per SearchRequest criterion, AND-ed by matches()"""

from datetime import datetime
from typing import Optional

from docstore.crud.models import Document, SearchRequest


def matches_title_prefixes(doc: Document, title_prefixes: Optional[set[str]]) -> bool:
    """True if unset, else the title exists and starts with any prefix."""
    if title_prefixes is None:
        return True
    if doc.title is None:
        return False
    return any(doc.title.startswith(p) for p in title_prefixes)


def matches_contains_contents(doc: Document, contains_contents: Optional[set[str]]) -> bool:
    """True if unset, else the content exists and contains any substring."""
    if contains_contents is None:
        return True
    if doc.content is None:
        return False
    return any(s in doc.content for s in contains_contents)


def matches_author_ids(doc: Document, author_ids: Optional[set[str]]) -> bool:
    if author_ids is None:
        return True
    if doc.author is None:
        return False
    return doc.author.id in author_ids


def matches_created_from(doc: Document, created_from: Optional[datetime]) -> bool:
    """Exclusive lower bound."""
    if created_from is None:
        return True
    return doc.created is not None and doc.created > created_from


def matches_created_to(doc: Document, created_to: Optional[datetime]) -> bool:
    """Exclusive upper bound."""
    if created_to is None:
        return True
    return doc.created is not None and doc.created < created_to


def matches(doc: Document, request: SearchRequest) -> bool:
    """True if doc satisfies every set criterion of request."""
    return (
        matches_title_prefixes(doc, request.title_prefixes)
        and matches_contains_contents(doc, request.contains_contents)
        and matches_author_ids(doc, request.author_ids)
        and matches_created_from(doc, request.created_from)
        and matches_created_to(doc, request.created_to)
    )
