"""Stored entities and search criteria: Author, Document, SearchRequest"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC so stored and requested timestamps always compare."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """An identified document contributor; immutable, equal by value."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Document(BaseModel):
    """The primary stored entity. id and created are assigned on save when absent."""
    model_config = ConfigDict(validate_assignment=True)

    id:      Optional[str] = None
    title:   Optional[str] = None
    content: Optional[str] = None
    author:  Optional[Author] = None
    created: Optional[datetime] = None      # set once on first save

    @field_validator("created")
    @classmethod
    def _created_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)


class SearchRequest(BaseModel):
    """Optional filter criteria; unset (None) criteria impose no constraint.

    Criteria are AND-ed together; values inside a multi-valued criterion are OR-ed.
    camelCase aliases (titlePrefixes, createdFrom, ...) are accepted on validation.
    """
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    title_prefixes:    Optional[set[str]] = Field(default=None, alias="titlePrefixes")
    contains_contents: Optional[set[str]] = Field(default=None, alias="containsContents")
    author_ids:        Optional[set[str]] = Field(default=None, alias="authorIds")
    created_from:      Optional[datetime] = Field(default=None, alias="createdFrom", description="Exclusive lower bound")
    created_to:        Optional[datetime] = Field(default=None, alias="createdTo", description="Exclusive upper bound")

    @field_validator("created_from", "created_to")
    @classmethod
    def _bounds_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)
