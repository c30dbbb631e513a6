"""Value models for stored documents and search queries"""

from __future__ import annotations

from datetime import datetime
from pydantic import BaseModel


class Author(BaseModel):
    id: str | None = None
    name: str | None = None


class Document(BaseModel):
    """A stored record; id is assigned by the store on first save when absent."""
    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None     # caller-supplied, never touched by the store


class SearchRequest(BaseModel):
    """Conjunctive filters over stored documents; None disables a filter.

    An empty list is a filter no document satisfies.
    """
    title_prefixes: list[str] | None = None
    contains_contents: list[str] | None = None
    author_ids: list[str] | None = None
    created_from: datetime | None = None    # inclusive
    created_to: datetime | None = None      # inclusive
