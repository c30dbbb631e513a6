"""In-memory document store: save, filtered search and id lookup"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import uuid4

from docstore.models import Document, SearchRequest
from docstore.repo import DocumentRepo


logger = logging.getLogger(__name__)

SAVE_MODES = ("append", "replace")


class MalformedDocumentError(ValueError):
    """A stored document lacks a field that a search clause needs."""

    def __init__(self, doc: Document, field_name: str):
        self.doc_id = doc.id
        self.field_name = field_name
        super().__init__(f"Malformed document {doc.id!r}: missing {field_name}")


def _require(doc: Document, field_name: str, value: Any) -> Any:
    if value is None:
        raise MalformedDocumentError(doc, field_name)
    return value


def _matches_title_prefixes(doc: Document, prefixes: list[str] | None) -> bool:
    if prefixes is None:
        return True
    title = _require(doc, "title", doc.title)
    return any(title.startswith(p) for p in prefixes)


def _matches_contents(doc: Document, substrings: list[str] | None) -> bool:
    if substrings is None:
        return True
    content = _require(doc, "content", doc.content)
    return any(s in content for s in substrings)


def _matches_author_ids(doc: Document, author_ids: list[str] | None) -> bool:
    if author_ids is None:
        return True
    author = _require(doc, "author", doc.author)
    return _require(doc, "author.id", author.id) in author_ids


def _matches_created_from(doc: Document, created_from: datetime | None) -> bool:
    return created_from is None or _require(doc, "created", doc.created) >= created_from


def _matches_created_to(doc: Document, created_to: datetime | None) -> bool:
    return created_to is None or _require(doc, "created", doc.created) <= created_to


def matches(doc: Document, request: SearchRequest) -> bool:
    """True if doc satisfies every clause of request (AND across, OR within)."""
    return (
        _matches_title_prefixes(doc, request.title_prefixes)
        and _matches_contents(doc, request.contains_contents)
        and _matches_author_ids(doc, request.author_ids)
        and _matches_created_from(doc, request.created_from)
        and _matches_created_to(doc, request.created_to)
    )


@dataclass
class DocumentStore(DocumentRepo):
    """Ordered in-memory collection of documents.

    save_mode 'append' keeps every saved record, so re-saving an existing id
    stores a duplicate and find_by_id only ever sees the earliest one.
    save_mode 'replace' swaps out the first record with the same id in place.
    Not thread-safe; use one store per caller context.
    """
    save_mode: str = "append"
    _docs: list[Document] = field(default_factory=list)

    def __post_init__(self):
        if self.save_mode not in SAVE_MODES:
            raise ValueError(f"Unknown save_mode {self.save_mode!r}; expected one of {SAVE_MODES}")

    def __len__(self) -> int:
        return len(self._docs)

    def all(self) -> list[Document]:
        """Snapshot of every stored record in insertion order."""
        return list(self._docs)

    def save(self, doc: Document) -> Document:
        if not doc.id:
            doc.id = str(uuid4())
            logger.debug("Assigned id %s", doc.id)

        if self.save_mode == "replace":
            for i, existing in enumerate(self._docs):
                if existing.id == doc.id:
                    self._docs[i] = doc
                    logger.debug("Replaced document %s at position %d", doc.id, i)
                    return doc

        self._docs.append(doc)
        return doc

    def search(self, request: SearchRequest) -> list[Document]:
        found = [doc for doc in self._docs if matches(doc, request)]
        logger.debug("Search matched %d of %d document(s)", len(found), len(self._docs))
        return found

    def find_by_id(self, doc_id: str) -> Document | None:
        return next((doc for doc in self._docs if doc.id == doc_id), None)
