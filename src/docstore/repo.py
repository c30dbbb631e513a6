from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.models import Document, SearchRequest

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, doc: Document) -> Document:
        """Store doc, assigning an id if it has none. Returns the same object."""
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest) -> list[Document]:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str) -> Document | None:
        raise NotImplementedError
