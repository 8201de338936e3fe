from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable
from docstore.models import Document, SearchRequest

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, document: Document) -> Document:
        """Upsert document, assigning an id when it has none. Returns the same instance."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest) -> list[Document]:
        """Return documents matching every active criterion of request."""
        raise NotImplementedError

    def save_all(self, documents: Iterable[Document]) -> list[Document]:
        return [self.save(d) for d in documents]
