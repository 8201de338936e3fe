"""In-memory document store: upsert by id, lookup and filtered search"""

import logging
from dataclasses import dataclass, field
from typing import Callable
from uuid import uuid4

from docstore.crud.repo import DocumentRepo
from docstore.models import Document, SearchRequest
from docstore.search.filters import apply_filters, build_filters


logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid4())


@dataclass
class MemoryRepo(DocumentRepo):
    max_id_attempts: int = 0                    # 0 = retry until a free id is found
    id_factory: Callable[[], str] = _new_id
    _docs: dict[str, Document] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self._docs)

    def _generate_id(self) -> str:
        """Draw ids from id_factory until one is not already a key."""
        attempts = 0
        while True:
            candidate = self.id_factory()
            if candidate not in self._docs:
                return candidate
            attempts += 1
            logger.debug("Generated id %s collides with a stored document", candidate)
            if self.max_id_attempts and attempts >= self.max_id_attempts:
                raise RuntimeError(f"No free document id after {attempts} attempts")

    def save(self, document: Document) -> Document:
        if document is None:
            raise TypeError("document must not be None")
        if not document.id or not document.id.strip():
            document.id = self._generate_id()
            logger.debug("Assigned id %s", document.id)
        elif document.id in self._docs:
            logger.debug("Replacing document %s", document.id)
        self._docs[document.id] = document
        return document

    def find_by_id(self, doc_id: str) -> Document | None:
        return self._docs.get(doc_id)

    def all(self) -> list[Document]:
        return list(self._docs.values())

    def search(self, request: SearchRequest) -> list[Document]:
        if request is None:
            raise TypeError("request must not be None")
        if request.is_empty():
            return self.all()
        filters = build_filters(request)
        results = apply_filters(self._docs.values(), filters)
        logger.debug("Search with %d active filter(s) matched %d of %d document(s)",
                     len(filters), len(results), len(self._docs))
        return results
