"""In-memory document store: validated upsert, id lookup and search over insertion order"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from docstore.config import Settings
from docstore.core.errors import ValidationFailed
from docstore.core.models import Document, SearchRequest
from docstore.core.search import search
from docstore.core.utils.clock import utcnow
from docstore.core.utils.ids import new_id
from docstore.core.validation import validate_document
from docstore.crud.repo import DocumentRepo


logger = logging.getLogger(__name__)


@dataclass
class MemoryRepo(DocumentRepo):
    reject_duplicate_ids: bool = False
    clock: Callable[[], datetime] = utcnow
    _docs: list[Document] = field(default_factory=list)

    @classmethod
    def from_settings(cls, settings: Settings) -> MemoryRepo:
        return cls(reject_duplicate_ids=settings.reject_duplicate_ids)

    def upsert(self, doc: Document) -> Document:
        """Store doc and return it with its final id.

        Raises ValidationFailed without touching the collection if doc is invalid.
        An empty id is replaced by a fresh UUID; a non-empty id is kept as-is.
        The store holds doc itself, not a copy: later mutation by the caller
        shows up in find_by_id and search, and must keep doc valid.
        """
        try:
            validate_document(doc, now=self.clock())
        except ValidationFailed as e:
            logger.warning("Rejected document: %s", "; ".join(e.reasons))
            raise
        if self.reject_duplicate_ids and doc.id and self.find_by_id(doc.id) is not None:
            logger.warning("Rejected document: id %s already exists", doc.id)
            raise ValidationFailed([f"id {doc.id!r} already exists"])

        if not doc.id:
            doc.id = new_id()
            logger.debug("Assigned id %s", doc.id)
        self._docs.append(doc)
        logger.debug("Stored document %s (%d total)", doc.id, len(self._docs))
        return doc

    def find_by_id(self, doc_id: str) -> Document | None:
        """Return the first stored document with doc_id, or None."""
        return next((doc for doc in self._docs if doc.id == doc_id), None)

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        """Evaluate request against a snapshot of the current collection."""
        return search(self.documents(), request)

    def documents(self) -> list[Document]:
        """Snapshot of stored documents in insertion order."""
        return list(self._docs)

    def clear(self) -> None:
        self._docs.clear()

    def __len__(self) -> int:
        return len(self._docs)
