"""Search evaluation: per-field predicates combined with logical AND"""

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import Optional

from docstore.core.models import Document, SearchRequest
from docstore.core.utils.clock import as_aware


logger = logging.getLogger(__name__)


def matches_author(doc: Document, author_ids: Optional[list[str]]) -> bool:
    """True when no author ids are given or the document's author id is among them."""
    if not author_ids:
        return True
    return doc.author.id in author_ids


def matches_created_range(doc: Document, created_from: Optional[datetime], created_to: Optional[datetime]) -> bool:
    """True when created lies within [created_from, created_to]; a missing bound is open."""
    created = as_aware(doc.created)
    if created_from is not None and created < as_aware(created_from):
        return False
    if created_to is not None and created > as_aware(created_to):
        return False
    return True


def matches_title_prefix(doc: Document, prefixes: Optional[list[str]]) -> bool:
    """True when no prefixes are given or the title starts with any of them (case-sensitive)."""
    if not prefixes:
        return True
    return any(doc.title.startswith(prefix) for prefix in prefixes)


def matches_content(doc: Document, contents: Optional[list[str]]) -> bool:
    """True when no substrings are given or the content contains any of them (case-sensitive)."""
    if not contents:
        return True
    return any(content in doc.content for content in contents)


def matches(doc: Document, request: SearchRequest) -> bool:
    return (
        matches_author(doc, request.author_ids)
        and matches_created_range(doc, request.created_from, request.created_to)
        and matches_title_prefix(doc, request.title_prefixes)
        and matches_content(doc, request.contains_contents)
    )


def search(documents: Iterable[Document], request: Optional[SearchRequest] = None) -> list[Document]:
    """Return the documents matching every populated field of request, in encounter order.

    A None request, like an empty one, matches everything. Never mutates the input.
    """
    request = request or SearchRequest()
    results = [doc for doc in documents if matches(doc, request)]
    logger.debug("search matched %d document(s)", len(results))
    return results
