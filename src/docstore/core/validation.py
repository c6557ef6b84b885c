"""Document validation applied before a document is stored"""

from datetime import datetime
from typing import Optional

from docstore.core.errors import ValidationFailed
from docstore.core.models import Document
from docstore.core.utils.clock import as_aware, utcnow


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def document_errors(document: Optional[Document], now: Optional[datetime] = None) -> list[str]:
    """Return the reasons document is not storable; an empty list means it is valid."""
    if document is None:
        return ["document is missing"]

    errors = []
    if _is_blank(document.title):
        errors.append("title is empty")
    if _is_blank(document.content):
        errors.append("content is empty")
    if document.author is None:
        errors.append("author is missing")
    elif _is_blank(document.author.id):
        errors.append("author id is empty")
    if document.created is None:
        errors.append("created is missing")
    elif as_aware(document.created) > as_aware(now or utcnow()):
        errors.append("created is in the future")
    return errors


def validate_document(document: Optional[Document], now: Optional[datetime] = None) -> Document:
    """Return document if it passes every rule, else raise ValidationFailed listing each failure."""
    errors = document_errors(document, now)
    if errors:
        raise ValidationFailed(errors)
    return document
