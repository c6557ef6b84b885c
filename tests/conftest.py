"""Root test configuration: shared timestamps and document factories"""

from datetime import datetime, timedelta, timezone

import pytest

from docstore.core.models import Author, Document


T0 = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)


def _make_doc(
    title: str = "Report Q1",
    content: str = "Quarterly numbers",
    author_id: str = "a1",
    created: datetime = T0,
    doc_id: str = None,
    ) -> Document:
    """Build a valid Document with overridable fields."""
    return Document(
        id=doc_id,
        title=title,
        content=content,
        author=Author(id=author_id, name=f"Author {author_id}"),
        created=created,
    )


@pytest.fixture(name="t0")
def t0_fixture() -> datetime:
    return T0


@pytest.fixture(name="day")
def day_fixture() -> timedelta:
    return timedelta(days=1)


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    """Factory for valid documents created at T0 by author 'a1' unless overridden."""
    return _make_doc
