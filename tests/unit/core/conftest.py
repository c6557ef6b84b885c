"""Shared fixtures for core unit tests"""

import pytest


@pytest.fixture(name="pool")
def pool_fixture(make_doc, t0, day):
    """Six documents varying independently in author, title, content and created time."""
    return [
        make_doc(doc_id="p0", author_id="a1", title="Report Q1",     content="budget overview", created=t0),
        make_doc(doc_id="p1", author_id="a2", title="Report Q2",     content="hiring plan",     created=t0 + day),
        make_doc(doc_id="p2", author_id="a1", title="Memo",          content="budget cuts",     created=t0 + 2 * day),
        make_doc(doc_id="p3", author_id="a3", title="Minutes",       content="weekly sync",     created=t0 + 3 * day),
        make_doc(doc_id="p4", author_id="a2", title="report draft",  content="Budget final",    created=t0 + 4 * day),
        make_doc(doc_id="p5", author_id="a1", title="Report annual", content="summary",         created=t0 + 2 * day),
    ]
