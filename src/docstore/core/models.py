"""Data models for authors, documents and search requests"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Author(BaseModel):
    """The person a document is attributed to; identity is the id."""
    id:   Optional[str] = None
    name: Optional[str] = None


class Document(BaseModel):
    """A stored record. Fields are optional so invalid documents can be built and rejected on upsert."""
    id:      Optional[str] = None       # assigned by the store when empty
    title:   Optional[str] = None
    content: Optional[str] = None
    author:  Optional[Author] = None
    created: Optional[datetime] = None  # never altered by the store


class SearchRequest(BaseModel):
    """Search criteria; every field is optional and an absent or empty field adds no constraint."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title_prefixes:    Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids:        Optional[list[str]] = None
    created_from:      Optional[datetime] = None
    created_to:        Optional[datetime] = None
