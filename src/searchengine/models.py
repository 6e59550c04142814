# src/searchengine/models.py
"""
Data models for the search engine.

This module defines two small, focused data containers:

- Document: one accepted corpus record (id, title and its lower-cased lines).
- Posting: one occurrence of a term in a document, carrying enough to
  render a result without going back to the document store.

These classes do not contain business logic; they only structure the data so
that loading, indexing and scoring remain simple and predictable.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .config import TITLE_SEPARATOR


@dataclass(frozen=True, slots=True)
class Document:
    """
    Represents one record of the corpus (a `*PAGE:` block).

    Attributes
    ----------
    id : str
        The identifier written after the marker, verbatim (case preserved).
        Unique only by convention: the loader does not enforce it.
    title : str
        The first line after the marker, lower-cased ("" if missing).
    terms : Tuple[str, ...]
        Every line of the record except the marker, lower-cased, in original
        order. Includes the title line and duplicates.
    """
    id: str
    title: str
    terms: Tuple[str, ...]

    def posting(self) -> "Posting":
        return Posting(id=self.id, title=self.title)


@dataclass(frozen=True, slots=True, order=True)  # hashable: (id, title) is the document identity
class Posting:
    """
    A reference from a term to one occurrence of it in one document.

    Equality and hashing use both fields, so two postings for the same record
    compare equal and a posting list can be reduced to a set of documents.
    """
    id: str
    title: str

    @property
    def display_key(self) -> str:
        """Transport form: "<id> - <title>"."""
        return f"{self.id}{TITLE_SEPARATOR}{self.title}"


def split_display_key(key: str) -> Tuple[str, str]:
    """Split "<id> - <title>" at the first separator into (id, title)."""
    doc_id, _, title = key.partition(TITLE_SEPARATOR)
    return doc_id, title
