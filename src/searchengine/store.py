# src/searchengine/store.py
from __future__ import annotations
from typing import Protocol, Iterable, Iterator, Optional, Sequence, Tuple

from .models import Document


class DocumentStore(Protocol):
    # Read
    def read(self, position: int) -> Document: ...
    def read_many(self, positions: Iterable[int]) -> Iterator[Document]: ...
    def documents(self) -> Tuple[Document, ...]: ...
    def count(self) -> int: ...
    def __iter__(self) -> Iterator[Document]: ...
    # lifecycle
    def close(self) -> None: ...


class MemoryStore(DocumentStore):
    """Ordered, read-only in-memory store of parsed documents (load order)."""
    def __init__(self, documents: Optional[Sequence[Document]] = None) -> None:
        self._rows: Tuple[Document, ...] = tuple(documents or ())

    # R
    def read(self, position: int) -> Document:
        try:
            return self._rows[int(position)]
        except IndexError:
            raise KeyError(position)

    def read_many(self, positions: Iterable[int]) -> Iterator[Document]:
        for pos in positions:
            pos = int(pos)
            if 0 <= pos < len(self._rows):
                yield self._rows[pos]

    def documents(self) -> Tuple[Document, ...]:
        return self._rows

    def count(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def close(self) -> None:
        self._rows = ()
