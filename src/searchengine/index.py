from __future__ import annotations
from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Tuple

from .models import Document, Posting


class InvertedIndex:
    """
    Term -> posting list.
    One Posting per occurrence: a term repeated in a document yields repeated
    postings for it. Lists keep load order and are never handed out mutable.
    """
    def __init__(self, postings: Dict[str, List[Posting]] | None = None) -> None:
        self._postings: Dict[str, Tuple[Posting, ...]] = {
            term: tuple(pl) for term, pl in (postings or {}).items()
        }

    # ---- Build (once) ----
    @classmethod
    def build(cls, documents: Iterable[Document]) -> "InvertedIndex":
        buckets: Dict[str, List[Posting]] = defaultdict(list)
        for doc in documents:
            posting = doc.posting()
            for term in doc.terms:
                buckets[term].append(posting)
        return cls(buckets)

    # ---- Query ----
    def lookup(self, term: str) -> Tuple[Posting, ...]:
        """Postings for `term` (case-insensitive); empty tuple if never seen."""
        return self._postings.get(term.lower(), ())

    # ---- Getters ----
    def terms(self) -> Iterator[str]:
        return iter(self._postings)

    def __contains__(self, term: str) -> bool:
        return term.lower() in self._postings

    def __len__(self) -> int:
        return len(self._postings)
