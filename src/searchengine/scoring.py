"""
Term scoring strategies.

Both strategies build a weight table once from the loaded documents:

    canonical document key -> term -> weight (>= 0.0)

and answer `get_score(document_key, term)` with a plain dict lookup. Unknown
documents or terms score 0.0; lookups never raise.

Document keys are canonicalized the same way for both strategies, on store and
on lookup: a trailing " - <title>" is stripped and the rest is case-folded, so
"Example.com - some title" and "example.com" address the same row.
"""

from __future__ import annotations
import math
import logging
from abc import ABC, abstractmethod
from collections import Counter
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Protocol

from .models import Document
from .config import TITLE_SEPARATOR, SCORERS, DEFAULT_SCORER

log = logging.getLogger(__name__)

WeightTable = Dict[str, Dict[str, float]]


def canonical_key(key: str) -> str:
    """Strip a " - <title>" suffix and case-fold: the weight table's row key."""
    return key.partition(TITLE_SEPARATOR)[0].casefold()


class TermScorer(Protocol):
    """
    Weights are keyed by document id only. When several documents share an
    id, the row of the last one loaded wins, so an earlier namesake scores
    0.0 even for terms it contains.
    """
    name: str

    def load_pages(self, documents: Iterable[Document]) -> None: ...
    def get_score(self, document_key: str, term: str) -> float: ...
    @property
    def weights(self) -> Mapping[str, Mapping[str, float]]: ...


def _term_frequencies(terms: Iterable[str]) -> Dict[str, float]:
    """count(t) / len(terms); empty for a document without terms."""
    terms = list(terms)
    if not terms:
        return {}
    n = len(terms)
    return {t: c / n for t, c in Counter(terms).items()}


class _TableScorer(ABC):
    """Shared lookup side of both strategies; subclasses fill the table."""
    name = ""

    def __init__(self) -> None:
        self._table: Mapping[str, Mapping[str, float]] = MappingProxyType({})

    def load_pages(self, documents: Iterable[Document]) -> None:
        table = self.count_scores(list(documents))
        # rows are frozen too: the table is read-only once built
        self._table = MappingProxyType(
            {key: MappingProxyType(row) for key, row in table.items()}
        )
        log.info("Built %s weight table: documents=%d", self.name, len(self._table))

    @abstractmethod
    def count_scores(self, documents: List[Document]) -> WeightTable:
        ...

    def get_score(self, document_key: str, term: str) -> float:
        row = self._table.get(canonical_key(document_key))
        if row is None:
            return 0.0
        return row.get(term.lower(), 0.0)

    @property
    def weights(self) -> Mapping[str, Mapping[str, float]]:
        return self._table


class TermFrequencyScorer(_TableScorer):
    """
    weight(d, t) = occurrences of t in d / number of terms in d.
    The title line counts as a term; duplicates count every time.
    """
    name = "tf"

    def count_scores(self, documents: List[Document]) -> WeightTable:
        table: WeightTable = {}
        for doc in documents:
            # a repeated id replaces the earlier row
            table[canonical_key(doc.id)] = _term_frequencies(doc.terms)
        return table


class TfIdfScorer(_TableScorer):
    """
    weight(d, t) = tf(d, t) * ln(N / df(t))

    df(t) counts documents whose *set* of terms contains t, so repeats inside
    one document do not inflate it. A term present in every document has
    idf 0 and therefore weight 0 everywhere.
    """
    name = "tfidf"

    def __init__(self) -> None:
        super().__init__()
        self._idf: Dict[str, float] = {}

    def count_scores(self, documents: List[Document]) -> WeightTable:
        total = len(documents)
        document_frequencies: Counter = Counter()
        for doc in documents:
            document_frequencies.update(set(doc.terms))

        self._idf = {
            term: math.log(total / df) for term, df in document_frequencies.items()
        }

        table: WeightTable = {}
        for doc in documents:
            tf = _term_frequencies(doc.terms)
            table[canonical_key(doc.id)] = {t: f * self._idf[t] for t, f in tf.items()}
        return table

    def idf(self, term: str) -> float:
        return self._idf.get(term.lower(), 0.0)


_REGISTRY = {
    "tf": TermFrequencyScorer,
    "tfidf": TfIdfScorer,
}


def make_scorer(name: str | None = None) -> TermScorer:
    """Factory: "tf" -> TermFrequencyScorer, "tfidf" -> TfIdfScorer."""
    key = (name or DEFAULT_SCORER).lower()
    if key not in _REGISTRY:
        raise ValueError(f"Unsupported scorer: {name!r} (choose from {', '.join(SCORERS)})")
    return _REGISTRY[key]()
