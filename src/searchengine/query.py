from __future__ import annotations
import re
from typing import Dict, List, Protocol, Sequence, Set
from urllib.parse import unquote

from .models import Posting
from .scoring import TermScorer

# Clauses are separated by the keyword OR (any case) with whitespace around it
_OR_SPLIT = re.compile(r"\s+OR\s+", re.IGNORECASE)


class PostingSource(Protocol):
    def lookup(self, term: str) -> Sequence[Posting]: ...


def split_clauses(query: str) -> List[str]:
    return _OR_SPLIT.split(query)


def rank(results: Dict[Posting, float]) -> List[Posting]:
    """Score descending; ties broken by id, then title (both ascending)."""
    return sorted(results, key=lambda p: (-results[p], p.id, p.title))


class QueryHandler:
    """
    Evaluates queries of AND-clauses joined by OR.

      "java programming"              -> pages containing both terms
      "java OR python programming"    -> pages matching either clause

    Each matching page is scored with the attached TermScorer; a page matched
    by several clauses keeps its best clause score.
    """

    def __init__(self, index: PostingSource, scorer: TermScorer) -> None:
        self.index = index
        self.scorer = scorer

    # /* ~~~ pages containing every token of the clause, with summed scores ~~~ */
    def and_search(self, clause: str) -> Dict[Posting, float]:
        tokens = [t.lower() for t in clause.split()]
        pages = self._common_pages(tokens)

        scores: Dict[Posting, float] = {}
        for page in pages:
            total = 0.0
            for token in tokens:
                total += self.scorer.get_score(page.id, token)
            scores[page] = total
        return scores

    # /* ~~~ union of AND-clauses, merged by max score ~~~ */
    def or_search(self, query: str) -> Dict[Posting, float]:
        results: Dict[Posting, float] = {}
        for clause in split_clauses(query):
            for page, score in self.and_search(clause).items():
                if page in results:
                    results[page] = max(results[page], score)
                else:
                    results[page] = score
        return results

    def matching_pages(self, raw_query: str) -> List[str]:
        """
        Percent-decode `raw_query`, evaluate it and return ranked
        "<id> - <title>" keys.
        """
        query = unquote(raw_query)
        return [p.display_key for p in rank(self.or_search(query))]

    # ------------- internals -------------

    def _common_pages(self, tokens: List[str]) -> Set[Posting]:
        if not tokens:
            return set()
        common: Set[Posting] | None = None
        for token in tokens:
            # posting lists hold one entry per occurrence; reduce to documents
            pages = set(self.index.lookup(token))
            common = pages if common is None else common & pages
            if not common:
                return set()
        return common or set()
