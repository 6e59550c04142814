# src/searchengine/engine.py
from __future__ import annotations

import os
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from . import config as CFG
from .models import Document
from .loader import load_corpus
from .store import DocumentStore, MemoryStore
from .index import InvertedIndex
from .scoring import TermScorer, make_scorer
from .query import QueryHandler

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Snapshot:
    """Everything a query reads. Built completely, then published in one assignment."""
    store: DocumentStore
    index: InvertedIndex
    scorer: TermScorer
    handler: QueryHandler


class Engine:
    """
    Thin orchestration layer that glues together:
      - corpus loading (loader.load_corpus) into a DocumentStore,
      - the inverted index (InvertedIndex),
      - a term scorer (TermFrequencyScorer / TfIdfScorer),
      - query evaluation (QueryHandler).

    Public API (used by CLI/Flask/GUI):
      * build(corpus_path, scorer=...): load -> index -> weights -> publish
      * search(term):                   raw index lookup, "<id> - <title>" keys
      * evaluate_query(raw):            ranked OR/AND results
      * shutdown():                     drop state

    build() may be called again to reload; readers see either the old or the
    new snapshot, never a half-built one.
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self._state: Optional[_Snapshot] = None

    # /* ~~~ Load a corpus file and build index + weights ~~~ */
    def build(
        self,
        corpus_path: str,
        *,
        scorer: Optional[str] = None,          # "tf" | "tfidf"
        verbose: bool = False,
    ) -> None:
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)
            os.environ["SEARCHENGINE_VERBOSE"] = "1"

        term_scorer = make_scorer(scorer or CFG.DEFAULT_SCORER)

        # OSError propagates; the current snapshot stays published
        documents: List[Document] = load_corpus(corpus_path)
        store = MemoryStore(documents)

        log.info("Building inverted index")
        index = InvertedIndex.build(store)
        log.info("Inverted index built: terms=%d", len(index))

        term_scorer.load_pages(store)

        self._state = _Snapshot(
            store=store,
            index=index,
            scorer=term_scorer,
            handler=QueryHandler(index, term_scorer),
        )
        log.info("Engine build() complete: documents=%d scorer=%s", store.count(), term_scorer.name)

    # ------------- query -------------

    def search(self, term: str) -> List[str]:
        """Unranked lookup; one key per occurrence, so duplicates are possible."""
        state = self._require()
        return [p.display_key for p in state.index.lookup(term)]

    def evaluate_query(self, raw_query: str) -> List[str]:
        """Ranked "<id> - <title>" keys for an OR/AND query (percent escapes are decoded)."""
        state = self._require()
        return state.handler.matching_pages(raw_query)

    # ------------- getters -------------

    @property
    def is_ready(self) -> bool:
        return self._state is not None

    @property
    def documents(self) -> Tuple[Document, ...]:
        return self._require().store.documents()

    @property
    def scorer_name(self) -> str:
        return self._require().scorer.name

    @property
    def index(self) -> InvertedIndex:
        return self._require().index

    @property
    def scorer(self) -> TermScorer:
        return self._require().scorer

    # ------------- teardown -------------

    def shutdown(self) -> None:
        state, self._state = self._state, None
        if state is not None:
            state.store.close()
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require(self) -> _Snapshot:
        state = self._state
        if state is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return state
