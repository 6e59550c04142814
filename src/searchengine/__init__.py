"""
Keyword Search Engine Module

Indexes a flat corpus of `*PAGE:` records and answers boolean keyword
queries ranked by term frequency or TF-IDF.

The module is designed with a clean separation of concerns:
- Corpus loading (loader) and document storage (store)
- Inverted index (index) and term scoring (scoring)
- Query evaluation (query) and orchestration (engine)

Example Usage:
    from searchengine import Engine

    eng = Engine()
    eng.build("data/enwiki-small.txt", scorer="tfidf")
    for key in eng.evaluate_query("java programming OR python"):
        print(key)          # "<id> - <title>"
"""

# src/searchengine/__init__.py
from .engine import Engine  # re-export
from .loader import load_corpus
from .models import Document, Posting, split_display_key

__version__ = "1.0.0"
__all__ = ["Engine", "load_corpus", "Document", "Posting", "split_display_key"]
