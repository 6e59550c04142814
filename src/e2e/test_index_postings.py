# src/e2e/test_index_postings.py

from searchengine.index import InvertedIndex
from searchengine.models import Document, Posting
from searchengine.store import MemoryStore


def _docs():
    return [
        Document(id="doc1", title="title1", terms=("title1", "test", "test")),
        Document(id="doc2", title="title2", terms=("title2", "test")),
    ]


def test_one_posting_per_occurrence_in_load_order():
    idx = InvertedIndex.build(_docs())
    assert idx.lookup("test") == (
        Posting("doc1", "title1"),
        Posting("doc1", "title1"),
        Posting("doc2", "title2"),
    )


def test_lookup_is_case_insensitive_and_empty_for_unknown_terms():
    idx = InvertedIndex.build(_docs())
    assert idx.lookup("TEst") == idx.lookup("test")
    assert idx.lookup("nothing") == ()
    assert "TITLE1" in idx
    assert len(idx) == 3


def test_postings_render_display_keys():
    p = Posting("https://example.com", "example")
    assert p.display_key == "https://example.com - example"
    assert p == Posting("https://example.com", "example")
    assert len({p, Posting("https://example.com", "example")}) == 1


def test_memory_store_is_ordered_and_read_only():
    docs = _docs()
    store = MemoryStore(docs)
    assert store.count() == 2
    assert list(store) == docs
    assert store.read(1).id == "doc2"
    assert [d.id for d in store.read_many([1, 0, 7])] == ["doc2", "doc1"]
    assert isinstance(store.documents(), tuple)

    try:
        store.read(5)
    except KeyError:
        pass
    else:
        raise AssertionError("expected KeyError for an unknown position")

    store.close()
    assert store.count() == 0
