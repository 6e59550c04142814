# src/e2e/test_term_frequency_scorer.py

import pytest

from searchengine.models import Document
from searchengine.scoring import TermFrequencyScorer, _TableScorer, canonical_key


def _pages():
    return [
        Document(id="example.com", title="java", terms=("java", "python", "java")),
        Document(id="test.com", title="python", terms=("python", "python", "java")),
    ]


@pytest.fixture
def scorer():
    s = TermFrequencyScorer()
    s.load_pages(_pages())
    return s


def test_count_scores():
    table = TermFrequencyScorer().count_scores(_pages())
    assert table["example.com"]["java"] == 2.0 / 3
    assert table["example.com"]["python"] == 1.0 / 3
    assert table["test.com"]["python"] == 2.0 / 3
    assert table["test.com"]["java"] == 1.0 / 3


def test_get_score(scorer):
    assert scorer.get_score("example.com", "java") == 2.0 / 3
    assert scorer.get_score("example.com", "python") == 1.0 / 3
    assert scorer.get_score("test.com", "python") == 2.0 / 3
    assert scorer.get_score("nonexistent.com", "java") == 0.0
    assert scorer.get_score("example.com", "nonexistent") == 0.0


def test_get_score_with_title_suffix_and_mixed_case(scorer):
    assert scorer.get_score("example.com - extra data", "java") == 2.0 / 3
    assert scorer.get_score("EXAMPLE.com - extra data", "JAVA") == 2.0 / 3
    assert scorer.get_score("example.com - extra data", "nonexistent") == 0.0


def test_document_without_terms_scores_zero():
    s = TermFrequencyScorer()
    s.load_pages([Document(id="empty", title="", terms=())])
    assert s.get_score("empty", "anything") == 0.0
    assert list(s.weights) == ["empty"]
    assert len(s.weights["empty"]) == 0


def test_weights_are_read_only(scorer):
    with pytest.raises(TypeError):
        scorer.weights["x"] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        scorer.weights["example.com"]["java"] = 99.0  # type: ignore[index]
    assert scorer.get_score("example.com", "java") == 2.0 / 3


def test_repeated_id_keeps_the_last_documents_row():
    s = TermFrequencyScorer()
    s.load_pages([
        Document(id="dup", title="first", terms=("first", "java")),
        Document(id="DUP", title="second", terms=("second", "python")),
    ])
    assert s.get_score("dup - second", "python") == 0.5
    # the earlier namesake no longer has a row of its own
    assert s.get_score("dup - first", "java") == 0.0
    assert list(s.weights) == ["dup"]


def test_canonical_key():
    assert canonical_key("Example.COM") == "example.com"
    assert canonical_key("Example.COM - Some - Title") == "example.com"
    assert canonical_key("plain") == "plain"


def test_table_scorer_base_is_abstract():
    with pytest.raises(TypeError):
        _TableScorer()  # type: ignore[abstract]
