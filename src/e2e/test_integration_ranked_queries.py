from pathlib import Path
import pytest
from searchengine.engine import Engine

CORPUS = (
    "*PAGE:http://a.com\n"
    "Java\n"
    "programming\n"
    "java\n"
    "*PAGE:http://b.com\n"
    "Python\n"
    "java\n"
    "*PAGE:http://c.com\n"
    "Programming\n"
    "python\n"
)

def _seed(tmp: Path) -> str:
    p = tmp / "pages.txt"
    p.write_text(CORPUS, encoding="utf-8")
    return str(p)

@pytest.mark.e2e
def test_term_frequency_ranking(tmp_path: Path):
    eng = Engine()
    try:
        eng.build(_seed(tmp_path), scorer="tf")
        assert eng.scorer_name == "tf"
        # a: java 2/3, b: java 1/2
        assert eng.evaluate_query("java") == ["http://a.com - java", "http://b.com - python"]
        assert eng.evaluate_query("java programming") == ["http://a.com - java"]
        # b and c tie at 1/2 -> ordered by id
        assert eng.evaluate_query("java%20OR%20python") == [
            "http://a.com - java",
            "http://b.com - python",
            "http://c.com - programming",
        ]
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_tfidf_ranking(tmp_path: Path):
    eng = Engine()
    try:
        eng.build(_seed(tmp_path), scorer="tfidf")
        assert eng.scorer_name == "tfidf"
        assert eng.evaluate_query("JAVA") == ["http://a.com - java", "http://b.com - python"]
        assert eng.scorer.get_score("http://a.com - java", "java") > eng.scorer.get_score("http://b.com", "java") > 0
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_repeated_queries_are_identical(tmp_path: Path):
    eng = Engine()
    try:
        eng.build(_seed(tmp_path), scorer="tfidf")
        first = eng.evaluate_query("java OR programming python")
        assert first
        for _ in range(3):
            assert eng.evaluate_query("java OR programming python") == first
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_rebuild_swaps_state_and_failed_load_keeps_old(tmp_path: Path):
    eng = Engine()
    try:
        eng.build(_seed(tmp_path))
        before = eng.evaluate_query("java")

        with pytest.raises(OSError):
            eng.build(str(tmp_path / "missing.txt"))
        assert eng.evaluate_query("java") == before

        other = tmp_path / "other.txt"
        other.write_text("*PAGE:z\nJava\nzzz\n", encoding="utf-8")
        eng.build(str(other), scorer="tfidf")
        assert eng.search("java") == ["z - java"]
        assert len(eng.documents) == 1
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_unknown_scorer_rejected_before_loading(tmp_path: Path):
    eng = Engine()
    with pytest.raises(ValueError):
        eng.build(_seed(tmp_path), scorer="bm25")
    assert not eng.is_ready
