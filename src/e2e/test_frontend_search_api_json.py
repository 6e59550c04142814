from pathlib import Path
import pytest
from searchengine.engine import Engine
from frontend.web import app as flask_app

def _seed(tmp: Path) -> str:
    p = tmp / "pages.txt"
    p.write_text(
        "*PAGE:http://a.com\nJava\nprogramming\n"
        "*PAGE:http://b.com\nPython\nprogramming\n",
        encoding="utf-8",
    )
    return str(p)

@pytest.mark.e2e
def test_frontend_search_api_json(tmp_path: Path):
    eng = Engine(); eng.build(_seed(tmp_path))

    import frontend.web as webmod
    webmod._engine = eng

    client = flask_app.test_client()
    rv = client.get("/search?q=java%20OR%20python")
    assert rv.status_code == 200
    data = rv.get_json()
    assert isinstance(data, list) and len(data) == 2
    assert {r["url"] for r in data} == {"http://a.com", "http://b.com"}
    for r in data:
        assert set(r) == {"url", "title"}

    rv = client.get("/search?q=java%20programming")
    assert rv.get_json() == [{"url": "http://a.com", "title": "java"}]

    # form encoding: spaces sent as "+"
    rv = client.get("/search", query_string={"q": "java programming"})
    assert rv.get_json() == [{"url": "http://a.com", "title": "java"}]
    rv = client.get("/search?q=java+OR+python")
    assert len(rv.get_json()) == 2

    eng.shutdown()

@pytest.mark.e2e
def test_frontend_search_empty_and_unknown(tmp_path: Path):
    eng = Engine(); eng.build(_seed(tmp_path))

    import frontend.web as webmod
    webmod._engine = eng

    client = flask_app.test_client()
    assert client.get("/search").get_json() == []
    assert client.get("/search?q=").get_json() == []
    assert client.get("/search?q=kotlin").get_json() == []

    eng.shutdown()
