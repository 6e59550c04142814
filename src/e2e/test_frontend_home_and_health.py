from pathlib import Path
import pytest
from searchengine.engine import Engine
from frontend.web import app as flask_app

def _seed(tmp: Path) -> str:
    p = tmp / "pages.txt"
    p.write_text("*PAGE:doc1\nHello\nworld\n", encoding="utf-8")
    return str(p)

@pytest.mark.e2e
def test_frontend_home_page_renders(tmp_path: Path):
    eng = Engine(); eng.build(_seed(tmp_path))

    import frontend.web as webmod
    webmod._engine = eng

    client = flask_app.test_client()
    r = client.get("/")
    assert r.status_code == 200
    html = r.data.decode("utf-8", errors="ignore").lower()
    assert "searchbox" in html and "/search?q=" in html

    eng.shutdown()

@pytest.mark.e2e
def test_frontend_health(tmp_path: Path):
    eng = Engine(); eng.build(_seed(tmp_path), scorer="tfidf")

    import frontend.web as webmod
    webmod._engine = eng

    client = flask_app.test_client()
    data = client.get("/health").get_json()
    assert data == {"ok": True, "documents": 1, "scorer": "tfidf"}

    eng.shutdown()
    data = client.get("/health").get_json()
    assert data["ok"] is False and data["documents"] == 0
