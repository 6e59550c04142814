from __future__ import annotations
import argparse
import sys
from flask import Flask, request, jsonify, Response
from searchengine.engine import Engine
from searchengine.models import split_display_key
from searchengine import config as CFG

app = Flask(__name__)
_engine: Engine | None = None

# ---------- API ----------
@app.get("/search")
def api_search():
    q = request.args.get("q", "", type=str)
    if not q:
        return jsonify([])
    keys = _engine.evaluate_query(q)  # type: ignore
    rows = []
    for key in keys:
        url, title = split_display_key(key)
        rows.append({"url": url, "title": title})
    return jsonify(rows)

@app.get("/health")
def health():
    ready = _engine is not None and _engine.is_ready
    return jsonify({
        "ok": ready,
        "documents": len(_engine.documents) if ready else 0,  # type: ignore
        "scorer": _engine.scorer_name if ready else None,     # type: ignore
    })

# ---------- UI ----------
@app.get("/")
def home():
    # A tiny SPA: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Search Engine • Flask UI</title>
<style>
:root{
  --bg:#0b0f14;
  --panel:#0f141b;
  --ink:#cfd8e3;
  --muted:#8a94a6;
  --accent:#6ee7ff;
  --accent-2:#22d3ee;
  --border:#1c2530;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0; letter-spacing:.3px; }
.controls{ display:flex; gap:12px; align-items:center; margin:12px 0 4px 0; flex-wrap:wrap; }
.input{ position:relative; flex:1; min-width:240px; }
.input input{
  width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
.input input:focus{ border-color:var(--accent) }
.btn{
  padding:10px 14px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer;
}
.btn:hover{ border-color:var(--accent-2) }
.meta{ color:var(--muted); font-size:13px; margin-top:6px; }
.results{ margin-top:16px; border-radius:12px; border:1px solid var(--border); }
.row{ display:grid; grid-template-columns:3rem 1fr; gap:10px; padding:12px 14px; border-top:1px solid var(--border); }
.row:first-child{ border-top:none }
.small{ color:var(--muted); font-variant-numeric:tabular-nums }
.empty{ padding:24px; text-align:center; color:var(--muted); }
a { color: var(--accent); text-decoration: none }
a:hover { text-decoration: underline }
footer{ margin:26px 0 6px 0; color:var(--muted); font-size:12px; text-align:center; }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Search Engine</h1>
      <div class="controls">
        <div class="input">
          <input id="searchbox" type="text" placeholder="java programming OR python" autocomplete="off" autofocus />
        </div>
        <button id="searchbutton" class="btn">Search</button>
      </div>
      <div id="responsesize" class="meta">Ready.</div>
      <div class="results">
        <div id="urllist" class="empty">Enter a query and press Enter.</div>
      </div>
    </div>
    <footer>Built with Flask • AND within a clause, OR between clauses</footer>
  </div>

<script>
const $ = (sel) => document.querySelector(sel);
const box = $("#searchbox"), list = $("#urllist"), size = $("#responsesize");
function esc(s){ return String(s).replaceAll("&","&amp;").replaceAll("<","&lt;").replaceAll('"',"&quot;"); }

async function performSearch(){
  const query = box.value.trim();
  if(query.length === 0){ return; }
  const resp = await fetch(`/search?q=${encodeURIComponent(query)}`);
  const data = await resp.json();
  size.textContent = data.length === 0
    ? "No web page contains the query word."
    : `${data.length} websites retrieved`;
  if(data.length === 0){
    list.className = "empty";
    list.innerHTML = "No matches.";
    return;
  }
  list.className = "";
  list.innerHTML = data.map((page, i) => `
    <div class="row">
      <div class="small">${i+1}</div>
      <div><a href="${esc(page.url)}">${esc(page.title)}</a></div>
    </div>`).join("");
}

$("#searchbutton").addEventListener("click", performSearch);
box.addEventListener("keydown", (ev) => { if(ev.key === "Enter"){ performSearch(); } });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--corpus", default=None, help="Corpus file (overrides --config)")
    ap.add_argument("--config", default=CFG.DEFAULT_CONFIG_FILE)
    ap.add_argument("--scorer", choices=list(CFG.SCORERS), default=CFG.DEFAULT_SCORER)
    ap.add_argument("--host", default=CFG.DEFAULT_HOST)
    ap.add_argument("--port", type=int, default=CFG.DEFAULT_PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    try:
        corpus = args.corpus or CFG.read_corpus_path(args.config)
        _engine.build(corpus, scorer=args.scorer, verbose=args.verbose)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"WebServer running on http://{args.host}:{args.port}")
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
