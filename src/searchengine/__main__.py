from __future__ import annotations
import argparse, sys, json
from . import Engine
from . import config as CFG
from .models import split_display_key


def resolve_corpus_path(corpus: str | None, config_file: str) -> str:
    """Explicit --corpus wins; otherwise the path stored in the config file."""
    return corpus or CFG.read_corpus_path(config_file)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Keyword search CLI (Engine-backed)")
    p.add_argument("--corpus", default=None, help="Corpus file (overrides --config)")
    p.add_argument("--config", default=CFG.DEFAULT_CONFIG_FILE, help="File holding the corpus path")
    p.add_argument("--scorer", choices=list(CFG.SCORERS), default=CFG.DEFAULT_SCORER)
    p.add_argument("--q", default=None, help="Single ranked query to run once")
    p.add_argument("--term", default=None, help="Raw index lookup for one term")
    p.add_argument("--repl", action="store_true", help="Interactive loop after build")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    eng = Engine()
    try:
        try:
            path = resolve_corpus_path(args.corpus, args.config)
            eng.build(path, scorer=args.scorer, verbose=args.verbose)
        except (OSError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

        def show(keys: list[str]):
            rows = [split_display_key(k) for k in keys]
            if args.json:
                print(json.dumps([{"url": u, "title": t} for u, t in rows], ensure_ascii=False, indent=2))
            else:
                if not rows:
                    print("(no matches)"); return
                print("#   URL                                  Title")
                for i, (url, title) in enumerate(rows, 1):
                    print(f"{i:<3} {url:<36} {title}")

        if args.term:
            show(eng.search(args.term))

        if args.q:
            show(eng.evaluate_query(args.q))

        if args.repl:
            print("Type a query (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                show(eng.evaluate_query(q))

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
