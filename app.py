# app.py
# CustomTkinter GUI for the search engine (dark theme).
# - Load a *PAGE: corpus file and pick a scorer (tf / tfidf).
# - Background loading thread (keeps UI responsive).
# - Live ranked search with debounce; results & event log panes.

from __future__ import annotations
import threading
from typing import List, Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (ensure PYTHONPATH=src or an installed package)
from searchengine import Engine, split_display_key
from searchengine import config as CFG


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def format_results(keys: List[str]) -> str:
    """One numbered line per ranked "<id> - <title>" key."""
    lines = []
    for i, key in enumerate(keys, 1):
        url, title = split_display_key(key)
        lines.append(f"{i:<3} {title:<40} {url}")
    return "\n".join(lines)


# -------------------- main app --------------------

class SearchApp(ctk.CTk):
    """Dark-themed GUI that loads a corpus file and queries the engine."""

    def __init__(self) -> None:
        super().__init__()

        # Theme
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        # Window
        self.title("Search Engine")
        self.geometry("900x650")
        self.minsize(820, 560)

        # State
        self._engine = Engine()
        self._loading_thread: Optional[threading.Thread] = None
        self._search_after_id: Optional[str] = None

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        # Layout grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results
        self.grid_rowconfigure(4, weight=1)  # log

        # Build UI
        self._build_header()
        self._build_source_bar()
        self._build_search()
        self._build_results()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.grid_columnconfigure(0, weight=1)

        title = ctk.CTkLabel(header, text="Search Engine", font=self.font_title)
        title.grid(row=0, column=0, sticky="w", padx=12, pady=10)

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(2, weight=1)

        btn_file = ctk.CTkButton(bar, text="Choose Corpus", command=self._choose_file)
        btn_file.grid(row=0, column=0, padx=(12, 6), pady=10)

        # Scorer used for the next load
        self.opt_scorer = ctk.CTkOptionMenu(bar, values=list(CFG.SCORERS))
        self.opt_scorer.set(CFG.DEFAULT_SCORER)
        self.opt_scorer.grid(row=0, column=1, padx=(0, 6), pady=10, sticky="w")

        self.lbl_source = ctk.CTkLabel(bar, text="No corpus selected", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=2, sticky="ew", padx=(6, 6), pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", determinate_speed=1.2)
        self.progress.grid(row=0, column=3, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=4, sticky="e", padx=12, pady=10)

    def _build_search(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=(6, 6))
        box.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(box, text="Query:", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

        self.entry_query = ctk.CTkEntry(box, placeholder_text="java programming OR python")
        self.entry_query.grid(row=0, column=1, sticky="ew", padx=(6, 12), pady=10)
        self.entry_query.bind("<KeyRelease>", self._on_query_changed)

    def _build_results(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=(6, 6))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Results", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )

        self.txt_results = ctk.CTkTextbox(frame, wrap="none", font=self.font_mono)
        self.txt_results.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self.txt_results.configure(state="disabled")
        self._set_results("(no results yet: load a corpus and type a query)")

    def _build_log(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Event log", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )

        self.txt_log = ctk.CTkTextbox(frame, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._log("GUI ready. Choose a corpus file to begin.")

    # --------- source selection ---------

    def _choose_file(self) -> None:
        path = fd.askopenfilename(
            title="Choose corpus file",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")]
        )
        if not path:
            return
        self._start_loading(path, self.opt_scorer.get())

    # --------- loading pipeline (threaded) ---------

    def _start_loading(self, path: str, scorer: str) -> None:
        # prevent re-entrancy
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "A corpus is already loading. Please wait.")
            return

        self.lbl_source.configure(text=shorten_path(path))
        self._set_status(f"Loading ({scorer})…")
        self.progress.start()

        self._loading_thread = threading.Thread(
            target=self._load_worker, args=(path, scorer), daemon=True
        )
        self._loading_thread.start()

    def _load_worker(self, path: str, scorer: str) -> None:
        # build() swaps state atomically; queries keep using the old corpus meanwhile
        try:
            self._engine.build(path, scorer=scorer)
            n = len(self._engine.documents)
        except (OSError, ValueError) as exc:
            self.after(0, lambda e=exc: self._on_load_error(e))
            return

        self.after(0, lambda: self._on_load_ok(n, scorer))

    def _on_load_ok(self, n_documents: int, scorer: str) -> None:
        self.progress.stop()
        self._set_status(f"Loaded {n_documents:,} pages.")
        self._log(f"Corpus ready ({n_documents} pages, scorer={scorer}).")
        self.entry_query.focus_set()
        self._do_search()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while loading corpus.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", "Failed to load corpus.\nSee event log for details.")

    # --------- search ---------

    def _on_query_changed(self, _ev=None) -> None:
        # debounce for smoother typing
        if self._search_after_id is not None:
            self.after_cancel(self._search_after_id)
        self._search_after_id = self.after(160, self._do_search)

    def _do_search(self) -> None:
        self._search_after_id = None
        q = self.entry_query.get()
        if not q.strip():
            self._set_results("")
            return
        if not self._engine.is_ready:
            self._set_results("error: please load a corpus before searching.")
            self._log("Search attempted before corpus load.")
            return

        keys = self._engine.evaluate_query(q)
        if not keys:
            self._set_results("No web page contains the query word.")
            return
        self._set_results(format_results(keys))

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_results(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        if text:
            self.txt_results.insert("end", text)
        self.txt_results.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    # --------- lifecycle ---------

    def _on_close(self) -> None:
        self._engine.shutdown()
        self.destroy()


if __name__ == "__main__":
    app = SearchApp()
    app.mainloop()
