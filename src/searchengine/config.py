from __future__ import annotations
import os
from pathlib import Path

# Corpus format
PAGE_MARKER: str = "*PAGE:"      # literal, case-sensitive record prefix
TITLE_SEPARATOR: str = " - "     # "<id> - <title>" display keys
ENCODING: str = "utf-8"

# Scoring: "tf" (term frequency) or "tfidf"
SCORERS = ("tf", "tfidf")
DEFAULT_SCORER: str = "tf"

# /* ~~~ process bootstrap: config file holds the corpus path ~~~ */
DEFAULT_CONFIG_FILE: str = "config.txt"
DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8080

# Progress logging (set SEARCHENGINE_VERBOSE=1 to enable)
VERBOSE = os.environ.get("SEARCHENGINE_VERBOSE") == "1"


def read_corpus_path(config_file: str = DEFAULT_CONFIG_FILE) -> str:
    """
    Return the corpus path stored in `config_file` (whole file, stripped).
    Raises FileNotFoundError if the file is missing and ValueError if it is blank.
    """
    text = Path(config_file).read_text(encoding=ENCODING).strip()
    if not text:
        raise ValueError(f"{config_file} does not name a corpus file")
    return text
