"""
Corpus Loading Module

This module turns the raw corpus text into Document records. The corpus is a
flat sequence of lines; a line starting with the literal marker `*PAGE:`
opens a new record whose id is the remainder of that line:

    *PAGE:<document-id>
    <title line>
    <term line>
    ...

Record acceptance:
    1. When a marker is met, the buffered previous record is kept only if it
       has a title line and a first content line, both non-empty.
    2. The last record of the input is always kept, even if it would fail
       the check above. Calling code should expect degenerate trailing
       documents (e.g. no title, no terms).

Key Functions:
    load_corpus(path): Read a corpus file into a list of Documents
    parse_lines(lines): Parse already-read lines (no I/O)
    has_title_and_content(lines, index): Record validity predicate
"""

# src/searchengine/loader.py
from __future__ import annotations
import logging
from typing import Iterable, List

from .models import Document
from .config import ENCODING, PAGE_MARKER

log = logging.getLogger(__name__)


def has_title_and_content(lines: List[str], index: int = 0) -> bool:
    """
    Check that the record starting at `index` has a title and a content line.

    Args:
        lines: Buffered lines, marker line included
        index: Position of the marker line in `lines`

    Returns:
        bool: True if lines[index] is a marker followed by two non-empty lines

    Example:
        >>> has_title_and_content(["*PAGE:doc1", "Title", ""], 0)
        False
    """
    if index >= len(lines) or not lines[index].startswith(PAGE_MARKER):
        return False
    if index + 2 >= len(lines):
        return False
    if not lines[index + 1]:
        return False
    if not lines[index + 2]:
        return False
    return True


def _make_document(buffer: List[str]) -> Document:
    doc_id = buffer[0][len(PAGE_MARKER):]
    title = buffer[1].lower() if len(buffer) > 1 else ""
    terms = tuple(line.lower() for line in buffer[1:])
    return Document(id=doc_id, title=title, terms=terms)


def parse_lines(lines: Iterable[str]) -> List[Document]:
    """
    Parse corpus lines into Documents, applying the acceptance rules above.
    Never raises for malformed content; invalid records are dropped.
    """
    documents: List[Document] = []
    buffer: List[str] = []
    dropped = 0

    for raw in lines:
        line = raw.rstrip("\r\n")
        if line.startswith(PAGE_MARKER):
            if buffer:
                if has_title_and_content(buffer, 0):
                    documents.append(_make_document(buffer))
                else:
                    dropped += 1
                    log.debug("Dropping malformed record: %r", buffer[0])
                buffer = []
        elif not buffer:
            # text before the first marker belongs to no record
            log.debug("Skipping line outside any record: %r", line)
            continue
        buffer.append(line)

    # the trailing record is accepted unconditionally
    if buffer:
        documents.append(_make_document(buffer))

    if dropped:
        log.debug("Dropped %d malformed record(s)", dropped)
    return documents


def load_corpus(path: str) -> List[Document]:
    """
    Load a corpus file into memory.

    Args:
        path: Path to the corpus text file (UTF-8)

    Returns:
        List[Document]: Accepted documents, in file order

    Raises:
        OSError: If the file cannot be opened or read
    """
    log.info("Loading corpus from %s", path)
    with open(path, "r", encoding=ENCODING, errors="ignore") as f:
        documents = parse_lines(f)
    log.info("Loaded %d documents from %s", len(documents), path)
    return documents
