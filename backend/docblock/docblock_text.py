"""Utilities for pulling doc comment blocks out of uploaded source files."""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

_doc_comment_re = re.compile(r"/\*\*(?!/).*?\*/", re.DOTALL)


class UnsupportedSourceError(RuntimeError):
    """Raised when an uploaded file type is not accepted."""


def decode_payload(payload: bytes) -> str:
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError:
        return payload.decode("cp1251", errors="ignore")


def find_doc_comments(source: str) -> list[str]:
    """Return every ``/** ... */`` block in ``source`` in file order.

    Plain ``/* ... */`` comments are skipped. Blocks are returned verbatim,
    delimiters included.
    """

    return [match.group(0) for match in _doc_comment_re.finditer(source)]


def load_doc_comments(filename: str, source: str, allowed_suffixes: Iterable[str]) -> list[str]:
    """Return the doc comment blocks of decoded source text from ``filename``."""

    suffix = Path(filename or "").suffix.lower()
    allowed = {item.lower() for item in allowed_suffixes}
    if suffix not in allowed:
        raise UnsupportedSourceError(
            f"Unsupported file type '{suffix or filename}'. Allowed: {', '.join(sorted(allowed))}"
        )

    blocks = find_doc_comments(source)
    logger.debug("Found %s doc comment blocks in '%s'", len(blocks), filename)
    return blocks


__all__ = [
    "UnsupportedSourceError",
    "decode_payload",
    "find_doc_comments",
    "load_doc_comments",
]
