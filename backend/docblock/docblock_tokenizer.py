"""Line based lexer for doc comment blocks."""
from __future__ import annotations

import logging
import re

from .docblock_models import Document, Token, TokenGroup, TokenKind

logger = logging.getLogger(__name__)

NEWLINE_TEXT = "\n"
TAG_MARKER = "@"

# Lines made only of one of these markers count as a bare newline.
DELIMITER_MARKERS = frozenset({"/**", "*", "*/"})

_leader_re = re.compile(r"\*[ \t]+")
_tag_re = re.compile(r"@[a-zA-Z0-9]+\s")


def _cut(line: str, match: re.Match[str]) -> str:
    return line[: match.start()] + line[match.end():]


def tokenize_line(line: str) -> TokenGroup:
    """Classify a single doc comment line into an ordered token group."""

    line = line.strip()
    if line in DELIMITER_MARKERS:
        return (Token(TokenKind.NEWLINE, NEWLINE_TEXT),)

    tokens: list[Token] = []

    leader = _leader_re.match(line)
    if leader:
        tokens.append(Token(TokenKind.WHITESPACE, leader.group(0)))
        line = _cut(line, leader)

    tag = _tag_re.search(line)
    if tag:
        tokens.append(Token(TokenKind.TAG, tag.group(0).strip()))
        line = _cut(line, tag)

    tokens.append(Token(TokenKind.TEXT, line.strip()))
    tokens.append(Token(TokenKind.NEWLINE, NEWLINE_TEXT))
    return tuple(tokens)


def tokenize_doc_comment(doc_comment: str | None) -> Document:
    """Return one token group per line of ``doc_comment``.

    ``None`` and the empty string both produce an empty document. Otherwise the
    text is split on ``"\\n"`` and every line, blank or not, yields a group.
    """

    if not doc_comment:
        return ()

    lines = doc_comment.split("\n")
    document = tuple(tokenize_line(line) for line in lines)
    logger.debug("Tokenized doc comment into %s line groups", len(document))
    return document


__all__ = [
    "DELIMITER_MARKERS",
    "NEWLINE_TEXT",
    "TAG_MARKER",
    "tokenize_doc_comment",
    "tokenize_line",
]
