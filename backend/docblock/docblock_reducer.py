"""Fold a tokenized doc comment into tags and free-form comments."""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from .docblock_models import Document, TokenKind
from .docblock_tokenizer import TAG_MARKER

logger = logging.getLogger(__name__)


def reduce_tokens(document: Document) -> tuple[Mapping[str, str], tuple[str, ...]]:
    """Split the document into a tag map and a comment list.

    A tag token claims the next text token of the same line. Its value is stored
    under the tag name without the leading marker; a repeated name overwrites the
    earlier value. Text without a pending tag is appended to the comments, empty
    strings included. A tag that is never followed by text on its line is dropped.
    """

    tags: dict[str, str] = {}
    comments: list[str] = []

    for group in document:
        tag_name: str | None = None

        for token in group:
            if token.kind in (TokenKind.NEWLINE, TokenKind.WHITESPACE):
                continue

            if token.kind is TokenKind.TAG:
                tag_name = token.text
                continue

            if tag_name is not None:
                tags[tag_name.removeprefix(TAG_MARKER)] = token.text
                tag_name = None
            else:
                comments.append(token.text)

    logger.debug("Reduced doc comment to %s tags and %s comments", len(tags), len(comments))
    return MappingProxyType(tags), tuple(comments)


__all__ = ["reduce_tokens"]
