"""Token definitions shared by the tokenizer and the reducer."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    NEWLINE = "DOCBLOCK_NEWLINE"
    WHITESPACE = "DOCBLOCK_WHITESPACE"
    TAG = "DOCBLOCK_TAG"
    TEXT = "DOCBLOCK_TEXT"


@dataclass(frozen=True, slots=True)
class Token:
    """A classified fragment of a single doc comment line

    Parameters
    ----------
    kind:
        The token classification.
    text:
        The exact substring matched for ``kind``. Newline tokens carry ``"\\n"``,
        tag tokens keep their leading ``@``.
    """

    kind: TokenKind
    text: str


TokenGroup = tuple[Token, ...]
Document = tuple[TokenGroup, ...]


__all__ = ["Document", "Token", "TokenGroup", "TokenKind"]
