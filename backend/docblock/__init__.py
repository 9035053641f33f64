"""Doc block tokenizer and tag extraction service."""

from .docblock_models import Document, Token, TokenGroup, TokenKind
from .docblock_parser import DocBlock, MemberNotFoundError, format_tokens

__all__ = [
    "DocBlock",
    "Document",
    "MemberNotFoundError",
    "Token",
    "TokenGroup",
    "TokenKind",
    "format_tokens",
]
