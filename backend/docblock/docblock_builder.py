"""Build API responses from parsed doc blocks."""
from __future__ import annotations

from .docblock_parser import DocBlock
from .schemas import ParseResponse, TokenSchema


def build_parse_response(block: DocBlock, *, include_tokens: bool) -> ParseResponse:
    tokens = None
    if include_tokens:
        tokens = [
            [TokenSchema(kind=token.kind, text=token.text) for token in group]
            for group in block.tokens
        ]
    return ParseResponse(
        tags=dict(block.get_tags()),
        comments=list(block.get_comments()),
        tokens=tokens,
    )


__all__ = ["build_parse_response"]
