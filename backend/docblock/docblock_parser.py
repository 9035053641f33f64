"""Parsed doc block built from raw comment text or from a documented member."""
from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from .docblock_models import Document
from .docblock_reducer import reduce_tokens
from .docblock_tokenizer import tokenize_doc_comment

logger = logging.getLogger(__name__)

DocCommentFetcher = Callable[[Any, str], Optional[str]]


class MemberNotFoundError(LookupError):
    """Raised when the owner has no member with the requested name."""


def python_doc_comment(owner: Any, member: str) -> str | None:
    """Return the cleaned docstring of ``owner.member``.

    Raises :class:`MemberNotFoundError` when the member does not exist.
    """

    try:
        target = getattr(owner, member)
    except AttributeError as exc:
        owner_name = getattr(owner, "__qualname__", None) or type(owner).__qualname__
        raise MemberNotFoundError(f"{owner_name} has no member '{member}'") from exc
    return inspect.getdoc(target)


@dataclass(frozen=True, slots=True)
class DocBlock:
    """Tokens, tags and comments of one doc comment.

    Everything is computed once when the instance is built and stays read-only.
    Use :meth:`from_text` or :meth:`from_member` rather than the constructor.
    """

    tokens: Document = ()
    tags: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), hash=False)
    comments: tuple[str, ...] = ()
    owner: Any = field(default=None, hash=False)
    member: str | None = None

    def __post_init__(self) -> None:
        # Snapshot caller supplied containers so the instance cannot be mutated through them.
        object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))
        object.__setattr__(self, "comments", tuple(self.comments))
        object.__setattr__(self, "tokens", tuple(tuple(group) for group in self.tokens))

    @classmethod
    def from_text(cls, doc_comment: str | None) -> "DocBlock":
        tokens = tokenize_doc_comment(doc_comment)
        tags, comments = reduce_tokens(tokens)
        return cls(tokens=tokens, tags=tags, comments=comments)

    @classmethod
    def from_member(
        cls,
        owner: Any,
        member: str,
        *,
        fetch: DocCommentFetcher = python_doc_comment,
    ) -> "DocBlock":
        """Fetch the doc comment of ``owner.member`` through ``fetch`` and parse it."""

        doc_comment = fetch(owner, member)
        if not doc_comment:
            logger.debug("No doc comment found for member '%s'", member)
        tokens = tokenize_doc_comment(doc_comment)
        tags, comments = reduce_tokens(tokens)
        return cls(tokens=tokens, tags=tags, comments=comments, owner=owner, member=member)

    def get_tags(self) -> Mapping[str, str]:
        return self.tags

    def get_comments(self) -> tuple[str, ...]:
        return self.comments

    def print_doc_tokens(self) -> None:
        print(format_tokens(self.tokens))


def format_tokens(document: Document) -> str:
    """Render a document as ``KIND=text`` lines, one blank line between groups."""

    chunks: list[str] = []
    for group in document:
        lines = [f"{token.kind.value}={token.text!r}" for token in group]
        chunks.append("\n".join(lines))
    return "\n\n".join(chunks)


__all__ = [
    "DocBlock",
    "DocCommentFetcher",
    "MemberNotFoundError",
    "format_tokens",
    "python_doc_comment",
]
