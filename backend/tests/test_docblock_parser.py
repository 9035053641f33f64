"""Tests for the assembled doc block and its member lookup."""

from __future__ import annotations

import pytest

from docblock import DocBlock, MemberNotFoundError, TokenKind, format_tokens

DOC_COMMENT = """/**
 * Loads a user record.
 *
 * Results are cached per request.
 * @param $id The user id
 * @return array
 * @throws NotFoundException when missing
 */"""


class Repository:
    def find(self, user_id):
        """Find a user.

        @param user_id Primary key
        @return User
        """

    def undocumented(self):
        pass


def test_from_text_extracts_tags_and_comments() -> None:
    block = DocBlock.from_text(DOC_COMMENT)

    assert block.get_tags() == {
        "param": "$id The user id",
        "return": "array",
        "throws": "NotFoundException when missing",
    }
    assert block.get_comments() == ("Loads a user record.", "Results are cached per request.")
    assert len(block.tokens) == len(DOC_COMMENT.split("\n"))


def test_doc_comment_without_delimiters() -> None:
    block = DocBlock.from_text("Adds two numbers.\n@return int")

    assert block.get_tags() == {"return": "int"}
    assert block.get_comments() == ("Adds two numbers.",)


@pytest.mark.parametrize("raw", [None, ""])
def test_empty_doc_comment(raw: str | None) -> None:
    block = DocBlock.from_text(raw)

    assert block.tokens == ()
    assert dict(block.get_tags()) == {}
    assert block.get_comments() == ()


def test_repeated_tag_keeps_last_value() -> None:
    block = DocBlock.from_text("/** @x first */\n * @x second")

    assert block.get_tags()["x"] == "second"


def test_parsing_is_repeatable() -> None:
    assert DocBlock.from_text(DOC_COMMENT) == DocBlock.from_text(DOC_COMMENT)


def test_doc_block_is_frozen() -> None:
    block = DocBlock.from_text(DOC_COMMENT)

    with pytest.raises(AttributeError):
        block.comments = ()  # type: ignore[misc]
    with pytest.raises(TypeError):
        block.get_tags()["param"] = "changed"  # type: ignore[index]


def test_from_member_reads_docstring() -> None:
    block = DocBlock.from_member(Repository, "find")

    assert block.owner is Repository
    assert block.member == "find"
    assert block.get_tags() == {"param": "user_id Primary key", "return": "User"}
    assert block.get_comments() == ("Find a user.", "")


def test_from_member_without_docstring_is_empty() -> None:
    block = DocBlock.from_member(Repository, "undocumented")

    assert block.tokens == ()
    assert block.get_comments() == ()


def test_from_member_missing_member_raises() -> None:
    with pytest.raises(MemberNotFoundError):
        DocBlock.from_member(Repository, "missing")


def test_from_member_uses_injected_fetcher() -> None:
    calls: list[tuple[object, str]] = []

    def fetch(owner: object, member: str) -> str:
        calls.append((owner, member))
        return "/**\n * @version 1.0\n */"

    block = DocBlock.from_member("anything", "run", fetch=fetch)

    assert calls == [("anything", "run")]
    assert block.get_tags() == {"version": "1.0"}


def test_format_tokens_lists_kinds_per_line() -> None:
    block = DocBlock.from_text("/**\n * @param $a value")
    dump = format_tokens(block.tokens)

    groups = dump.split("\n\n")
    assert groups[0] == f"{TokenKind.NEWLINE.value}='\\n'"
    assert groups[1].splitlines() == [
        "DOCBLOCK_WHITESPACE='* '",
        "DOCBLOCK_TAG='@param'",
        "DOCBLOCK_TEXT='$a value'",
        "DOCBLOCK_NEWLINE='\\n'",
    ]


def test_print_doc_tokens(capsys: pytest.CaptureFixture[str]) -> None:
    DocBlock.from_text(" * hello").print_doc_tokens()

    out = capsys.readouterr().out
    assert "DOCBLOCK_TEXT='hello'" in out


def test_doc_block_is_hashable() -> None:
    first = DocBlock.from_text("* @a b")
    second = DocBlock.from_text("* @a b")

    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_constructor_snapshots_mutable_arguments() -> None:
    tags = {"a": "one"}
    comments = ["hello"]
    block = DocBlock(tags=tags, comments=comments)  # type: ignore[arg-type]

    tags["a"] = "changed"
    comments.append("later")

    assert block.get_tags() == {"a": "one"}
    assert block.get_comments() == ("hello",)
    with pytest.raises(TypeError):
        block.get_tags()["b"] = "two"  # type: ignore[index]
