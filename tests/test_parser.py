# Unit tests for pathglob.parser.
# These tests validate segment splitting, fragment grammar and error positions.

from __future__ import annotations

import pytest

from pathglob.models import (
    Alternatives,
    Asterisk,
    CharacterClass,
    DoubleStar,
    Literal,
    ParseError,
    QuestionMark,
)
from pathglob.parser import parse, parse_segment, split_path


def test_split_path_empty_string_has_no_segments() -> None:
    assert split_path("") == []


def test_split_path_keeps_empty_segments() -> None:
    assert split_path("a//b") == ["a", "", "b"]
    assert split_path("/a/") == ["", "a", ""]
    assert split_path("a") == ["a"]


def test_parse_records_segment_offsets() -> None:
    assert parse("a/**/bc") == [
        (0, (Literal("a"),)),
        (2, DoubleStar()),
        (5, (Literal("bc"),)),
    ]


def test_parse_empty_middle_segment_has_no_fragments() -> None:
    assert parse("a//b")[1] == (2, ())


def test_parse_segment_double_star_only_when_whole_segment() -> None:
    assert parse_segment("**") == DoubleStar()
    assert parse_segment("***") == (Asterisk(), Asterisk(), Asterisk())
    assert parse_segment("a**b") == (Literal("a"), Asterisk(), Asterisk(), Literal("b"))


def test_parse_segment_literal_run_is_maximal() -> None:
    assert parse_segment("abc.txt") == (Literal("abc.txt"),)
    assert parse_segment("a,b") == (Literal("a,b"),)


def test_parse_segment_wildcards() -> None:
    assert parse_segment("a?c") == (Literal("a"), QuestionMark(), Literal("c"))
    assert parse_segment("*.txt") == (Asterisk(), Literal(".txt"))


def test_parse_segment_escape_takes_next_character_verbatim() -> None:
    assert parse_segment("\\*x") == (Literal("*"), Literal("x"))
    assert parse_segment("ab\\*") == (Literal("ab"), Literal("*"))
    assert parse_segment("\\\\") == (Literal("\\"),)
    assert parse_segment("\\]") == (Literal("]"),)


def test_parse_segment_trailing_backslash_is_literal() -> None:
    assert parse_segment("ab\\") == (Literal("ab\\"),)


def test_parse_segment_alternatives_have_set_semantics() -> None:
    got = parse_segment("{foo,bar,foo}.txt")
    assert got == (Alternatives(frozenset({"foo", "bar"})), Literal(".txt"))
    assert parse_segment("{bar,foo}") == parse_segment("{foo,bar}")


def test_parse_segment_character_classes() -> None:
    assert parse_segment("[abc]") == (CharacterClass(negated=False, contents="abc"),)
    assert parse_segment("[!abc]") == (CharacterClass(negated=True, contents="abc"),)
    assert parse_segment("[a-z]") == (CharacterClass(negated=False, contents="a-z"),)


def test_parse_segment_leading_close_bracket_is_member() -> None:
    assert parse_segment("[]ab]") == (CharacterClass(negated=False, contents="]ab"),)
    assert parse_segment("[!]a]x") == (CharacterClass(negated=True, contents="]a"), Literal("x"))


def test_parse_segment_class_body_is_raw() -> None:
    assert parse_segment("[*?{\\]") == (CharacterClass(negated=False, contents="*?{\\"),)


@pytest.mark.parametrize(
    "pattern, position",
    [
        ("[abc", 0),
        ("x/[abc", 2),
        ("[]", 0),
        ("[!", 0),
        ("{a,b", 0),
        ("{", 0),
        ("{a,}", 3),
        ("{,a}", 1),
        ("{}", 1),
        ("{a*b}", 2),
        ("a]", 1),
        ("a}", 1),
        ("ok/x}", 4),
    ],
)
def test_parse_errors_report_position(pattern: str, position: int) -> None:
    with pytest.raises(ParseError) as excinfo:
        parse(pattern)
    assert excinfo.value.position == position
    assert excinfo.value.pattern == pattern
    assert f"position {position}" in str(excinfo.value)


def test_parse_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse("[abc")
