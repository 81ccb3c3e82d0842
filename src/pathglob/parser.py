# Glob grammar for pathglob.
# Consumes a pattern string and produces, per "/"-delimited segment,
# either a DoubleStar marker or the ordered fragments of that segment.
#
# Compilation of fragments into regular expressions lives in compiler.py.

from __future__ import annotations

from typing import List, Tuple, Union

from pathglob.models import (
    Alternatives,
    Asterisk,
    CharacterClass,
    DoubleStar,
    Fragment,
    Literal,
    ParseError,
    QuestionMark,
)

SEPARATOR = "/"

# Characters that can never start or continue a literal run.
SPECIAL_CHARS = set("{}[]*?/")

ParsedSegment = Union[DoubleStar, Tuple[Fragment, ...]]


def split_path(text: str) -> List[str]:
    # Split a pattern or a candidate path into segments.
    # The empty string has no segments at all; anything else is a naive
    # split, so "a//b" and "a/" keep their empty segments.
    # As a consequence "*" does not match "": there is no segment to test.
    if not text:
        return []
    return text.split(SEPARATOR)


def parse(pattern: str) -> List[Tuple[int, ParsedSegment]]:
    # Parse every segment of a pattern.
    # Each entry carries the segment's offset into the pattern so later
    # stages can report errors against the original string.
    parsed = []
    offset = 0
    for segment in split_path(pattern):
        parsed.append((offset, parse_segment(segment, pattern=pattern, offset=offset)))
        offset += len(segment) + len(SEPARATOR)
    return parsed


def parse_segment(segment: str, pattern: str = "", offset: int = 0) -> ParsedSegment:
    if segment == "**":
        return DoubleStar()

    pattern = pattern or segment
    fragments = []
    i = 0
    while i < len(segment):
        fragment, i = _parse_fragment(segment, i, pattern, offset)
        fragments.append(fragment)
    return tuple(fragments)


def _parse_fragment(segment: str, i: int, pattern: str, offset: int) -> Tuple[Fragment, int]:
    # Try each grammar rule in priority order at position i.
    # Returns the fragment and the position just past it.
    ch = segment[i]

    # An escape always takes the next character verbatim.
    if ch == "\\" and i + 1 < len(segment):
        return Literal(segment[i + 1]), i + 2

    if ch == "?":
        return QuestionMark(), i + 1

    if ch == "*":
        return Asterisk(), i + 1

    if ch == "{":
        return _parse_alternatives(segment, i, pattern, offset)

    if ch == "[":
        return _parse_character_class(segment, i, pattern, offset)

    if ch not in SPECIAL_CHARS:
        return _parse_literal_run(segment, i)

    raise ParseError(f"unexpected {ch!r}", pattern, offset + i)


def _parse_literal_run(segment: str, i: int) -> Tuple[Fragment, int]:
    # Maximal munch over ordinary characters.
    # The run stops before a backslash that escapes something, so the
    # result is the same as emitting one literal per character.
    j = i
    while j < len(segment):
        ch = segment[j]
        if ch in SPECIAL_CHARS:
            break
        if ch == "\\" and j + 1 < len(segment):
            break
        j += 1
    return Literal(segment[i:j]), j


def _parse_alternatives(segment: str, i: int, pattern: str, offset: int) -> Tuple[Fragment, int]:
    # "{" item ("," item)* "}" where items are non-empty runs of ordinary
    # characters excluding ",".
    items = []
    j = i + 1
    while True:
        start = j
        while j < len(segment) and segment[j] not in SPECIAL_CHARS and segment[j] != ",":
            j += 1

        if j >= len(segment):
            raise ParseError("unterminated alternation group", pattern, offset + i)
        if j == start:
            raise ParseError("empty alternative", pattern, offset + j)

        items.append(segment[start:j])

        if segment[j] == ",":
            j += 1
            continue
        if segment[j] == "}":
            return Alternatives(frozenset(items)), j + 1

        raise ParseError(
            f"unexpected {segment[j]!r} in alternation group", pattern, offset + j
        )


def _parse_character_class(segment: str, i: int, pattern: str, offset: int) -> Tuple[Fragment, int]:
    # "[" ["!"] body "]" with the classic quirk: a "]" right after the
    # opening bracket (or "[!") is a member, not the terminator.
    j = i + 1
    negated = False
    if j < len(segment) and segment[j] == "!":
        negated = True
        j += 1

    start = j
    if j < len(segment) and segment[j] == "]":
        j += 1
    while j < len(segment) and segment[j] != "]":
        j += 1

    if j >= len(segment):
        raise ParseError("unterminated character class", pattern, offset + i)

    return CharacterClass(negated=negated, contents=segment[start:j]), j + 1
