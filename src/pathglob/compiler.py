# Segment compilation for pathglob.
# Turns the fragments of one segment into a single anchored regular
# expression, compiled once so matching a segment is one call.

from __future__ import annotations

import re
from typing import Sequence

from pathglob.escape import escape_class_body, escape_literal
from pathglob.models import (
    Alternatives,
    Asterisk,
    CharacterClass,
    Fragment,
    Literal,
    ParseError,
    QuestionMark,
    SegmentPattern,
)


def fragment_to_regex(fragment: Fragment) -> str:
    if isinstance(fragment, Literal):
        return escape_literal(fragment.text)

    if isinstance(fragment, Alternatives):
        # Sorted so the same set always yields the same expression.
        return "(" + "|".join(escape_literal(o) for o in sorted(fragment.options)) + ")"

    if isinstance(fragment, CharacterClass):
        body = escape_class_body(fragment.contents)
        return f"[^{body}]" if fragment.negated else f"[{body}]"

    if isinstance(fragment, QuestionMark):
        return "."

    if isinstance(fragment, Asterisk):
        return ".*"

    raise TypeError(f"Unknown fragment: {fragment!r}")


def segment_regex(fragments: Sequence[Fragment]) -> str:
    return "^" + "".join(fragment_to_regex(f) for f in fragments) + "$"


def compile_segment(
    fragments: Sequence[Fragment],
    pattern: str = "",
    position: int = 0,
) -> SegmentPattern:
    # Compile one segment's fragments.
    # DOTALL lets "?" and "*" consume any character, newlines included.
    # A regex failure is reported as a ParseError so it surfaces at
    # compile time and never during matching.
    source = segment_regex(fragments)
    try:
        regex = re.compile(source, re.DOTALL)
    except re.error as exc:
        raise ParseError(f"invalid segment expression {source!r} ({exc})", pattern, position) from exc

    return SegmentPattern(fragments=tuple(fragments), regex=regex)
