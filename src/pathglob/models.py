# Shared data models for pathglob.
# Lives in its own module to avoid circular imports between the parser,
# the compiler, the matcher and the cli.
#
# Every model is frozen; nothing here is mutated after construction.

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import FrozenSet, List, Tuple, Union


class ParseError(ValueError):
    # Raised when a pattern cannot be compiled.
    # Matching never raises; only compilation reports problems.
    def __init__(self, reason: str, pattern: str, position: int):
        self.reason = reason
        self.pattern = pattern
        self.position = position
        super().__init__(f"{reason} at position {position} in pattern {pattern!r}")


# Fragments: one syntactic unit inside a single segment pattern.


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Alternatives:
    options: FrozenSet[str]


@dataclass(frozen=True)
class CharacterClass:
    negated: bool
    contents: str


@dataclass(frozen=True)
class QuestionMark:
    pass


@dataclass(frozen=True)
class Asterisk:
    pass


Fragment = Union[Literal, Alternatives, CharacterClass, QuestionMark, Asterisk]


# Components: the compiled form of one "/"-delimited pattern segment.


@dataclass(frozen=True)
class DoubleStar:
    pass


@dataclass(frozen=True)
class SegmentPattern:
    fragments: Tuple[Fragment, ...]
    regex: re.Pattern = field(compare=False, repr=False)

    def matches(self, segment: str) -> bool:
        return self.regex.fullmatch(segment) is not None


Component = Union[DoubleStar, SegmentPattern]


@dataclass(frozen=True)
class Options:
    include: List[str]
    exclude: List[str]

    memoize: bool
    basename: bool
