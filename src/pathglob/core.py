# Public entry points for pathglob.
# This file wires parsing, segment compilation and matching together.
#
# It intentionally contains no grammar rules and no regex construction.

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from pathglob.compiler import compile_segment
from pathglob.matcher import match_sequence, match_sequence_memoized
from pathglob.models import Component, DoubleStar, ParseError
from pathglob.parser import parse, split_path

__all__ = [
    "Glob",
    "ParseError",
    "from_string",
    "globmatches",
    "match",
    "split_path",
]


@dataclass(frozen=True)
class Glob:
    # A compiled pattern: one component per "/"-delimited segment.
    # Safe to share between threads; it is never mutated.
    pattern: str
    components: Tuple[Component, ...]
    memoize: bool = False

    def match(self, candidate: str) -> bool:
        segments = split_path(candidate)
        if self.memoize:
            return match_sequence_memoized(self.components, segments)
        return match_sequence(self.components, segments)


def from_string(pattern: str, memoize: bool = False) -> Glob:
    # Compile a pattern string.
    # Raises ParseError on any grammar violation or regex failure.
    components = []
    for offset, parsed in parse(pattern):
        if isinstance(parsed, DoubleStar):
            components.append(parsed)
        else:
            components.append(compile_segment(parsed, pattern=pattern, position=offset))

    return Glob(pattern=pattern, components=tuple(components), memoize=memoize)


def match(glob: Glob, candidate: str) -> bool:
    return glob.match(candidate)


def globmatches(pattern: str, candidate: str) -> bool:
    return from_string(pattern).match(candidate)
