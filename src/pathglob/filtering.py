# Include/exclude filtering of path strings for pathglob.
# Callers hand in candidate paths as plain strings; nothing here touches
# the filesystem or resolves anything against the current directory.

from __future__ import annotations

from typing import Iterable, Iterator, List

from pathglob.core import Glob, from_string
from pathglob.parser import SEPARATOR


def compile_patterns(patterns: Iterable[str], memoize: bool = False) -> List[Glob]:
    # Compile every pattern up front so a bad one fails before filtering.
    return [from_string(p, memoize=memoize) for p in patterns]


def matches_any(candidate: str, globs: Iterable[Glob], basename: bool = True) -> bool:
    # Check whether a candidate matches any of the compiled globs.
    # With basename enabled we test both the full string and its last
    # segment, so "*.pdf" also selects "docs/b.pdf".
    name = candidate.rsplit(SEPARATOR, 1)[-1]

    for glob in globs:
        if glob.match(candidate):
            return True
        if basename and name != candidate and glob.match(name):
            return True

    return False


def filter_paths(
    candidates: Iterable[str],
    include: Iterable[str],
    exclude: Iterable[str],
    basename: bool = True,
    memoize: bool = False,
) -> Iterator[str]:
    # Return candidates that pass the include/exclude rules, in input order.
    # Patterns compile eagerly so a bad one raises before any iteration.
    include_globs = compile_patterns(include, memoize=memoize)
    exclude_globs = compile_patterns(exclude, memoize=memoize)
    return _iter_filtered(candidates, include_globs, exclude_globs, basename)


def _iter_filtered(
    candidates: Iterable[str],
    include_globs: List[Glob],
    exclude_globs: List[Glob],
    basename: bool,
) -> Iterator[str]:
    # Exclusion wins; an empty include list admits everything.
    for candidate in candidates:
        if exclude_globs and matches_any(candidate, exclude_globs, basename=basename):
            continue
        if include_globs and not matches_any(candidate, include_globs, basename=basename):
            continue
        yield candidate
