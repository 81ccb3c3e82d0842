# Segment-wise matching for pathglob.
# Walks the compiled components against the segments of a candidate path,
# backtracking over how many segments each "**" absorbs.
#
# Neither matcher recurses, so path depth is bounded only by memory.
# Both must give identical answers; the table-driven one only bounds the
# work to O(components x segments).

from __future__ import annotations

from typing import List, Sequence

from pathglob.models import Component, DoubleStar


def match_sequence(components: Sequence[Component], segments: Sequence[str]) -> bool:
    # Depth-first backtracking over (component, segment) positions.
    # The stack is popped in the same order the recursive form would try.
    stack = [(0, 0)]
    while stack:
        ci, si = stack.pop()
        if ci == len(components):
            if si == len(segments):
                return True
            continue
        if si == len(segments):
            continue

        component = components[ci]
        if isinstance(component, DoubleStar):
            # Absorb one more segment first, then let the pattern move on.
            stack.append((ci + 1, si))
            stack.append((ci, si + 1))
        elif component.matches(segments[si]):
            stack.append((ci + 1, si + 1))

    return False


def match_sequence_memoized(components: Sequence[Component], segments: Sequence[str]) -> bool:
    # Same decision table, filled bottom-up one component row at a time.
    # next_row[si] holds the answer for (ci + 1, si).
    n = len(segments)
    next_row: List[bool] = [False] * n + [True]

    for ci in range(len(components) - 1, -1, -1):
        component = components[ci]
        row = [False] * (n + 1)
        for si in range(n - 1, -1, -1):
            if isinstance(component, DoubleStar):
                row[si] = row[si + 1] or next_row[si]
            else:
                row[si] = next_row[si + 1] and component.matches(segments[si])
        next_row = row

    return next_row[0]
