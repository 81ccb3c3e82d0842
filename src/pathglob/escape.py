# Regular-expression escaping for pathglob.
# Turns literal text and raw bracket-expression bodies into fragments
# that can be embedded in a Python `re` pattern without changing meaning.
#
# This module is pure logic and must remain side-effect free.

from __future__ import annotations

# Characters that stay meta even inside a one-character class.
# `[` triggers the nested-set warning and a leading `^` negates the class.
_BACKSLASH_ESCAPED = set("\\][^")


def escape_literal(text: str) -> str:
    # Escape a literal string one character at a time.
    # Alphanumerics are never meta; everything else is neutralized by
    # wrapping it in a single-character class, e.g. "." -> "[.]".
    out = []
    for ch in text:
        if ch.isalnum():
            out.append(ch)
        elif ch in _BACKSLASH_ESCAPED:
            out.append("\\" + ch)
        else:
            out.append(f"[{ch}]")
    return "".join(out)


def escape_class_body(contents: str) -> str:
    # Make a raw bracket body safe to place between "[" and "]".
    # Every member stays a plain character: "a-z" is three members,
    # never a range.
    out = []
    for ch in contents:
        if ch.isalnum():
            out.append(ch)
        else:
            out.append("\\" + ch)
    return "".join(out)
