# Command-line interface definition for pathglob.
# This file is responsible only for argument parsing, validation,
# output, and dispatch into the library.
#
# No grammar or matching logic should live here.

from __future__ import annotations

import sys
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from pathglob import __version__
from pathglob.core import Glob, from_string
from pathglob.compiler import segment_regex
from pathglob.filtering import filter_paths
from pathglob.models import DoubleStar, Options, ParseError

app = typer.Typer(
    add_completion=False,
    help="Compile shell-style glob patterns and match path strings against them.",
)
console = Console()
_err = Console(stderr=True)


def _version_callback(value: bool) -> None:
    # Handle version early and exit cleanly.
    if value:
        console.print(__version__)
        raise typer.Exit(code=0)


@app.callback()
def root(
    version: bool = typer.Option(
        False, "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
):
    pass


def _read_candidates(candidates: Optional[List[str]]) -> List[str]:
    # Candidates come from the arguments, or one per stdin line.
    if candidates:
        return list(candidates)
    return [line.rstrip("\r\n") for line in sys.stdin]


def _compile_or_exit(pattern: str, memoize: bool) -> Glob:
    try:
        return from_string(pattern, memoize=memoize)
    except ParseError as exc:
        _err.print(f"[red]Invalid pattern:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2)


@app.command("match", help="Report whether each candidate matches PATTERN.")
def match_command(
    pattern: str = typer.Argument(..., help="Glob pattern to compile."),
    candidates: List[str] = typer.Argument(
        None,
        help="Paths to test. Read from stdin when omitted.",
    ),
    memoize: bool = typer.Option(
        False, "--memoize",
        help="Cache intermediate results while matching '**'.",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Print nothing; report through the exit code only.",
    ),
):
    glob = _compile_or_exit(pattern, memoize)

    all_matched = True
    for candidate in _read_candidates(candidates):
        matched = glob.match(candidate)
        all_matched = all_matched and matched
        if quiet:
            continue
        label = "[green]MATCH[/green]   " if matched else "[red]NO MATCH[/red]"
        console.print(f"{label} {escape(candidate)}", soft_wrap=True, highlight=False)

    # Exit status mirrors grep: 0 only when everything matched.
    if not all_matched:
        raise typer.Exit(code=1)


@app.command("filter", help="Print the candidates that pass the include/exclude rules.")
def filter_command(
    candidates: List[str] = typer.Argument(
        None,
        help="Paths to filter. Read from stdin when omitted.",
    ),
    include: List[str] = typer.Option(
        [], "--include",
        help="Only keep paths matching these patterns.",
    ),
    exclude: List[str] = typer.Option(
        [], "--exclude",
        help="Drop paths matching these patterns.",
    ),
    basename: bool = typer.Option(
        True, "--basename/--no-basename",
        help="Also test the last path segment on its own.",
    ),
    memoize: bool = typer.Option(
        False, "--memoize",
        help="Cache intermediate results while matching '**'.",
    ),
):
    opts = Options(
        include=include,
        exclude=exclude,
        memoize=memoize,
        basename=basename,
    )

    try:
        kept = filter_paths(
            _read_candidates(candidates),
            include=opts.include,
            exclude=opts.exclude,
            basename=opts.basename,
            memoize=opts.memoize,
        )
    except ParseError as exc:
        _err.print(f"[red]Invalid pattern:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2)

    for candidate in kept:
        console.print(candidate, markup=False, highlight=False, soft_wrap=True)


@app.command("explain", help="Show how PATTERN is split and compiled.")
def explain_command(
    pattern: str = typer.Argument(..., help="Glob pattern to compile."),
):
    glob = _compile_or_exit(pattern, memoize=False)

    table = Table(title=Text(f"Pattern {pattern!r}"))
    table.add_column("#", justify="right")
    table.add_column("Component")
    table.add_column("Fragments")
    table.add_column("Regex")

    for i, component in enumerate(glob.components):
        if isinstance(component, DoubleStar):
            table.add_row(str(i), "DoubleStar", "", "")
            continue
        fragments = "\n".join(repr(f) for f in component.fragments)
        table.add_row(
            str(i),
            "SegmentPattern",
            Text(fragments),
            Text(segment_regex(component.fragments)),
        )

    console.print(table)
    if not glob.components:
        console.print("No components: matches only the empty path.")


if __name__ == "__main__":
    app()
