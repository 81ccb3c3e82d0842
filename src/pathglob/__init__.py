# Package initialization for pathglob.
# Re-exports the compile and match entry points; everything else lives
# in submodules to keep imports explicit and predictable.

__all__ = [
    "__version__",
    "Glob",
    "ParseError",
    "from_string",
    "globmatches",
    "match",
]

# Package version.
# Keep in sync with pyproject.toml.
__version__ = "0.1.0"

from pathglob.core import Glob, ParseError, from_string, globmatches, match  # noqa: E402
