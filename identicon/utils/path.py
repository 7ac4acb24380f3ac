"""Output path helpers.

The identicon for ``text`` is written to ``<directory>/<text>.png``: the raw
input is used as the base name without any rewriting. Inputs that would
escape the target directory or that the OS cannot represent are rejected
with :class:`identicon.errors.UnsafeFilenameError`.
"""

import os
from pathlib import Path
from typing import Optional, Union

from identicon.constants import IMAGE_EXTENSION
from identicon.errors import UnsafeFilenameError

PathLike = Union[str, "os.PathLike[str]"]

UNSAFE_CHARACTERS = frozenset(
    c for c in ("/", "\x00", os.sep, os.altsep) if c is not None
)


def is_safe_filename(name: str) -> bool:
    """Return True if ``name`` contains no path separator or NUL byte."""
    return not any(c in UNSAFE_CHARACTERS for c in name)


def output_path(name: str, directory: Optional[PathLike] = None) -> Path:
    """Return the image path for ``name`` inside ``directory`` (default: cwd).

    Raises:
        UnsafeFilenameError: If ``name`` cannot be used verbatim as a base name.
    """
    if not is_safe_filename(name):
        raise UnsafeFilenameError(
            f"Input {name!r} contains a path separator or NUL byte "
            "and cannot be used as a file name"
        )
    base = Path(directory) if directory is not None else Path.cwd()
    return base / f"{name}{IMAGE_EXTENSION}"
