"""Exception hierarchy.

Only the edges of the pipeline can fail: encoding the input text and writing
the rendered image. The pure stages in between raise plain ``ValueError``
when handed a state that is missing the fields they read.
"""


class IdenticonError(Exception):
    """Base class for errors surfaced by :func:`identicon.main`."""


class InputEncodingError(IdenticonError, ValueError):
    """The input text cannot be encoded to bytes for hashing."""


class UnsafeFilenameError(IdenticonError, ValueError):
    """The input text cannot be used verbatim as an output file name.

    The raw input is the file's base name, so separators and NUL bytes are
    rejected instead of being rewritten.
    """


class ImageWriteError(IdenticonError, OSError):
    """The encoded image could not be written to disk."""
