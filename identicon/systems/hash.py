"""Hash system.

Seeds the pipeline: the input text is encoded and digested with MD5, and the
16 digest bytes become ``ImageState.hash_bytes``. MD5 is used as a fast,
widely available fingerprint, not for security.
"""

import hashlib

from pyrsistent import pvector

from identicon.constants import INPUT_ENCODING
from identicon.errors import InputEncodingError
from identicon.state import ImageState


def hash_system(text: str) -> ImageState:
    """Build the initial state from ``text``.

    Args:
        text (str): Any string, including the empty string.

    Returns:
        ImageState: State with only ``hash_bytes`` populated.

    Raises:
        InputEncodingError: If ``text`` cannot be encoded (e.g. lone surrogates).

    >>> list(hash_system("username").hash_bytes)
    [20, 196, 176, 107, 130, 78, 197, 147, 35, 147, 98, 81, 127, 83, 139, 41]
    """
    try:
        data = text.encode(INPUT_ENCODING)
    except UnicodeEncodeError as exc:
        raise InputEncodingError(
            f"Cannot encode input as {INPUT_ENCODING}: {exc.reason}"
        ) from exc
    digest = hashlib.md5(data, usedforsecurity=False).digest()
    return ImageState(hash_bytes=pvector(digest))
