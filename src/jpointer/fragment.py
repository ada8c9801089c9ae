"""URI fragment form of a JSON Pointer (RFC 6901 section 6).

On top of the ``~0``/``~1`` token escapes, each token is encoded as UTF-8 and
every byte outside ``A-Z a-z 0-9 - _ . ~`` is percent-encoded.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from urllib.parse import quote, unquote_to_bytes

from .errors import PointerError
from .json_pointer import encode_token

# A '%' not followed by two hex digits.
_BAD_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _encode_fragment_token(token: str) -> str:
    try:
        return quote(encode_token(token).encode("utf-8"), safe="")
    except UnicodeEncodeError as exc:
        raise PointerError(f"Token {token!r} cannot be encoded as UTF-8") from exc


def encode_fragment(tokens: Iterable[str]) -> str:
    """Render decoded *tokens* as a URI fragment (without the leading ``#``).

    Raises :class:`PointerError` for a token that has no UTF-8 form (one
    holding a lone surrogate).
    """
    return "".join(f"/{_encode_fragment_token(token)}" for token in tokens)


def decode_fragment(fragment: str) -> str:
    """Percent-decode *fragment* and interpret it as UTF-8.

    The result is an ordinary JSON Pointer string, still token-escaped.
    """
    bad = _BAD_PERCENT_RE.search(fragment)
    if bad is not None:
        raise PointerError(f'Illegal URI fragment - "{fragment}"') from ValueError(
            f"Incomplete percent-encoding at offset {bad.start()}"
        )
    try:
        return unquote_to_bytes(fragment).decode("utf-8")
    except ValueError as exc:
        raise PointerError(f'Illegal URI fragment - "{fragment}"') from exc


__all__ = ["decode_fragment", "encode_fragment"]
