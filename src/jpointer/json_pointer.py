"""RFC 6901 token escaping and pointer-string parsing.

Tokens are always held in decoded form; the ``~0``/``~1`` escapes are applied
only when a pointer is written out as a string.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from .errors import PointerError

_ESCAPE_RE = re.compile(r"~(.?)", re.DOTALL)
_UNESCAPED = {"0": "~", "1": "/"}


def encode_token(token: str) -> str:
    """Escape a single JSON Pointer token (RFC 6901).

    A token containing neither ``~`` nor ``/`` is returned as-is.
    """
    if "~" not in token and "/" not in token:
        return token
    return token.replace("~", "~0").replace("/", "~1")


def decode_token(raw: str) -> str:
    """Unescape a single JSON Pointer token (RFC 6901).

    Raises :class:`PointerError` for a trailing lone ``~`` or for ``~``
    followed by anything other than ``0`` or ``1``.
    """
    if "~" not in raw:
        return raw

    def _unescape(match: re.Match[str]) -> str:
        code = match.group(1)
        if not code:
            raise PointerError("Incomplete escape sequence")
        try:
            return _UNESCAPED[code]
        except KeyError:
            raise PointerError(f'Invalid escape sequence in "{raw}"') from None

    return _ESCAPE_RE.sub(_unescape, raw)


def parse_json_pointer(pointer: str) -> tuple[str, ...]:
    """Split a JSON Pointer into unescaped tokens.

    The root pointer ``""`` returns an empty tuple.  A pointer ending in
    ``/`` yields a trailing empty-string token.
    """
    if not isinstance(pointer, str):
        raise TypeError(f"JSON Pointer must be str, got {type(pointer).__name__}")
    if pointer == "":
        return ()
    if not pointer.startswith("/"):
        raise PointerError(f'Illegal JSON Pointer - "{pointer}"')
    try:
        return tuple(decode_token(token) for token in pointer[1:].split("/"))
    except PointerError as exc:
        raise PointerError(f'Illegal token in JSON Pointer - "{pointer}"') from exc


def build_json_pointer(tokens: Sequence[str], n: int | None = None) -> str:
    """Build a JSON Pointer string from the first *n* raw tokens.

    *n* defaults to all of them.
    """
    if n is None:
        n = len(tokens)
    elif not 0 <= n <= len(tokens):
        raise IndexError(f"Token count {n} out of range (depth {len(tokens)})")
    if n == 0:
        return ""
    return "".join(f"/{encode_token(token)}" for token in tokens[:n])


__all__ = ["build_json_pointer", "decode_token", "encode_token", "parse_json_pointer"]
