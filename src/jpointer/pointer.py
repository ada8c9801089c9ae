"""Immutable JSON Pointer value and its navigation algebra.

A :class:`JSONPointer` is an ordered tuple of decoded reference tokens.  The
zero-token pointer is the shared :data:`ROOT` instance; navigation returns it
(and other existing instances) by identity wherever the result is unchanged.

Pointers can be used directly as Pydantic v2 field types::

    class Error(BaseModel):
        location: JSONPointer

    Error(location="/items/0/name").location.depth  # 3
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, ClassVar, NoReturn, TypeAlias, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .errors import PointerError
from .fragment import decode_fragment, encode_fragment
from .json_pointer import build_json_pointer, parse_json_pointer

PathElement: TypeAlias = Union[str, int, "JSONPointer"]


class JSONPointer:
    """An RFC 6901 JSON Pointer.

    ``JSONPointer("/foo/0")`` parses an escaped pointer string; use
    :meth:`of` or :meth:`from_tokens` to build one from raw (unescaped)
    tokens.
    """

    __slots__ = ("_tokens",)

    _tokens: tuple[str, ...]
    root: ClassVar[JSONPointer]

    def __new__(cls, pointer: str = "") -> JSONPointer:
        return cls._create(parse_json_pointer(pointer))

    @classmethod
    def _create(cls, tokens: tuple[str, ...]) -> JSONPointer:
        if not tokens and hasattr(cls, "root"):
            return cls.root
        instance = object.__new__(cls)
        object.__setattr__(instance, "_tokens", tokens)
        return instance

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (self.__class__.from_tokens, (self._tokens,))

    # -- construction helpers ---------------------------------------------

    @classmethod
    def from_string(cls, pointer: str) -> JSONPointer:
        """Parse an escaped pointer string (same as calling the class)."""
        return cls(pointer)

    @classmethod
    def of(cls, *tokens: str) -> JSONPointer:
        """Build a pointer from raw tokens given as positional arguments."""
        return cls.from_tokens(tokens)

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> JSONPointer:
        """Build a pointer from an iterable of raw (already decoded) tokens.

        A ``str`` argument is taken as an escaped pointer string and parsed.
        """
        if isinstance(tokens, str):
            return cls(tokens)
        copied = tuple(tokens)
        for token in copied:
            if not isinstance(token, str):
                raise TypeError(f"JSON Pointer tokens must be str, got {type(token).__name__}")
        return cls._create(copied)

    @classmethod
    def from_uri_fragment(cls, fragment: str) -> JSONPointer:
        """Decode the URI fragment form produced by :meth:`to_uri_fragment`."""
        return cls(decode_fragment(fragment))

    # -- observers --------------------------------------------------------

    @property
    def depth(self) -> int:
        return len(self._tokens)

    @property
    def is_root(self) -> bool:
        return not self._tokens

    @property
    def current(self) -> str | None:
        """The last token, or ``None`` for the root pointer."""
        return self._tokens[-1] if self._tokens else None

    @property
    def tokens(self) -> tuple[str, ...]:
        return self._tokens

    def tokens_as_tuple(self) -> tuple[str, ...]:
        return self._tokens

    def tokens_as_list(self) -> list[str]:
        """Return a new list of the tokens; changing it leaves the pointer intact."""
        return list(self._tokens)

    def get_token(self, index: int) -> str:
        if not 0 <= index < len(self._tokens):
            raise IndexError(f"Token index {index} out of range (depth {len(self._tokens)})")
        return self._tokens[index]

    # -- navigation -------------------------------------------------------

    def child(self, element: PathElement) -> JSONPointer:
        """Return a pointer to a child of the value this pointer references.

        *element* is a property name, a non-negative array index, or another
        pointer to append.
        """
        if isinstance(element, JSONPointer):
            if self.is_root:
                return element
            if element.is_root:
                return self
            return self._create(self._tokens + element._tokens)
        return self._create(self._tokens + (self._token_for(element),))

    def with_parent(self, element: PathElement) -> JSONPointer:
        """Return a pointer with *element* prepended (the inverse side of :meth:`child`)."""
        if isinstance(element, JSONPointer):
            if self.is_root:
                return element
            if element.is_root:
                return self
            return self._create(element._tokens + self._tokens)
        return self._create((self._token_for(element),) + self._tokens)

    def parent(self) -> JSONPointer:
        """Return a pointer to the object or array containing this pointer's target."""
        if self.is_root:
            raise_root_parent_error()
        return self._create(self._tokens[:-1])

    def truncate(self, n: int) -> JSONPointer:
        """Keep only the first *n* tokens."""
        if n == self.depth:
            return self
        if n == 0:
            return JSONPointer.root
        if 0 < n < self.depth:
            return self._create(self._tokens[:n])
        self.raise_error(f"Illegal truncate ({n})")

    def _token_for(self, element: str | int) -> str:
        if isinstance(element, str):
            return element
        if isinstance(element, int) and not isinstance(element, bool):
            if element < 0:
                self.raise_error(f"JSON Pointer index {element} must not be negative")
            return str(element)
        raise TypeError(
            f"JSON Pointer element must be str, int or JSONPointer, got {type(element).__name__}"
        )

    def __add__(self, other: Any) -> JSONPointer:
        if isinstance(other, (str, int, JSONPointer)) and not isinstance(other, bool):
            return self.child(other)
        return NotImplemented

    # -- output -----------------------------------------------------------

    def to_string(self, n: int | None = None) -> str:
        """Return the escaped pointer string, optionally using only the first *n* tokens."""
        return build_json_pointer(self._tokens, n)

    def to_uri_fragment(self) -> str:
        """Return the percent-encoded form for use after ``#`` in a URI.

        Raises :class:`PointerError` if a token holds a lone surrogate.
        """
        try:
            return encode_fragment(self._tokens)
        except PointerError as exc:
            raise PointerError(exc.text, self) from exc.cause

    def raise_error(self, text: str) -> NoReturn:
        """Raise a :class:`PointerError` reporting *text* at this pointer."""
        raise PointerError(text, self)

    def __str__(self) -> str:
        return build_json_pointer(self._tokens)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, JSONPointer):
            return NotImplemented
        return self._tokens == other._tokens

    def __hash__(self) -> int:
        return hash(self._tokens)

    # -- pydantic integration ---------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="always"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "format": "json-pointer"}

    @classmethod
    def _validate(cls, value: Any) -> JSONPointer:
        if isinstance(value, JSONPointer):
            return value
        if isinstance(value, str):
            return cls(value)
        if isinstance(value, (list, tuple)):
            try:
                return cls.from_tokens(value)
            except TypeError as exc:
                raise ValueError(str(exc)) from exc
        raise ValueError(
            f"Expected a JSON Pointer string or token list, got {type(value).__name__}"
        )


JSONPointer.root = JSONPointer._create(())
ROOT = JSONPointer.root


def from_uri_fragment(fragment: str) -> JSONPointer:
    return JSONPointer.from_uri_fragment(fragment)


def raise_root_parent_error() -> NoReturn:
    """Raise the error for navigating above the root pointer.

    Exposed for traversal code outside this package that needs to report the
    same failure in the same words.
    """
    raise PointerError("Can't get parent of root JSON Pointer", ROOT)


__all__ = ["JSONPointer", "PathElement", "ROOT", "from_uri_fragment", "raise_root_parent_error"]
