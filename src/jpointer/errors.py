"""Exception type shared by every jpointer operation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .pointer import JSONPointer


class PointerError(ValueError):
    """Raised when a JSON Pointer cannot be parsed, decoded or navigated.

    ``text`` is the bare description of the failure.  ``pointer`` is the
    pointer that was the subject of the operation, if any; when it is set
    (and is not the root pointer) the rendered message becomes
    ``"<text>, at <pointer>"``.  A lower-level error that caused this one is
    chained with ``raise ... from`` and exposed as :attr:`cause`.
    """

    def __init__(self, text: str, pointer: JSONPointer | None = None) -> None:
        self.text = text
        self.pointer = pointer
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.pointer is None or self.pointer.is_root:
            return self.text
        return f"{self.text}, at {self.pointer}"

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __reduce__(self):
        return (self.__class__, (self.text, self.pointer), {"cause": self.__cause__})

    def __setstate__(self, state: dict) -> None:
        self.__cause__ = state.get("cause")


__all__ = ["PointerError"]
