from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("jpointer")
except PackageNotFoundError:  # pragma: no cover - local source tree without installed metadata
    __version__ = "0.1.0"

from .errors import PointerError
from .fragment import decode_fragment, encode_fragment
from .json_pointer import build_json_pointer, decode_token, encode_token, parse_json_pointer
from .pointer import ROOT, JSONPointer, PathElement, from_uri_fragment, raise_root_parent_error

__all__ = [
    "JSONPointer",
    "PathElement",
    "PointerError",
    "ROOT",
    "build_json_pointer",
    "decode_fragment",
    "decode_token",
    "encode_fragment",
    "encode_token",
    "from_uri_fragment",
    "parse_json_pointer",
    "raise_root_parent_error",
]
