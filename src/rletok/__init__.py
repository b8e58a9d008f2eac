"""RLETok: run-length encoding of ASCII text."""

from ._rle import concatenate, decode_tokens, encode_tokens
from ._scanner import tokenize_encoded, tokenize_unencoded
from ._io import read_text_file, write_text_file
from .codec import CodecResult, RunLengthCodec
from .errors import InputFileError, MalformedEncoding, ModeError, RLETokError
from .mode import CodecMode, list_modes

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("rletok")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "tokenize_unencoded",
    "tokenize_encoded",
    "encode_tokens",
    "decode_tokens",
    "concatenate",
    "RunLengthCodec",
    "CodecResult",
    "CodecMode",
    "list_modes",
    "read_text_file",
    "write_text_file",
    "RLETokError",
    "MalformedEncoding",
    "InputFileError",
    "ModeError",
]
