"""Codec mode selection for the encode and decode pipelines."""

from enum import Enum

from .errors import ModeError


class CodecMode(str, Enum):
    """Named directions a codec can run in."""

    ENCODE = "encode"
    DECODE = "decode"

    @classmethod
    def get(cls, name: str) -> "CodecMode":
        """Get mode by name or its first letter (case-insensitive), e.g. "e" or "decode"."""
        key = name.strip().lower()
        for mode in cls:
            if key in (mode.value, mode.value[0]):
                return mode
        raise ModeError(
            "unknown mode",
            invalid_name=name,
            available_modes=[mode.value for mode in cls],
        )


def list_modes() -> list[str]:
    """Return available codec mode names."""
    return [mode.value for mode in CodecMode]


__all__ = [
    "CodecMode",
    "list_modes",
]
