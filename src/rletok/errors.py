"""Custom exception hierarchy for rletok encoding errors."""


class RLETokError(Exception):
    """Base exception for all rletok errors."""


class MalformedEncoding(RLETokError):
    """Raised when encoded text cannot be split into or decoded from eTokens."""

    def __init__(
        self,
        message: str,
        *,
        position: int | None = None,
        token: str | None = None,
    ) -> None:
        """Initialize with optional position and token that get appended to the message."""
        extra = " "
        # tokenizing: offset of the offending character
        if position is not None:
            extra += f"(position: {position}) "
        # decoding: token whose count could not be parsed
        if token is not None:
            extra += f"(token: {token!r}) "
        super().__init__(message + extra)
        self.position = position
        self.token = token


class InputFileError(RLETokError):
    """Raised when reading or writing a text file fails."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        reason: str | None = None,
    ) -> None:
        extra = " "
        if path:
            extra += f"(path: {path}) "
        if reason:
            extra += f"(reason: {reason}) "
        super().__init__(message + extra)
        self.path = path
        self.reason = reason


class ModeError(RLETokError):
    """Raised when an unknown codec mode is requested."""

    def __init__(
        self,
        message: str,
        *,
        invalid_name: str | None = None,
        available_modes: list[str] | None = None,
    ) -> None:
        extra = " "
        if invalid_name:
            extra += f"(available: {available_modes}) (got {invalid_name}) "
        super().__init__(message + extra)
        self.invalid_name = invalid_name
        self.available_modes = available_modes
