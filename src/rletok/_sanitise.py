"""
Utilities for rendering tokens as displayable strings.
"""

import unicodedata


def _escape_ctrl_chars(s: str) -> str:
    """Write control chars (any C* Unicode category) as ``\\uXXXX`` escapes."""
    return "".join(
        f"\\u{ord(c):04x}" if unicodedata.category(c).startswith("C") else c
        for c in s
    )


def render_token(tok: str, limit: int = 32) -> str:
    """
    Escape control characters in a token and shorten it for log output.

    Tokens longer than ``limit`` characters are cut and suffixed with the
    number of characters left out.
    """
    if len(tok) > limit:
        return f"{_escape_ctrl_chars(tok[:limit])}...(+{len(tok) - limit})"
    return _escape_ctrl_chars(tok)


def render_tokens(toks: list[str], limit: int = 8) -> str:
    """Render the first ``limit`` tokens of a sequence as a bracketed list."""
    shown = ", ".join(render_token(t) for t in toks[:limit])
    if len(toks) > limit:
        shown += f", ... ({len(toks) - limit} more)"
    return f"[{shown}]"
