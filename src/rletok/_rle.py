"""
Core run-length encoding operations on token sequences.

Encoding format, one eToken per run:

- runs of up to 9 chars: the count followed by the char, ``"aaa" -> "3a"``
- runs of 10 or more chars are prefixed by ``#``: ``"aaaaaaaaaa" -> "#10a"``
- runs of digit chars are postfixed by ``#``: ``"111" -> "31#"``
- runs of ``#`` chars are postfixed by an extra ``#``: ``"###" -> "3##"``

The ``#`` closing a digit run also marks the start of the next token, so a
token following a digit run never carries its own long-sequence prefix.
"""

import logging
from typing import Final

import regex as re

from ._sanitise import render_token, render_tokens
from .errors import MalformedEncoding
from .types import DToken, EToken

# marks long sequences, and closes digit runs and # runs
LONG_MARKER: Final[str] = "#"
# longest run encoded without the long-sequence marker
MAX_SHORT_COUNT: Final[int] = 9
LINE_TERMINATOR: Final[str] = "\n"
DIGITS: Final[frozenset[str]] = frozenset("0123456789")

# char counts are plain ASCII decimals, so str.isdigit() is too permissive
COUNT_PAT: Final = re.compile(r"[0-9]+")

log = logging.getLogger(__name__)


def concatenate(toks: list[str]) -> str:
    """Join a sequence of tokens, in order, into a single string."""
    return "".join(toks)


def encode_tokens(dtoks: list[DToken]) -> list[EToken]:
    """
    Run-length encode each run in a sequence of dTokens.

    Each dToken must consist of one or more of a single character, as
    produced by :func:`rletok.tokenize_unencoded`.

    :param dtoks: Runs to encode, in text order.
    :returns: One eToken per run, in the same order.
    """
    etoks: list[EToken] = []
    prev_char: str | None = None

    for dtok in dtoks:
        # empty runs carry no characters
        if not dtok:
            continue

        n, char = len(dtok), dtok[0]
        # the previous digit run's closing # already marks this token
        follows_digit = prev_char is not None and prev_char in DIGITS

        etok = ""
        # #-case a
        if n > MAX_SHORT_COUNT and not follows_digit:
            etok = LONG_MARKER
        etok += f"{n}{char}"
        # #-case b and #-case c
        if char == LONG_MARKER or char in DIGITS:
            etok += LONG_MARKER

        etoks.append(etok)
        prev_char = char

    log.debug(f"encoded {len(etoks)} runs: {render_tokens(etoks)}")
    return etoks


def decode_tokens(etoks: list[EToken]) -> list[DToken]:
    """
    Run-length decode each token in a sequence of eTokens.

    Accepts the tokens produced by :func:`rletok.tokenize_encoded` as well as
    those produced by :func:`encode_tokens`, whose leading long-sequence
    marker is skipped.

    :param etoks: Encoded runs, in text order.
    :returns: One decoded run per eToken, in the same order.
    :raises MalformedEncoding: If a token's char count is not a non-negative
                               integer, or a single closing ``#`` follows a
                               char that is not a digit.
    """
    dtoks = [_decode_one(etok) for etok in etoks]
    log.debug(f"decoded {len(dtoks)} runs: {render_tokens(dtoks)}")
    return dtoks


def _decode_one(etok: EToken) -> DToken:
    """Expand a single eToken into the run it describes."""
    body = etok
    if len(body) > 2 and body[0] == LONG_MARKER:
        body = body[1:]

    # single non-# char, count below 10
    if len(body) == 2:
        count, char = body[0], body[1]
    # #-case b, possibly with #-case a
    elif body.endswith(LONG_MARKER * 2):
        count, char = body[:-2], LONG_MARKER
    # #-case c as emitted by the encoder, digit char before the closing #
    elif body.endswith(LONG_MARKER):
        count, char = body[:-2], body[-2]
        if char not in DIGITS:
            raise MalformedEncoding("closing # must follow a digit char", token=etok)
    # #-case a
    else:
        count, char = body[:-1], body[-1:]

    return char * _parse_count(count, etok)


def _parse_count(count: str, etok: EToken) -> int:
    """Parse the decimal char count of ``etok``."""
    if COUNT_PAT.fullmatch(count) is None:
        raise MalformedEncoding(
            f"invalid char count {render_token(count)!r}", token=etok
        )
    return int(count)
