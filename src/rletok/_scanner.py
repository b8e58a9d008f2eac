"""
Split unencoded and run-length encoded text into tokens.
"""

import logging
from typing import Final

import regex as re

from ._rle import DIGITS, LINE_TERMINATOR, LONG_MARKER
from ._sanitise import render_token
from .errors import MalformedEncoding
from .types import DToken, EToken

# a long count may be empty while scanning, e.g. right after a closing #
_LONG_COUNT_PAT: Final = re.compile(r"[0-9]*")

log = logging.getLogger(__name__)


def tokenize_unencoded(text: str) -> list[DToken]:
    """
    Split unencoded text into runs of a single repeated character.

    Concatenating the returned runs reproduces ``text`` exactly.
    """
    dtoks: list[DToken] = []
    # index of the first char of the current run
    run_start = 0

    for i in range(len(text)):
        # close the run on the last char, or when the next char differs
        if i == len(text) - 1 or text[i] != text[i + 1]:
            dtoks.append(text[run_start : i + 1])
            run_start = i + 1

    log.debug(f"split {len(text)} chars into {len(dtoks)} runs")
    return dtoks


def tokenize_encoded(text: str) -> list[EToken]:
    """
    Split run-length encoded text into eTokens.

    The scanner is either outside a long sequence, where every token is a
    single count digit followed by its char, or inside one that started after
    a ``#`` marker. Inside a long sequence the first non-digit decides where
    the token ends:

    - ``##``: #-case b, the token ends after the second ``#``
    - ``#``: #-case a and/or c, the token ends before the ``#``
    - any other char: #-case a, the token ends after that char

    After either ``#`` form the next token starts a new long sequence, which
    may turn out to hold a short count.

    A single line terminator at the very end of the input, with no count
    before it, is ignored.

    :param text: Encoded text, e.g. ``"3a#10b31#3##"``.
    :returns: eTokens with long-sequence markers and closing ``#`` of digit
              runs removed.
    :raises MalformedEncoding: If a char has no count before it, a count has
                               no char after it, a long count is never closed,
                               or the input ends on a ``#`` marker that closes
                               neither a digit run nor a ``#`` run.
    """
    etoks: list[EToken] = []
    n = len(text)
    # start of the current long sequence, None outside of one
    long_start: int | None = None
    # whether the # opening the current long sequence still needs a count,
    # False when it closed a digit run or # run
    needs_count = False

    i = 0
    while i < n:
        char = text[i]

        if long_start is None:
            if char == LONG_MARKER:
                needs_count = not _closes_run(text, i)
                long_start = i + 1
                i += 1
            elif char in DIGITS:
                if i == n - 1:
                    raise MalformedEncoding("char count is missing its char", position=i)
                etoks.append(text[i : i + 2])
                # skip the token-defining char
                i += 2
            elif _is_trailing_eol(text, i):
                i += 1
            else:
                raise MalformedEncoding(
                    f"char {render_token(char)!r} is not accompanied by a char count",
                    position=i,
                )
            continue

        # long counts are all digits, jump to the first non-digit
        i = _LONG_COUNT_PAT.match(text, i).end()
        if i == n:
            break
        char = text[i]

        if char == LONG_MARKER:
            if i == long_start and i + 1 < n and text[i + 1] == LONG_MARKER:
                raise MalformedEncoding("# run is missing its char count", position=i)
            if i + 1 < n and text[i + 1] == LONG_MARKER:
                # #-case b
                etok = text[long_start : i + 2]
                long_start = i + 2
                needs_count = False
                # skip the extra #
                i += 2
            else:
                # #-case a and/or #-case c, empty when # only marks the next token
                etok = text[long_start:i]
                needs_count = not etok
                long_start = i + 1
                i += 1
        else:
            if i == long_start:
                if not _is_trailing_eol(text, i):
                    raise MalformedEncoding(
                        f"char {render_token(char)!r} is not accompanied by a char count",
                        position=i,
                    )
                if needs_count:
                    raise MalformedEncoding(
                        "long sequence marker is missing its char count",
                        position=long_start - 1,
                    )
                # EOF with no char count
                long_start = None
                i += 1
                continue
            # #-case a
            etok = text[long_start : i + 1]
            long_start = None
            i += 1

        if etok:
            etoks.append(etok)

    if long_start is not None:
        if long_start < n:
            raise MalformedEncoding(
                "long sequence count is never closed", position=long_start
            )
        if needs_count:
            raise MalformedEncoding(
                "long sequence marker is missing its char count",
                position=long_start - 1,
            )

    log.debug(f"split {n} encoded chars into {len(etoks)} tokens")
    return etoks


def _is_trailing_eol(text: str, i: int) -> bool:
    """Whether ``text[i]`` is a line terminator ending the input."""
    return i == len(text) - 1 and text[i] == LINE_TERMINATOR


def _closes_run(text: str, i: int) -> bool:
    """Whether the # at ``text[i]`` closes the digit run or # run before it."""
    return i > 0 and (text[i - 1] in DIGITS or text[i - 1] == LONG_MARKER)
