"""Unit tests for run-length token encoding, decoding and concatenation."""

import pytest

import rletok
from rletok import concatenate, decode_tokens, encode_tokens, tokenize_unencoded
from rletok.errors import MalformedEncoding


def encode(text: str) -> str:
    return concatenate(encode_tokens(tokenize_unencoded(text)))


# Concatenate
# ---------------------------------------------------------------------------


def test_concatenate_joins_in_order():
    """Tokens are joined in order with no separator."""
    assert concatenate(["3a", "#10b", "31#"]) == "3a#10b31#"


def test_concatenate_empty():
    """An empty sequence concatenates to an empty string."""
    assert concatenate([]) == ""


# Encoding formats
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("aaa", "3a"),
        ("a" * 9, "9a"),
        ("a" * 10, "#10a"),
        ("111", "31#"),
        ("###", "3##"),
        ("a" * 100, "#100a"),
        ("\n\n\n", "3\n"),
    ],
)
def test_encode_single_run(text, expected):
    """Each run kind gets its documented encoding."""
    assert encode(text) == expected


def test_encode_long_digit_run():
    """A run of 10+ digits is both prefixed and postfixed with #."""
    assert encode_tokens(["5" * 12]) == ["#125#"]


def test_encode_long_hash_run():
    """A run of 10+ # chars is prefixed with # and postfixed with an extra #."""
    assert encode_tokens(["#" * 10]) == ["#10##"]


def test_encode_one_token_per_run():
    """Encoding keeps one eToken per dToken, in order."""
    dtoks = ["aaa", "b" * 10, "111", "###"]
    assert encode_tokens(dtoks) == ["3a", "#10b", "31#", "3##"]


def test_encode_after_digit_run_skips_long_marker():
    """The # closing a digit run doubles as the next token's long marker."""
    assert encode_tokens(["1" * 10, "2" * 11]) == ["#101#", "112#"]
    assert encode_tokens(["111", "a" * 12]) == ["31#", "12a"]


def test_encode_after_hash_run_keeps_long_marker():
    """A long run after a # run still carries its own marker."""
    assert encode("#" * 12 + "1" * 12) == "#12###121#"


def test_encode_skips_empty_runs():
    """Empty dTokens produce no output."""
    assert encode_tokens(["aa", "", "b"]) == ["2a", "1b"]


def test_encode_empty():
    """No runs, no eTokens."""
    assert encode_tokens([]) == []


# Decoding tokens
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("etok", "expected"),
    [
        ("3a", "aaa"),
        ("10a", "a" * 10),
        ("3#", "###"),
        ("3##", "###"),
        ("10##", "#" * 10),
        ("31", "111"),
        ("125", "5" * 12),
        ("3\n", "\n\n\n"),
        ("0a", ""),
    ],
)
def test_decode_tokenizer_forms(etok, expected):
    """Tokens as produced by tokenize_encoded expand to their runs."""
    assert decode_tokens([etok]) == [expected]


@pytest.mark.parametrize(
    ("etok", "expected"),
    [
        ("#10a", "a" * 10),
        ("31#", "111"),
        ("#125#", "5" * 12),
        ("#10##", "#" * 10),
        ("1##", "#"),
    ],
)
def test_decode_encoder_forms(etok, expected):
    """Tokens as produced by encode_tokens, markers included, expand to their runs."""
    assert decode_tokens([etok]) == [expected]


def test_decode_encoded_tokens_roundtrip():
    """decode_tokens undoes encode_tokens token by token."""
    dtoks = ["aaa", "b" * 10, "1" * 12, "#" * 4, "\n"]
    assert decode_tokens(encode_tokens(dtoks)) == dtoks


@pytest.mark.parametrize("etok", ["xa", "a", "", "##", "1x2a", "+3a", "3a#"])
def test_decode_invalid_count_raises(etok):
    """Tokens whose count is not a non-negative integer raise MalformedEncoding."""
    with pytest.raises(MalformedEncoding) as excinfo:
        decode_tokens([etok])
    assert excinfo.value.token == etok


@pytest.mark.parametrize("etok", ["3a#", "#12a#", "3\n#"])
def test_decode_closing_marker_needs_digit_char(etok):
    """A single closing # is only valid after a digit char, even with a valid count."""
    with pytest.raises(MalformedEncoding, match="closing # must follow a digit char"):
        decode_tokens([etok])


def test_malformed_encoding_is_rletok_error():
    """MalformedEncoding is part of the package error hierarchy."""
    with pytest.raises(rletok.RLETokError):
        decode_tokens(["?a"])
