"""
Run-length codec combining the tokenize, en/decode and concatenate steps.
"""

import logging
from dataclasses import dataclass

from ._decorators import measure_time
from ._rle import concatenate, decode_tokens, encode_tokens
from ._scanner import tokenize_encoded, tokenize_unencoded
from .mode import CodecMode

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CodecResult:
    """Output of one codec run along with its size statistics."""

    mode: CodecMode
    input_text: str
    output_text: str

    @property
    def input_length(self) -> int:
        return len(self.input_text)

    @property
    def output_length(self) -> int:
        return len(self.output_text)

    @property
    def compression_ratio(self) -> float:
        """
        Unencoded length over encoded length.

        For encoding that is input over output, for decoding output over
        input. Returns 0.0 when the encoded side is empty.
        """
        if self.mode is CodecMode.ENCODE:
            plain, packed = self.input_length, self.output_length
        else:
            plain, packed = self.output_length, self.input_length
        if packed == 0:
            return 0.0
        return plain / packed


class RunLengthCodec:
    """
    Run-length encoder/decoder for ASCII text.

    Encoding: ``tokenize_unencoded -> encode_tokens -> concatenate``.
    Decoding: ``tokenize_encoded -> decode_tokens -> concatenate``.

    .. code-block:: python

        codec = RunLengthCodec()
        codec.encode("aaabccc")  # "3a1b3c"
        codec.decode("3a1b3c")  # "aaabccc"
    """

    def encode(self, text: str) -> str:
        """Run-length encode ``text``."""
        return concatenate(encode_tokens(tokenize_unencoded(text)))

    def decode(self, text: str) -> str:
        """
        Run-length decode ``text``.

        Undoes exactly one round of :meth:`encode`.

        :raises MalformedEncoding: If ``text`` is not a valid encoding.
        """
        return concatenate(decode_tokens(tokenize_encoded(text)))

    @measure_time
    def run(self, mode: CodecMode | str, text: str) -> CodecResult:
        """
        Encode or decode ``text`` depending on ``mode``.

        :param mode: A :class:`CodecMode` or its name, e.g. ``"encode"`` or ``"d"``.
        :param text: Text to process.
        :returns: The processed text and its size statistics.
        :raises ModeError: If ``mode`` names no known mode.
        :raises MalformedEncoding: If decoding and ``text`` is not a valid encoding.
        """
        if not isinstance(mode, CodecMode):
            mode = CodecMode.get(mode)

        match mode:
            case CodecMode.ENCODE:
                output = self.encode(text)
            case CodecMode.DECODE:
                output = self.decode(text)

        result = CodecResult(mode=mode, input_text=text, output_text=output)
        log.debug(
            f"{mode.value}: {result.input_length} -> {result.output_length} chars "
            f"(ratio {result.compression_ratio:.2f})"
        )
        return result
