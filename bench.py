"""Benchmark run-length encoding and decoding on a slice of the Sci-Fi Gutenberg dataset.

Outputs throughput for both directions along with the compression ratio:
  Corpus Size | Runs | Encoding Throughput | Decoding Throughput | Compression Ratio
"""

import argparse
import logging
import time

from datasets import load_dataset

from rletok import RunLengthCodec, tokenize_unencoded

HF_DATASET = "stevez80/Sci-Fi-Books-gutenberg"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S",
)


def load_corpus(num_docs: int | None) -> str:
    """Load up to `num_docs` documents as one ASCII string; full dataset when None."""
    print(f"Loading {HF_DATASET} (non-streaming) …")
    ds = load_dataset(HF_DATASET, split="train")
    docs = ds[:num_docs]["text"] if num_docs is not None else ds["text"]
    # the codec handles ASCII text only
    return "".join(docs).encode("ascii", errors="ignore").decode("ascii")


def format_chars(num_chars: float) -> str:
    """Format a char count to a human-readable string."""
    for unit in ["", "K", "M", "G"]:
        if num_chars < 1000.0:
            return f"{num_chars:.2f} {unit}chars"
        num_chars /= 1000.0
    return f"{num_chars:.2f} Tchars"


def benchmark(text: str) -> None:
    """Time encode and decode on ``text`` and verify the round trip."""
    codec = RunLengthCodec()
    n_runs = len(tokenize_unencoded(text))

    encode_start = time.perf_counter()
    encoded = codec.encode(text)
    encode_time = time.perf_counter() - encode_start

    decode_start = time.perf_counter()
    decoded = codec.decode(encoded)
    decode_time = time.perf_counter() - decode_start

    assert decoded == text, (
        f"Decode failed: output doesn't match input (got {len(decoded)} chars, expected {len(text)} chars)"
    )

    ratio = len(text) / len(encoded) if encoded else 0.0
    print(f"   Corpus size: {format_chars(len(text))}")
    print(f"   Runs: {n_runs:,}")
    print(f"   Encoding: {encode_time:.3f}s ({format_chars(len(text) / encode_time)}/s)")
    print(f"   Decoding: {decode_time:.3f}s ({format_chars(len(decoded) / decode_time)}/s)")
    print(f"   Compression ratio: {ratio:.3f}x")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--num-docs",
        type=int,
        default=1000,
        help="number of dataset documents to load (default: 1000, use -1 for all)",
    )
    args = parser.parse_args()

    num_docs = None if args.num_docs < 0 else args.num_docs
    benchmark(load_corpus(num_docs))


if __name__ == "__main__":
    main()
