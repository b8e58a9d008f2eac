"""Command line interface: run-length encode or decode a text file in place."""

import argparse
import logging
import os
import sys
from pathlib import Path

from ._io import read_text_file, write_text_file
from .codec import RunLengthCodec
from .errors import RLETokError
from .mode import CodecMode

LOG_LEVEL_ENV = "RLETOK_LOG_LEVEL"

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``rletok`` command."""
    parser = argparse.ArgumentParser(
        prog="rletok",
        description="Run-length encode or decode an ASCII .txt file and write back the result.",
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "-e",
        "--encode",
        dest="mode",
        action="store_const",
        const=CodecMode.ENCODE,
        help="run-length encode the file",
    )
    mode.add_argument(
        "-d",
        "--decode",
        dest="mode",
        action="store_const",
        const=CodecMode.DECODE,
        help="run-length decode the file",
    )
    parser.add_argument("path", type=Path, help="path to the input .txt file")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="write the result here instead of overwriting the input file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help=f"log debug output (overrides {LOG_LEVEL_ENV})",
    )
    return parser


def _log_level(verbose: bool) -> int:
    """Resolve the log level from the verbose flag, then the environment."""
    if verbose:
        return logging.DEBUG
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``rletok`` command. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=_log_level(args.verbose),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    out_path = args.output if args.output is not None else args.path
    codec = RunLengthCodec()
    try:
        text = read_text_file(args.path)
        result = codec.run(args.mode, text)
        write_text_file(out_path, result.output_text)
    except RLETokError as e:
        log.debug(f"{args.mode.value} failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Original file length: {result.input_length}")
    print(f"New length: {result.output_length}")
    print(f"Compression ratio: {result.compression_ratio:.6f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
