"""
Reading and writing the ASCII text files processed by the CLI.
"""

import logging
from pathlib import Path
from typing import Final

from .errors import InputFileError

TEXT_SUFFIX: Final[str] = ".txt"

log = logging.getLogger(__name__)


def read_text_file(path: str | Path) -> str:
    """
    Read the contents of an ASCII ``.txt`` file.

    :param path: Path to the text file.
    :returns: File contents, line endings kept as they are on disk.
    :raises InputFileError: If the extension is not ``.txt``, the file cannot
                            be opened, or it contains non-ASCII bytes.
    """
    path = _check_suffix(path)

    if not path.is_file():
        raise InputFileError(
            "file does not exist, ensure path is correct", path=str(path)
        )

    log.info(f"reading {path}")
    try:
        # no newline translation, \r chars are data
        with path.open("r", encoding="ascii", newline="") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise InputFileError(
            "file must be ASCII encoded",
            path=str(path),
            reason=f"byte {e.object[e.start]:#04x} at offset {e.start}",
        ) from e
    except OSError as e:
        raise InputFileError(
            "error opening file, ensure file is not in use",
            path=str(path),
            reason=e.strerror,
        ) from e

    log.debug(f"read {len(text)} chars from {path}")
    return text


def write_text_file(path: str | Path, text: str) -> None:
    """
    Write ``text`` to an ASCII ``.txt`` file, replacing its contents.

    :param path: Path to the text file. Its parent directory must exist.
    :param text: ASCII text to write.
    :raises InputFileError: If the extension is not ``.txt`` or the file
                            cannot be written.
    """
    path = _check_suffix(path)

    log.info(f"writing {len(text)} chars to {path}")
    try:
        with path.open("w", encoding="ascii", newline="\n") as f:
            f.write(text)
    except UnicodeEncodeError as e:
        raise InputFileError(
            "text must be ASCII",
            path=str(path),
            reason=f"char {text[e.start]!r} at offset {e.start}",
        ) from e
    except OSError as e:
        raise InputFileError(
            "error opening file, ensure path is correct and file is not in use",
            path=str(path),
            reason=e.strerror,
        ) from e


def _check_suffix(path: str | Path) -> Path:
    """Return ``path`` as a Path, rejecting anything but ``.txt`` files."""
    path = Path(path)
    if path.suffix != TEXT_SUFFIX:
        raise InputFileError(
            f"path must end with the file extension '{TEXT_SUFFIX}'", path=str(path)
        )
    return path
