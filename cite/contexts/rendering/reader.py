"""Read back the plain text produced by the last toolchain step."""

from pathlib import Path

from cite.config import DOCUMENT_NAME
from cite.contexts.rendering.logger import _log_debug
from cite.exceptions import OutputReadError


def read_output(directory: Path, name: str = f"{DOCUMENT_NAME}.txt") -> str:
    """
    Read the rendered text file and return its trimmed content.

    Invalid UTF-8 byte sequences are replaced rather than rejected.

    Raises:
        OutputReadError: If the file is missing or unreadable
    """
    text_path = directory / name
    try:
        raw = text_path.read_bytes()
    except OSError as e:
        raise OutputReadError(text_path, e) from e

    _log_debug(f"Read {len(raw)} bytes from {text_path}")
    return raw.decode("utf-8", errors="replace").strip()
