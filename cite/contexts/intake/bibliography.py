"""
Bibliography source handling.

A bibliography is either an existing .bib file or content pasted on standard
input, which is written into the scratch directory before the run.
"""

import sys
from pathlib import Path
from typing import TextIO

from cite.config import BIBLIOGRAPHY_FILENAME
from cite.contexts.intake.logger import _log_debug, _log_info, _log_warning
from cite.exceptions import BibliographyNotFoundError

STDIN_PROMPT = "Paste a bibliography content and press Ctrl-D"
BIB_SUFFIX = ".bib"


def read_bibliography_from_stdin(stream: TextIO = None, prompt_stream: TextIO = None) -> str:
    """
    Prompt for bibliography content and read it until end-of-stream.

    Args:
        stream: Input stream (defaults to sys.stdin)
        prompt_stream: Where to print the prompt (defaults to sys.stderr)

    Returns:
        Everything read from the stream. Bytes that are not valid UTF-8 are
        replaced, as for bibliography files.
    """
    stream = stream if stream is not None else sys.stdin
    prompt_stream = prompt_stream if prompt_stream is not None else sys.stderr

    print(STDIN_PROMPT, file=prompt_stream, flush=True)

    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        content = buffer.read().decode("utf-8", errors="replace")
    else:
        content = stream.read()

    if not content.strip():
        _log_warning("No bibliography content received on standard input")
    _log_debug(f"Read {len(content)} characters from standard input")
    return content


def write_bibliography(content: str, directory: Path) -> Path:
    """
    Write bibliography content to a generated file.

    Args:
        content: BibTeX source
        directory: Target directory (normally the scratch directory)

    Returns:
        Path to the written file
    """
    bib_path = directory / BIBLIOGRAPHY_FILENAME
    bib_path.write_text(content, encoding="utf-8")
    _log_info(f"Wrote bibliography to {bib_path}")
    return bib_path


def resolve_bibliography_path(path: Path) -> Path:
    """
    Return the absolute path of an existing bibliography file.

    Toolchain steps run inside the scratch directory, so relative paths
    would not resolve there.

    Raises:
        BibliographyNotFoundError: If the file does not exist
    """
    path = Path(path).expanduser().resolve()
    if not path.is_file():
        raise BibliographyNotFoundError(path)
    return path


def bibliography_name(bib_path: Path) -> str:
    """
    Name to put inside \\bibliography{...} for a given file.

    BibTeX appends ".bib" itself, so a trailing ".bib" suffix is dropped.

    Examples:
        >>> bibliography_name(Path("/tmp/refs.bib"))
        '/tmp/refs'
        >>> bibliography_name(Path("/tmp/refs.txt"))
        '/tmp/refs.txt'
    """
    name = str(bib_path)
    if name.endswith(BIB_SUFFIX):
        name = name[: -len(BIB_SUFFIX)]
    return name
