"""
Reference resolution for bibliography files.

Finds the identifier of the entry to cite. The scan is deliberately shallow:
the first line that starts with "@" is taken as an entry header and the
identifier is read between its first "{" and the following ",". No entry-type
filtering and no brace balancing are done.
"""

from pathlib import Path
from typing import Iterator, Optional, Tuple

from cite.contexts.intake.logger import _log_debug, log_reference_resolved
from cite.exceptions import EmptyReferenceError, ReferenceNotFoundError

ENTRY_MARKER = "@"


def parse_entry_header(line: str) -> Optional[str]:
    """
    Extract the identifier from a single bibliography line.

    Args:
        line: Raw line from a .bib file

    Returns:
        Identifier with surrounding whitespace removed, or None if the line is
        not an entry header. An entry header with no identifier yields "".

    Examples:
        >>> parse_entry_header("@article{key1,")
        'key1'
        >>> parse_entry_header("@book{  key2 , title={X}}")
        'key2'
        >>> parse_entry_header("  title = {Foo},") is None
        True
    """
    line = line.strip()
    if not line.startswith(ENTRY_MARKER):
        return None

    start = line.find("{")
    if start == -1:
        return ""
    start += 1

    end = line.find(",", start)
    if end == -1:
        end = len(line)

    if start >= end:
        return ""

    return line[start:end].strip()


def iter_entry_headers(bib_path: Path) -> Iterator[Tuple[int, str]]:
    """
    Lazily yield (line_number, identifier) for every entry header in a file.

    Line numbers are 1-based. Undecodable bytes are replaced, not rejected.
    """
    with open(bib_path, encoding="utf-8", errors="replace") as f:
        for line_number, line in enumerate(f, 1):
            identifier = parse_entry_header(line)
            if identifier is not None:
                yield line_number, identifier


def find_first_reference(bib_path: Path) -> Tuple[str, int]:
    """
    Return the identifier of the first entry in a bibliography file.

    Args:
        bib_path: Path to the .bib file

    Returns:
        Tuple of (identifier, line_number)

    Raises:
        ReferenceNotFoundError: No entry header, or the first one has no identifier
        OSError: The file cannot be opened or read
    """
    # First qualifying line wins, even when its identifier is empty
    for line_number, identifier in iter_entry_headers(bib_path):
        if not identifier:
            _log_debug(f"Entry header on line {line_number} has no identifier")
            break
        return identifier, line_number

    raise ReferenceNotFoundError(bib_path)


def resolve_reference(bib_path: Path, reference: Optional[str] = None) -> str:
    """
    Resolve the reference to cite.

    An explicit reference is used as-is, without checking it against the file.
    Otherwise the first entry of the bibliography is used.

    Args:
        bib_path: Path to the .bib file
        reference: Explicit reference identifier (optional)

    Returns:
        Reference identifier

    Raises:
        EmptyReferenceError: If an explicit reference is empty
        ReferenceNotFoundError: If auto-detection finds nothing
    """
    if reference is not None:
        if not reference.strip():
            raise EmptyReferenceError()
        log_reference_resolved(reference, bib_path, line_number=None)
        return reference

    reference, line_number = find_first_reference(bib_path)
    log_reference_resolved(reference, bib_path, line_number=line_number)
    return reference
