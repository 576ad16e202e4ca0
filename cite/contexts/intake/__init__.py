"""
Intake Context

Responsibilities:
- Locates or captures the bibliography (file path or standard input)
- Resolves the reference identifier to cite

Owns: Bibliography source, entry header scanning
Never: Touches the LaTeX template or runs the toolchain
"""

from cite.contexts.intake.bibliography import (
    STDIN_PROMPT,
    bibliography_name,
    read_bibliography_from_stdin,
    resolve_bibliography_path,
    write_bibliography,
)
from cite.contexts.intake.reference_resolver import (
    find_first_reference,
    iter_entry_headers,
    parse_entry_header,
    resolve_reference,
)

__all__ = [
    "STDIN_PROMPT",
    "bibliography_name",
    "read_bibliography_from_stdin",
    "resolve_bibliography_path",
    "write_bibliography",
    "find_first_reference",
    "iter_entry_headers",
    "parse_entry_header",
    "resolve_reference",
]
