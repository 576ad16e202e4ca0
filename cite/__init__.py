"""
cite - render one BibTeX entry as a formatted citation

Builds a minimal LaTeX document citing one reference, runs
latex/bibtex/dvipdf/pdftotext on it in a scratch directory and returns the
rendered plain text.

Architecture:
- Intake Context: Bibliography source and reference resolution
- Templating Context: LaTeX document template and placeholder substitution
- Rendering Context: Toolchain execution and output reading
"""

__version__ = "0.1.0"

from cite.contexts.rendering import CitationResult, cite_reference
from cite.exceptions import (
    BibliographyNotFoundError,
    CiteError,
    EmptyReferenceError,
    OutputReadError,
    ReferenceNotFoundError,
    ToolchainError,
)

__all__ = [
    "CitationResult",
    "cite_reference",
    "BibliographyNotFoundError",
    "CiteError",
    "EmptyReferenceError",
    "OutputReadError",
    "ReferenceNotFoundError",
    "ToolchainError",
]
