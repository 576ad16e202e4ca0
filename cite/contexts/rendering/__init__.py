"""
Rendering Context

Responsibilities:
- Owns the scratch directory for a run
- Runs the LaTeX/BibTeX/dvipdf/pdftotext toolchain
- Reads back the rendered plain text

Owns: Toolchain execution, intermediate artifacts, output
Never: Modifies template content
"""

from cite.contexts.rendering.citation import CitationResult, cite_reference
from cite.contexts.rendering.reader import read_output
from cite.contexts.rendering.toolchain import (
    StepResult,
    ToolchainStep,
    default_steps,
    run_step,
    run_toolchain,
    scratch_directory,
    write_document,
)

__all__ = [
    "CitationResult",
    "cite_reference",
    "read_output",
    "StepResult",
    "ToolchainStep",
    "default_steps",
    "run_step",
    "run_toolchain",
    "scratch_directory",
    "write_document",
]
