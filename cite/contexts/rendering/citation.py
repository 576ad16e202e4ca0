"""
Citation Orchestration

Ties the contexts together for one run:
resolve bibliography, resolve reference, render template, run the toolchain,
read the output. Any failure propagates and the scratch directory is removed
on every path.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from cite.contexts.intake import (
    bibliography_name,
    resolve_bibliography_path,
    resolve_reference,
    write_bibliography,
)
from cite.contexts.rendering.logger import _log_debug, log_citation_result
from cite.contexts.rendering.reader import read_output
from cite.contexts.rendering.toolchain import (
    StepResult,
    ToolchainStep,
    default_steps,
    run_toolchain,
    scratch_directory,
    write_document,
)
from cite.contexts.templating import load_template, render_document


@dataclass
class CitationResult:
    """
    Result of one citation run.

    Attributes:
        reference: Reference identifier that was cited
        bib_path: Bibliography file used (may no longer exist if generated)
        text: Rendered citation, trimmed
        steps: Results of every toolchain step, in order
    """

    reference: str
    bib_path: Path
    text: str
    steps: List[StepResult] = field(default_factory=list)


def cite_reference(
    bib_path: Optional[Path] = None,
    reference: Optional[str] = None,
    template_path: Optional[Path] = None,
    bib_content: Optional[str] = None,
    steps: Optional[List[ToolchainStep]] = None,
) -> CitationResult:
    """
    Render one bibliography entry as plain text.

    Args:
        bib_path: Existing .bib file (ignored when bib_content is given)
        reference: Reference identifier; the first entry is used when None
        template_path: Custom LaTeX template; built-in default when None
        bib_content: BibTeX source to write into the scratch directory
        steps: Toolchain steps; default_steps() when None

    Returns:
        CitationResult with the rendered text

    Raises:
        ValueError: If neither bib_path nor bib_content is given
        CiteError: On resolution, toolchain or read failures
        OSError: On other I/O failures
    """
    if bib_path is None and bib_content is None:
        raise ValueError("Either bib_path or bib_content is required")

    if bib_content is None:
        bib_path = resolve_bibliography_path(bib_path)

    template = load_template(template_path)
    if steps is None:
        steps = default_steps()

    start_time = time.time()

    with scratch_directory() as work_dir:
        if bib_content is not None:
            bib_path = write_bibliography(bib_content, work_dir)

        reference = resolve_reference(bib_path, reference)

        document = render_document(template, bibliography_name(bib_path), reference)
        write_document(document, work_dir)

        step_results = run_toolchain(steps, work_dir)
        text = read_output(work_dir)

    if not text:
        _log_debug("Toolchain produced an empty text file")

    log_citation_result(reference, text, time.time() - start_time)

    return CitationResult(reference=reference, bib_path=bib_path, text=text, steps=step_results)
