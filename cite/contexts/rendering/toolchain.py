"""
Toolchain Runner

Runs latex, bibtex, latex, latex, dvipdf and pdftotext in sequence inside a
scratch directory. The first step that exits non-zero aborts the run.
"""

import subprocess
import tempfile
import time
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List

from cite.config import DOCUMENT_NAME, load_toolchain_config
from cite.contexts.rendering.logger import _log_debug, log_step_result, log_step_start
from cite.exceptions import ToolchainError


@dataclass(frozen=True)
class ToolchainStep:
    """
    One external program invocation.

    Attributes:
        name: Step identifier used in logs and errors (e.g., 'latex pass 2')
        program: Executable to spawn
        argument: Single file argument, relative to the working directory
    """

    name: str
    program: str
    argument: str

    @property
    def command(self) -> List[str]:
        return [self.program, self.argument]


@dataclass
class StepResult:
    """
    Outcome of one toolchain step.

    Attributes:
        step: The step that ran
        returncode: Exit status of the program
        stdout: Captured standard output
        stderr: Captured standard error
        elapsed: Wall time in seconds
    """

    step: ToolchainStep
    returncode: int
    stdout: str = ""
    stderr: str = ""
    elapsed: float = 0.0


def default_steps(config_path: Path = None) -> List[ToolchainStep]:
    """Build the step list from toolchain.yaml."""
    config = load_toolchain_config(config_path)
    return [ToolchainStep(**step) for step in config["steps"]]


@contextmanager
def scratch_directory(prefix: str = "cite-") -> Iterator[Path]:
    """
    Create a unique scratch directory, removed on exit whatever happens.

    Example:
        with scratch_directory() as work_dir:
            write_document(text, work_dir)
    """
    with tempfile.TemporaryDirectory(prefix=prefix) as tmpdir:
        _log_debug(f"Created scratch directory {tmpdir}")
        yield Path(tmpdir)
    _log_debug(f"Removed scratch directory {tmpdir}")


def write_document(text: str, directory: Path, name: str = DOCUMENT_NAME) -> Path:
    """Write the rendered document to {directory}/{name}.tex."""
    tex_path = directory / f"{name}.tex"
    tex_path.write_text(text, encoding="utf-8")
    _log_debug(f"Wrote {tex_path}")
    return tex_path


def run_step(step: ToolchainStep, work_dir: Path) -> StepResult:
    """
    Run one step and wait for it to exit.

    Standard input is closed so a LaTeX error prompt ends the program
    instead of waiting for input.

    Raises:
        ToolchainError: If the program cannot be started
    """
    log_step_start(step, work_dir)
    start_time = time.time()

    try:
        completed = subprocess.run(
            step.command,
            cwd=work_dir,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",  # TeX output is not always valid UTF-8
        )
    except FileNotFoundError as e:
        raise ToolchainError(step.name, step.program) from e

    result = StepResult(
        step=step,
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
        elapsed=time.time() - start_time,
    )
    log_step_result(result)
    return result


def run_toolchain(steps: List[ToolchainStep], work_dir: Path) -> List[StepResult]:
    """
    Run every step in order, stopping at the first failure.

    Args:
        steps: Steps to run (see default_steps())
        work_dir: Directory holding the document; used as cwd for every step

    Returns:
        One StepResult per step, all with exit status 0

    Raises:
        ToolchainError: On the first non-zero exit status, with captured output
    """
    results = []
    for step in steps:
        result = run_step(step, work_dir)
        if result.returncode != 0:
            raise ToolchainError(
                step.name,
                step.program,
                returncode=result.returncode,
                stdout=result.stdout,
                stderr=result.stderr,
            )
        results.append(result)
    return results
