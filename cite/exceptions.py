"""Custom exceptions for cite with the context needed to report a failed run."""

from pathlib import Path
from typing import Optional


class CiteError(Exception):
    """Base class for every failure that ends a citation run."""


class ReferenceNotFoundError(CiteError):
    """
    Exception raised when no entry header can be found in a bibliography.

    Attributes:
        bib_path: Bibliography file that was scanned
    """

    def __init__(self, bib_path: Path):
        self.bib_path = bib_path
        super().__init__(f"cannot find a reference in {bib_path}")


class EmptyReferenceError(CiteError):
    """Exception raised when an explicit reference name is empty."""

    def __init__(self):
        super().__init__("reference name must not be empty")


class BibliographyNotFoundError(CiteError):
    """
    Exception raised when the bibliography file does not exist.

    Attributes:
        path: Path that was requested
    """

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"bibliography file not found: {path}")


class ToolchainError(CiteError):
    """
    Exception raised when a toolchain step fails.

    Attributes:
        step_name: Name of the failing step (e.g., 'bibtex', 'latex pass 2')
        program: Executable that was spawned
        returncode: Exit status, or None if the program could not be started
        stdout: Captured standard output of the failing program
        stderr: Captured standard error of the failing program
    """

    def __init__(
        self,
        step_name: str,
        program: str,
        returncode: Optional[int] = None,
        stdout: str = "",
        stderr: str = "",
    ):
        self.step_name = step_name
        self.program = program
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

        where = "" if step_name == program else f" ({step_name})"
        if returncode is None:
            message = f"failed to start '{program}'{where}, is it installed?"
        else:
            message = f"'{program}' exited with status {returncode}{where}"

        super().__init__(message)

    @property
    def output(self) -> str:
        """Captured stdout and stderr of the failing program, joined."""
        return "\n".join(part for part in (self.stdout, self.stderr) if part.strip())


class OutputReadError(CiteError):
    """
    Exception raised when the rendered text cannot be read back.

    Attributes:
        path: Expected location of the plain-text artifact
        original_error: The underlying OSError
    """

    def __init__(self, path: Path, original_error: Optional[Exception] = None):
        self.path = path
        self.original_error = original_error

        message = f"failed to read {path.name}"
        if original_error:
            message += f" ({getattr(original_error, 'strerror', None) or original_error})"

        super().__init__(message)
