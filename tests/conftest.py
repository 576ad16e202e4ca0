"""Shared fixtures: sample bibliographies and a stand-in for the LaTeX toolchain."""

import subprocess
from pathlib import Path

import pytest
from loguru import logger

TOOLCHAIN_ENV_VARS = ["CITE_LATEX", "CITE_BIBTEX", "CITE_DVIPDF", "CITE_PDFTOTEXT"]

KNUTH_ENTRY = r"""@book{knuth1984,
  author    = {Donald E. Knuth},
  title     = {The {\TeX}book},
  publisher = {Addison-Wesley},
  year      = {1984}
}
"""

RENDERED_TEXT = "[1] D. E. Knuth, The TEXbook. Addison-Wesley, 1984."


class FakeToolchain:
    """
    Replacement for subprocess.run that records toolchain invocations.

    pdftotext writes a text file next to its input, like the real program.
    A program named in fail_on exits with a non-zero status instead.
    """

    def __init__(self, text: str = RENDERED_TEXT, fail_on: str = None, returncode: int = 1):
        self.text = text
        self.fail_on = fail_on
        self.returncode = returncode
        self.calls = []
        self.documents = []

    def __call__(self, command, cwd=None, **kwargs):
        cwd = Path(cwd)
        self.calls.append((list(command), cwd))
        program, argument = command

        if program == "latex" and (cwd / argument).exists():
            self.documents.append((cwd / argument).read_text())

        if program == self.fail_on:
            return subprocess.CompletedProcess(
                command,
                self.returncode,
                stdout=f"This is {program}\n",
                stderr="I couldn't open database file refs.bib\n",
            )

        if program == "pdftotext":
            (cwd / argument).with_suffix(".txt").write_text(f"\n\n{self.text}\n\n\f")

        return subprocess.CompletedProcess(command, 0, stdout="", stderr="")

    @property
    def programs(self):
        return [command[0] for command, _ in self.calls]

    @property
    def work_dirs(self):
        return {cwd for _, cwd in self.calls}


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added during a test (the CLI points one at a captured stream)."""
    yield
    logger.remove()


@pytest.fixture
def default_programs(monkeypatch):
    """Make sure the toolchain uses its default program names."""
    for name in TOOLCHAIN_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_toolchain(monkeypatch, default_programs):
    """Install a FakeToolchain factory in place of subprocess.run."""

    def install(**kwargs) -> FakeToolchain:
        fake = FakeToolchain(**kwargs)
        monkeypatch.setattr("cite.contexts.rendering.toolchain.subprocess.run", fake)
        return fake

    return install


@pytest.fixture
def bib_file(tmp_path) -> Path:
    """A bibliography with a single well-formed entry."""
    path = tmp_path / "refs.bib"
    path.write_text(KNUTH_ENTRY)
    return path
