"""Unit tests for the toolchain runner, with subprocess.run replaced."""

import pytest

from cite.contexts.rendering.toolchain import (
    ToolchainStep,
    default_steps,
    run_step,
    run_toolchain,
    scratch_directory,
    write_document,
)
from cite.exceptions import ToolchainError


@pytest.mark.unit
def test_default_steps(default_programs):
    """Test the fixed order and arguments of the toolchain."""
    steps = default_steps()

    assert [step.command for step in steps] == [
        ["latex", "document.tex"],
        ["bibtex", "document"],
        ["latex", "document.tex"],
        ["latex", "document.tex"],
        ["dvipdf", "document.dvi"],
        ["pdftotext", "document.pdf"],
    ]
    assert len({step.name for step in steps}) == len(steps)


@pytest.mark.unit
def test_program_names_follow_environment(monkeypatch, default_programs):
    monkeypatch.setenv("CITE_LATEX", "/opt/texlive/bin/latex")

    steps = default_steps()

    assert [step.program for step in steps].count("/opt/texlive/bin/latex") == 3
    assert steps[1].program == "bibtex"


@pytest.mark.unit
def test_run_toolchain_runs_every_step(tmp_path, fake_toolchain):
    fake = fake_toolchain()

    results = run_toolchain(default_steps(), tmp_path)

    assert fake.programs == ["latex", "bibtex", "latex", "latex", "dvipdf", "pdftotext"]
    assert fake.work_dirs == {tmp_path}
    assert all(result.returncode == 0 for result in results)
    assert (tmp_path / "document.txt").exists()


@pytest.mark.unit
def test_run_toolchain_stops_at_first_failure(tmp_path, fake_toolchain):
    fake = fake_toolchain(fail_on="bibtex", returncode=2)

    with pytest.raises(ToolchainError) as exc_info:
        run_toolchain(default_steps(), tmp_path)

    error = exc_info.value
    assert fake.programs == ["latex", "bibtex"]
    assert error.step_name == "bibtex"
    assert error.program == "bibtex"
    assert error.returncode == 2
    assert "bibtex" in str(error)
    assert "I couldn't open database file" in error.output


@pytest.mark.unit
def test_missing_program(tmp_path, monkeypatch):
    def not_found(command, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", command[0])

    monkeypatch.setattr("cite.contexts.rendering.toolchain.subprocess.run", not_found)

    with pytest.raises(ToolchainError) as exc_info:
        run_step(ToolchainStep("dvipdf", "dvipdf", "document.dvi"), tmp_path)

    assert exc_info.value.returncode is None
    assert "failed to start 'dvipdf'" in str(exc_info.value)


@pytest.mark.unit
def test_scratch_directory_is_removed():
    with scratch_directory() as work_dir:
        (work_dir / "document.aux").write_text("\\relax\n")
        assert work_dir.is_dir()

    assert not work_dir.exists()


@pytest.mark.unit
def test_scratch_directory_is_removed_on_error():
    with pytest.raises(RuntimeError):
        with scratch_directory() as work_dir:
            raise RuntimeError("boom")

    assert not work_dir.exists()


@pytest.mark.unit
def test_scratch_directories_are_unique():
    with scratch_directory() as first, scratch_directory() as second:
        assert first != second


@pytest.mark.unit
def test_write_document(tmp_path):
    tex_path = write_document("\\relax\n", tmp_path)

    assert tex_path == tmp_path / "document.tex"
    assert tex_path.read_text() == "\\relax\n"
