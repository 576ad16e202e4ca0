"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[render]"


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_step_start(step, work_dir: Path) -> None:
    """Log the command about to run."""
    _log_info(f"Running {step.name}: {step.program} {step.argument}")
    _log_debug(f"  Working directory: {work_dir}")


def log_step_result(result) -> None:
    """
    Log the outcome of one toolchain step.

    Captured output of a failed step is logged raw at debug level so
    multi-line compiler output keeps its formatting.

    Args:
        result: StepResult from run_step()
    """
    if result.returncode == 0:
        _log_debug(f"{result.step.name} finished ({result.elapsed:.2f}s)")
        return

    _log_error(f"{result.step.name} exited with status {result.returncode} ({result.elapsed:.2f}s)")
    if result.stdout:
        logger.opt(raw=True).debug(
            f"\n{'=' * 80}\n{result.step.program.upper()} STDOUT:\n{'=' * 80}\n{result.stdout}\n"
        )
    if result.stderr:
        logger.opt(raw=True).debug(
            f"\n{'=' * 80}\n{result.step.program.upper()} STDERR:\n{'=' * 80}\n{result.stderr}\n"
        )


def log_citation_result(reference: str, text: str, elapsed_time: float) -> None:
    """Log a completed run."""
    _log_success(f"{reference}: rendered {len(text)} characters ({elapsed_time:.2f}s)")
