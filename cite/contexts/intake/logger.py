"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from loguru directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

CONTEXT_PREFIX = "[intake]"


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_reference_resolved(reference: str, bib_path: Path, line_number: Optional[int]) -> None:
    """Log where the reference identifier came from."""
    if line_number is None:
        _log_info(f"Using reference '{reference}' as given")
    else:
        _log_info(f"Detected reference '{reference}' on line {line_number}")
    _log_debug(f"  Bibliography: {bib_path}")
