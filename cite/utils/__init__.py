"""
Shared utilities for cite.

Common functionality used across contexts:
- Logger setup with provenance
"""

from cite.utils.logger import log_provenance, setup_logger

__all__ = ["log_provenance", "setup_logger"]
