"""
LaTeX document template rendering.

Templates carry two literal placeholder tokens that are replaced verbatim.
Values are not escaped, so a path or reference containing LaTeX-special
characters goes through as is.
"""

from pathlib import Path
from typing import Mapping

from cite.contexts.templating.logger import _log_debug, _log_warning

BIBLIOGRAPHY_PLACEHOLDER = "<bibliography>"
REFERENCE_PLACEHOLDER = "<reference>"
PLACEHOLDERS = (BIBLIOGRAPHY_PLACEHOLDER, REFERENCE_PLACEHOLDER)

DEFAULT_TEMPLATE_PATH = Path(__file__).resolve().parent / "default_template.tex"


def render_template(text: str, values: Mapping[str, str]) -> str:
    """
    Replace every occurrence of each placeholder key with its value.

    Replacement is literal and non-overlapping. Text that does not match a key
    is preserved exactly.

    Args:
        text: Template text
        values: Mapping of placeholder token to replacement

    Returns:
        Rendered text

    Example:
        >>> render_template("see <reference>, <reference>", {"<reference>": "key1"})
        'see key1, key1'
    """
    for key, value in values.items():
        text = text.replace(key, value)
    return text


def load_template(template_path: Path = None) -> str:
    """
    Load a document template, or the built-in one when no path is given.

    Raises:
        OSError: If a user template cannot be read
    """
    if template_path is None:
        template_path = DEFAULT_TEMPLATE_PATH

    text = Path(template_path).read_text(encoding="utf-8")
    _log_debug(f"Loaded template {template_path}")

    missing = [token for token in PLACEHOLDERS if token not in text]
    if missing:
        _log_warning(f"Template {template_path} has no {', '.join(missing)} placeholder")

    return text


def render_document(template: str, bibliography: str, reference: str) -> str:
    """Fill both placeholders of a document template."""
    return render_template(
        template,
        {
            BIBLIOGRAPHY_PLACEHOLDER: bibliography,
            REFERENCE_PLACEHOLDER: reference,
        },
    )
