"""
Templating Context

Responsibilities:
- Loads the LaTeX document template (built-in or user supplied)
- Substitutes the bibliography and reference placeholders

Owns: Document template, placeholder substitution
Never: Runs the toolchain
"""

from cite.contexts.templating.renderer import (
    BIBLIOGRAPHY_PLACEHOLDER,
    DEFAULT_TEMPLATE_PATH,
    REFERENCE_PLACEHOLDER,
    load_template,
    render_document,
    render_template,
)

__all__ = [
    "BIBLIOGRAPHY_PLACEHOLDER",
    "REFERENCE_PLACEHOLDER",
    "DEFAULT_TEMPLATE_PATH",
    "load_template",
    "render_document",
    "render_template",
]
