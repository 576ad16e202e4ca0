"""
Citation CLI

Prints the formatted citation of one BibTeX entry.

Examples:\n

    cite --bib refs.bib                      # Cite the first entry of refs.bib

    cite --bib refs.bib --ref knuth1984      # Cite a specific entry

    cite --bib refs.bib --tex custom.tex     # Use a custom LaTeX template

    cat entry.bib | cite                     # Read the bibliography from stdin
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from cite.config import LOG_LEVEL, LOGS_PATH, toolchain_programs
from cite.contexts.intake import read_bibliography_from_stdin
from cite.contexts.rendering import cite_reference
from cite.exceptions import CiteError, ToolchainError
from cite.utils.logger import setup_logger

app = typer.Typer(
    help="Extract a formatted citation from a BibTeX entry using the LaTeX toolchain",
    add_completion=False,
)


def fail(ctx: typer.Context, error: Exception) -> None:
    """Report an error with the usage text on stderr and exit with status 1."""
    if isinstance(error, ToolchainError) and error.output:
        typer.echo(error.output, err=True)

    message = str(error).rstrip(".")
    typer.secho(f"Error: {message}.", fg=typer.colors.RED, err=True)
    typer.echo(ctx.get_usage(), err=True)
    typer.echo(f"Try '{ctx.command_path} --help' for help.", err=True)
    raise typer.Exit(code=1)


@app.command()
def main(
    ctx: typer.Context,
    bib: Annotated[
        Optional[Path],
        typer.Option(
            "--bib",
            metavar="FILE",
            help="A bibliography file (read from standard input when omitted)",
        ),
    ] = None,
    ref: Annotated[
        Optional[str],
        typer.Option(
            "--ref",
            metavar="NAME",
            help="A reference name (the first entry is used when omitted)",
        ),
    ] = None,
    tex: Annotated[
        Optional[Path],
        typer.Option(
            "--tex",
            metavar="FILE",
            help="A LaTeX template with <bibliography> and <reference> placeholders",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug logging (toolchain commands and output) on stderr",
        ),
    ] = False,
):
    """
    Render one bibliography entry and print it as plain text.
    """
    # Bad CITE_LOG_LEVEL raises ValueError, unwritable CITE_LOGS_PATH raises OSError
    try:
        setup_logger(
            context_name="cite",
            log_dir=LOGS_PATH,
            level="DEBUG" if verbose else LOG_LEVEL,
            extra_provenance=toolchain_programs(),
        )
    except (ValueError, OSError) as e:
        fail(ctx, e)

    try:
        bib_content = None
        if bib is None:
            bib_content = read_bibliography_from_stdin()

        result = cite_reference(
            bib_path=bib,
            reference=ref,
            template_path=tex,
            bib_content=bib_content,
        )
    except (CiteError, OSError) as e:
        fail(ctx, e)

    typer.echo(result.text)


if __name__ == "__main__":
    app()
