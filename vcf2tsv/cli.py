"""Typer CLI for the variant table converter.

Usage:
    vcf2tsv calls.vcf.gz calls.tsv
    vcf2tsv calls.bcf calls.tsv --verbose --log-dir logs/
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from vcf2tsv import __version__

app = typer.Typer(
    name="vcf2tsv",
    help="Flatten a VCF/BCF file into a tab-delimited table, one row per alternate allele",
    add_completion=False,
)

console = Console()


@app.command()
def convert(
    input_path: Annotated[
        Path,
        typer.Argument(
            help="Input VCF, VCF.GZ or BCF file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    output_path: Annotated[
        Path,
        typer.Argument(
            help="Output table (created or truncated)",
            dir_okay=False,
        ),
    ],
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose", "-v",
            help="Enable verbose logging",
        ),
    ] = False,
    log_dir: Annotated[
        Path | None,
        typer.Option(
            "--log-dir",
            help="Directory for a rotating log file",
            file_okay=False,
            dir_okay=True,
        ),
    ] = None,
) -> None:
    """Convert a variant file into a tab-delimited table.

    The table has two header rows (column group, column name) followed by
    one row per alternate allele. INFO and per-sample FORMAT values are
    resolved to the value belonging to each row's allele.

    Example usage:

        vcf2tsv calls.vcf.gz calls.tsv
    """
    from vcf2tsv.config import ConversionConfig
    from vcf2tsv.exceptions import ConversionError
    from vcf2tsv.logging_config import setup_logging
    from vcf2tsv.main import run_conversion

    console.print(f"[bold]vcf2tsv[/bold] v{__version__}\n", style="blue")

    config = ConversionConfig(
        input_path=input_path,
        output_path=output_path,
        verbose=verbose,
        log_dir=log_dir,
    )

    errors = config.validate()
    if errors:
        for error in errors:
            console.print(f"[red]ERROR:[/red] {error}")
        raise typer.Exit(code=1)

    log_file = setup_logging(
        log_dir=config.log_dir,
        console_level=logging.DEBUG if verbose else logging.WARNING,
    )
    if log_file:
        console.print(f"Log file: {log_file}")

    try:
        run_conversion(config)
    except ConversionError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        if e.__cause__ is not None:
            console.print(f"  caused by: {e.__cause__}")
        if verbose:
            import traceback
            console.print(traceback.format_exc())
        raise typer.Exit(code=1)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
