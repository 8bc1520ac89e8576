"""Conversion entry points.

convert() is the library entry point: one streaming pass over the input,
one table written, a ConversionStats returned on success and a
ConversionError raised on failure. run_conversion() wraps it with console
progress and a summary for the command line.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from vcf2tsv.catalog import TagCatalog
from vcf2tsv.config import ConversionConfig
from vcf2tsv.flattener import AlleleFlattener
from vcf2tsv.models import ConversionStats, VariantRecord
from vcf2tsv.reader import VariantReader
from vcf2tsv.writers import RowWriter, write_header

logger = logging.getLogger(__name__)

console = Console()


def convert(
    input_path: Path | str,
    output_path: Path | str,
    on_record: Callable[[VariantRecord], None] | None = None,
) -> ConversionStats:
    """Convert a variant file into a tab-delimited table.

    Writes the two header rows, then one row per (record, alternate allele)
    pair. The output file is closed on every exit path; after a failure it
    holds the rows written so far.

    Args:
        input_path: Path to .vcf, .vcf.gz or .bcf input
        output_path: Path of the table to create (truncated if present)
        on_record: Optional callback invoked after each record is written

    Returns:
        Statistics for the run

    Raises:
        VariantFileError: If the input cannot be opened
        OutputWriteError: If the output cannot be created or written
        RecordDecodeError: If a record cannot be decoded
        UnsupportedTagLengthError: If a tag's Number cannot be resolved per allele
        UnsupportedTagTypeError: If a FORMAT tag is declared as a Flag
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    stats = ConversionStats()

    with VariantReader(input_path) as reader:
        catalog = TagCatalog.from_header(reader.header)
        logger.info(
            "Converting %s: %d INFO tags, %d FORMAT tags, %d samples",
            input_path.name,
            len(catalog.info_ids),
            len(catalog.format_ids),
            len(reader.samples),
        )

        flattener = AlleleFlattener(catalog, reader.samples, stats)
        with RowWriter.open(output_path) as writer:
            write_header(writer, catalog, reader.samples)
            for record in reader:
                flattener.write_record(record, writer)
                if on_record is not None:
                    on_record(record)

    logger.info(
        "Wrote %d rows from %d records to %s", stats.rows, stats.records, output_path
    )
    return stats


# Name of the function exported by the original extension module
to_txt = convert


def run_conversion(config: ConversionConfig) -> ConversionStats:
    """Run a conversion with console progress and summary.

    Args:
        config: Validated run configuration

    Returns:
        Statistics for the run
    """
    console.print(f"Reading {config.input_path.name}")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TextColumn("{task.completed:,} records"),
        TimeElapsedColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Flattening alleles...", total=None)
        stats = convert(
            config.input_path,
            config.output_path,
            on_record=lambda _record: progress.advance(task),
        )

    print_summary(stats)
    console.print(f"\n  Output table:       {config.output_path}")
    console.print("\n[green]Conversion complete.[/green]\n")
    return stats


def print_summary(stats: ConversionStats) -> None:
    """Print summary statistics to the console.

    Args:
        stats: Statistics collected during conversion
    """
    console.print("\n[bold]Summary[/bold]")
    console.print(f"  Records read:       {stats.records:,}")
    console.print(f"  Rows written:       {stats.rows:,}")
    console.print(f"  Extra rows from multi-allelic records: {stats.multiallelic_rows:,}")
    console.print(f"  Records without ALT: {stats.records_without_alts:,}")
    console.print(f"  Empty cells (missing or undefined tags): {stats.empty_cells:,}")
