"""Two-row table header.

Row 1 groups columns: the fixed columns and INFO columns are labelled
VARIANT, each sample's FORMAT block is labelled with the sample name.
Row 2 holds the column names.
"""

from collections.abc import Sequence

from vcf2tsv.catalog import TagCatalog
from vcf2tsv.writers.row_writer import RowWriter

GROUP_LABEL = "VARIANT"
FIXED_COLUMNS = ("CHROM", "POS", "REF", "ALT", "QUAL", "FILTER")


def grouping_row(catalog: TagCatalog, samples: Sequence[str]) -> list[str]:
    """Build the grouping row."""
    row = [GROUP_LABEL] * (len(FIXED_COLUMNS) + len(catalog.info_ids))
    for sample in samples:
        row.extend([sample] * len(catalog.format_ids))
    return row


def names_row(catalog: TagCatalog, samples: Sequence[str]) -> list[str]:
    """Build the column names row."""
    row = list(FIXED_COLUMNS) + catalog.info_ids
    for _ in samples:
        row.extend(catalog.format_ids)
    return row


def write_header(writer: RowWriter, catalog: TagCatalog, samples: Sequence[str]) -> None:
    """Write both header rows.

    Args:
        writer: Destination row writer, positioned at the start of the table
        catalog: Tag catalog of the input file
        samples: Sample names in file order
    """
    writer.write_fields(grouping_row(catalog, samples))
    writer.newline()
    writer.write_fields(names_row(catalog, samples))
    writer.newline()
