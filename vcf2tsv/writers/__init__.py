"""Output writers for the delimited variant table."""

from vcf2tsv.writers.header import write_header
from vcf2tsv.writers.row_writer import RowWriter

__all__ = ["RowWriter", "write_header"]
