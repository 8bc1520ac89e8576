"""Multi-allelic decomposition of variant records into table rows.

Each record with k alternate alleles becomes k rows. For every row, each
INFO tag and each (sample, FORMAT tag) pair is resolved to the single value
belonging to that row's alternate allele, using the tag's declared Number:

    Number=<n>, ., G -> first value
    Number=A         -> value of this alternate
    Number=R         -> value of this alternate (skipping the reference)

A tag that is undefined in the header, absent from the record, or carries
too few values renders as an empty cell. An unsupported Number, or a FORMAT
tag declared as a Flag, aborts the conversion.
"""

import logging
from collections.abc import Iterator, Sequence
from typing import Any

from vcf2tsv.catalog import TagCatalog
from vcf2tsv.exceptions import UnsupportedTagLengthError, UnsupportedTagTypeError
from vcf2tsv.formatting import (
    format_filters,
    format_flag,
    format_float,
    format_genotype,
    format_integer,
    formatter_for,
)
from vcf2tsv.models import (
    GENOTYPE_TAG,
    CardinalityKind,
    ConversionStats,
    TagDescriptor,
    VariantRecord,
)
from vcf2tsv.writers.row_writer import RowWriter

logger = logging.getLogger(__name__)


def resolve_index(tag: TagDescriptor, alt_index: int) -> int:
    """Position of the value for an alternate allele within a tag's values.

    Args:
        tag: Tag descriptor
        alt_index: 0-based index over the alternate alleles

    Returns:
        Index into the tag's value list

    Raises:
        UnsupportedTagLengthError: If the tag's Number is not supported
    """
    if tag.cardinality is None:
        raise UnsupportedTagLengthError(tag.id, tag.number)

    kind = tag.cardinality.kind
    if kind is CardinalityKind.ALT_ALLELES:
        return alt_index
    if kind is CardinalityKind.ALLELES:
        return alt_index + 1
    # FIXED, VARIABLE and GENOTYPES only expose their first value
    return 0


def select_value(values: Any, index: int) -> Any:
    """Pick one value out of a decoded tag value.

    Returns:
        The value, or None if absent or out of range
    """
    if values is None:
        return None
    if isinstance(values, (tuple, list)):
        if index < len(values):
            return values[index]
        return None
    # Scalar (Number=1) values only have index 0
    return values if index == 0 else None


class AlleleFlattener:
    """Turns variant records into one table row per alternate allele.

    Usage:
        flattener = AlleleFlattener(catalog, reader.samples)
        for record in reader:
            flattener.write_record(record, writer)
    """

    def __init__(
        self,
        catalog: TagCatalog,
        samples: Sequence[str],
        stats: ConversionStats | None = None,
    ) -> None:
        self.catalog = catalog
        self.samples = list(samples)
        self.stats = stats if stats is not None else ConversionStats()

    def rows(self, record: VariantRecord) -> Iterator[list[str]]:
        """Yield the rendered rows of one record, one per alternate allele."""
        self.stats.records += 1
        if not record.alts:
            self.stats.records_without_alts += 1
            return

        # Genotypes do not depend on which alternate is emitted
        genotypes = [format_genotype(call) for call in record.genotypes]

        for alt_index, alt in enumerate(record.alts):
            row = self._fixed_cells(record, alt)
            row.extend(self._info_cells(record, alt_index))
            row.extend(self._format_cells(record, alt_index, genotypes))
            self.stats.rows += 1
            yield row

    def write_record(self, record: VariantRecord, writer: RowWriter) -> int:
        """Write all rows of one record.

        Returns:
            Number of rows written
        """
        written = 0
        for row in self.rows(record):
            writer.write_fields(row)
            writer.newline()
            written += 1
        return written

    def _fixed_cells(self, record: VariantRecord, alt: str) -> list[str]:
        return [
            record.contig,
            format_integer(record.position + 1),
            record.ref,
            alt,
            format_float(record.quality),
            format_filters(record.filters),
        ]

    def _info_cells(self, record: VariantRecord, alt_index: int) -> list[str]:
        cells = []
        for tag_id in self.catalog.info_ids:
            tag = self.catalog.describe_info(tag_id)
            if tag is None:
                cells.append(self._gap("INFO", tag_id, "undefined in header"))
                continue

            if tag.is_flag:
                cells.append(format_flag(record.info.get(tag_id)))
                continue

            index = resolve_index(tag, alt_index)
            if tag_id not in record.info:
                cells.append(self._gap("INFO", tag_id, "absent from record"))
                continue
            cells.append(self._render(tag, record.info[tag_id], index))
        return cells

    def _format_cells(
        self,
        record: VariantRecord,
        alt_index: int,
        genotypes: list[str],
    ) -> list[str]:
        cells = []
        for sample_index in range(len(self.samples)):
            values = record.samples[sample_index] if sample_index < len(record.samples) else {}
            for tag_id in self.catalog.format_ids:
                tag = self.catalog.describe_format(tag_id)
                if tag is None:
                    cells.append(self._gap("FORMAT", tag_id, "undefined in header"))
                    continue

                if tag_id == GENOTYPE_TAG:
                    if sample_index < len(genotypes):
                        cells.append(genotypes[sample_index])
                    else:
                        cells.append(self._gap("FORMAT", tag_id, "no genotype call"))
                    continue

                if tag.is_flag:
                    raise UnsupportedTagTypeError(tag_id)

                index = resolve_index(tag, alt_index)
                if values.get(tag_id) is None:
                    cells.append(self._gap("FORMAT", tag_id, "absent for sample"))
                    continue
                cells.append(self._render(tag, values[tag_id], index))
        return cells

    def _render(self, tag: TagDescriptor, values: Any, index: int) -> str:
        value = select_value(values, index)
        if value is None:
            return self._gap("tag", tag.id, f"no value at index {index}")
        return formatter_for(tag.value_type)(value)

    def _gap(self, kind: str, tag_id: str, reason: str) -> str:
        logger.debug("%s %s %s; writing empty cell", kind, tag_id, reason)
        self.stats.empty_cells += 1
        return ""
