"""Variant file reader backed by pysam.

Opens VCF, bgzipped VCF or BCF input and yields owned VariantRecord copies.
Each record is fully materialized before the next one is pulled, since
pysam reuses its record buffer across iterations.
"""

import logging
from collections.abc import Iterator
from pathlib import Path
from types import TracebackType
from typing import Any

import pysam

from vcf2tsv.exceptions import RecordDecodeError, VariantFileError
from vcf2tsv.models import GENOTYPE_TAG, SampleCall, VariantRecord

logger = logging.getLogger(__name__)


class VariantReader:
    """Forward-only reader over a variant file.

    Usage:
        with VariantReader(Path("calls.vcf.gz")) as reader:
            catalog = TagCatalog.from_header(reader.header)
            for record in reader:
                ...
    """

    def __init__(self, path: Path) -> None:
        """Open the variant file.

        Args:
            path: Path to .vcf, .vcf.gz or .bcf file

        Raises:
            VariantFileError: If the file is missing or not a variant file
        """
        self.path = Path(path)
        if not self.path.exists():
            raise VariantFileError(f"Variant file not found: {self.path}")
        try:
            self._file = pysam.VariantFile(str(self.path))
        except (OSError, ValueError) as e:
            raise VariantFileError(f"Cannot open variant file {self.path}: {e}") from e

        self.header = self._file.header
        self.samples: list[str] = list(self.header.samples)
        self.records_read = 0

    def __iter__(self) -> Iterator[VariantRecord]:
        """Yield records in file order.

        Raises:
            RecordDecodeError: If a record cannot be decoded; the run stops
        """
        iterator = iter(self._file)
        while True:
            try:
                rec = next(iterator)
            except StopIteration:
                return
            except (OSError, ValueError) as e:
                raise RecordDecodeError(
                    f"Failed to decode record {self.records_read + 1} of {self.path}: {e}"
                ) from e
            self.records_read += 1
            yield materialize(rec)

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "VariantReader":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()


def materialize(rec: Any) -> VariantRecord:
    """Copy a pysam VariantRecord into an owned VariantRecord.

    Values that are not valid text are stored as None (rendered empty).
    """
    info: dict[str, Any] = {}
    for key in rec.info.keys():
        info[key] = _read_value(rec.info, key)

    format_keys = list(rec.format.keys())
    has_genotype = GENOTYPE_TAG in format_keys

    samples: list[dict[str, Any]] = []
    genotypes: list[SampleCall | None] = []
    for sample in rec.samples.values():
        values: dict[str, Any] = {}
        for key in format_keys:
            if key == GENOTYPE_TAG:
                continue
            values[key] = _read_value(sample, key)
        samples.append(values)

        if has_genotype:
            alleles = sample[GENOTYPE_TAG] or ()
            genotypes.append(SampleCall(tuple(alleles), bool(sample.phased)))
        else:
            genotypes.append(None)

    return VariantRecord(
        contig=rec.contig,
        position=rec.start,
        alleles=tuple(rec.alleles or ()),
        quality=rec.qual,
        filters=list(rec.filter.keys()),
        info=info,
        samples=samples,
        genotypes=genotypes,
    )


def _read_value(container: Any, key: str) -> Any:
    try:
        return container[key]
    except UnicodeDecodeError:
        logger.debug("Value of %s is not valid UTF-8; treating as missing", key)
        return None
    except KeyError:
        return None
