"""Tag catalog built from a variant file header.

Collects INFO and FORMAT declarations in header order. Column order in the
output table follows this order, so re-running on the same file is
column-stable.
"""

import logging
from collections.abc import Iterable
from typing import Any

from vcf2tsv.exceptions import UnsupportedTagLengthError
from vcf2tsv.models import Cardinality, TagDescriptor, ValueType

logger = logging.getLogger(__name__)


class TagCatalog:
    """Ordered INFO/FORMAT tag ids with O(1) descriptor lookup.

    A column id without a descriptor is "undefined": lookups return None and
    the flattener renders the cell empty.

    Usage:
        catalog = TagCatalog.from_header(vcf.header)
        for tag_id in catalog.info_ids:
            descriptor = catalog.describe_info(tag_id)
    """

    def __init__(
        self,
        info_ids: Iterable[str],
        format_ids: Iterable[str],
        info: dict[str, TagDescriptor] | None = None,
        formats: dict[str, TagDescriptor] | None = None,
    ) -> None:
        self.info_ids: list[str] = list(info_ids)
        self.format_ids: list[str] = list(format_ids)
        self._info = dict(info or {})
        self._formats = dict(formats or {})

    @classmethod
    def from_descriptors(
        cls,
        info_tags: Iterable[TagDescriptor],
        format_tags: Iterable[TagDescriptor],
    ) -> "TagCatalog":
        """Build a catalog where every column is defined."""
        info_tags = list(info_tags)
        format_tags = list(format_tags)
        return cls(
            info_ids=[t.id for t in info_tags],
            format_ids=[t.id for t in format_tags],
            info={t.id: t for t in info_tags},
            formats={t.id: t for t in format_tags},
        )

    @classmethod
    def from_header(cls, header: Any) -> "TagCatalog":
        """Load INFO/FORMAT declarations from a pysam VariantHeader.

        Header records are walked in line order. A declaration with an
        unknown Type becomes an undefined column; one with an unsupported
        Number keeps a descriptor without cardinality so that the error is
        raised when a record first needs the tag.

        Args:
            header: pysam.VariantHeader

        Returns:
            Populated TagCatalog
        """
        info_ids: list[str] = []
        format_ids: list[str] = []
        info: dict[str, TagDescriptor] = {}
        formats: dict[str, TagDescriptor] = {}

        for hrec in header.records:
            if hrec.type == "INFO":
                ids, metadata, descriptors = info_ids, header.info, info
            elif hrec.type == "FORMAT":
                ids, metadata, descriptors = format_ids, header.formats, formats
            else:
                continue

            tag_id = hrec.get("ID")
            if tag_id is None or tag_id in ids:
                continue
            ids.append(tag_id)

            meta = metadata.get(tag_id)
            if meta is None:
                logger.warning("%s tag %s is not registered in the header", hrec.type, tag_id)
                continue
            descriptor = describe(tag_id, meta.type, meta.number)
            if descriptor is not None:
                descriptors[tag_id] = descriptor

        logger.debug(
            "Catalog loaded: %d INFO tags, %d FORMAT tags", len(info_ids), len(format_ids)
        )
        return cls(info_ids, format_ids, info, formats)

    def describe_info(self, tag_id: str) -> TagDescriptor | None:
        """Descriptor of an INFO tag, or None if undefined."""
        return self._info.get(tag_id)

    def describe_format(self, tag_id: str) -> TagDescriptor | None:
        """Descriptor of a FORMAT tag, or None if undefined."""
        return self._formats.get(tag_id)

    def column_count(self, sample_count: int) -> int:
        """Number of columns in every row of the output table."""
        return 6 + len(self.info_ids) + sample_count * len(self.format_ids)

    def __repr__(self) -> str:
        return f"TagCatalog(info={self.info_ids!r}, format={self.format_ids!r})"


def describe(tag_id: str, type_name: str, number: Any) -> TagDescriptor | None:
    """Build a TagDescriptor from raw header Type and Number values.

    Returns:
        Descriptor, or None when the type is unknown
    """
    try:
        value_type = ValueType.parse(type_name)
    except ValueError:
        logger.warning("Tag %s has unknown Type=%s; column will be empty", tag_id, type_name)
        return None

    try:
        cardinality: Cardinality | None = Cardinality.parse(tag_id, number)
    except UnsupportedTagLengthError:
        cardinality = None

    return TagDescriptor(tag_id, value_type, cardinality, number)
