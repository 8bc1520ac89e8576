"""Data models for the variant table converter.

Header-level descriptions of INFO/FORMAT tags, the owned per-record view
handed from the reader to the flattener, and run statistics.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from vcf2tsv.exceptions import UnsupportedTagLengthError

GENOTYPE_TAG = "GT"


class ValueType(Enum):
    """Declared value type of an INFO or FORMAT tag."""

    INTEGER = auto()
    FLOAT = auto()
    STRING = auto()
    FLAG = auto()

    @classmethod
    def parse(cls, type_name: str) -> "ValueType":
        """Map a header Type token to a ValueType.

        Character values are rendered exactly like strings.

        Raises:
            ValueError: If the token is not a known VCF type
        """
        names = {
            "Integer": cls.INTEGER,
            "Float": cls.FLOAT,
            "String": cls.STRING,
            "Character": cls.STRING,
            "Flag": cls.FLAG,
        }
        try:
            return names[type_name]
        except KeyError:
            raise ValueError(f"Unknown tag type: {type_name!r}") from None


class CardinalityKind(Enum):
    """How many values a tag carries per record."""

    FIXED = auto()  # Number=<n>
    ALT_ALLELES = auto()  # Number=A
    ALLELES = auto()  # Number=R
    GENOTYPES = auto()  # Number=G
    VARIABLE = auto()  # Number=.


@dataclass(frozen=True, slots=True)
class Cardinality:
    """Declared cardinality of a tag.

    Attributes:
        kind: Cardinality class
        count: Value count for FIXED, None otherwise
    """

    kind: CardinalityKind
    count: int | None = None

    @classmethod
    def parse(cls, tag_id: str, number: Any) -> "Cardinality":
        """Build a Cardinality from a header Number value.

        Args:
            tag_id: Tag the Number belongs to (used in the error message)
            number: Integer count, or one of "A", "R", "G", "."

        Raises:
            UnsupportedTagLengthError: For any other Number token
        """
        if isinstance(number, int) and not isinstance(number, bool):
            return cls(CardinalityKind.FIXED, number)
        if isinstance(number, str):
            if number.isdigit():
                return cls(CardinalityKind.FIXED, int(number))
            kinds = {
                "A": CardinalityKind.ALT_ALLELES,
                "R": CardinalityKind.ALLELES,
                "G": CardinalityKind.GENOTYPES,
                ".": CardinalityKind.VARIABLE,
            }
            if number in kinds:
                return cls(kinds[number])
        raise UnsupportedTagLengthError(tag_id, number)


@dataclass(frozen=True, slots=True)
class TagDescriptor:
    """One INFO or FORMAT declaration from the header.

    A descriptor whose Number could not be parsed keeps cardinality=None and
    the raw token in number; resolving an index for it is fatal.
    """

    id: str
    value_type: ValueType
    cardinality: Cardinality | None
    number: Any = None

    @property
    def is_flag(self) -> bool:
        return self.value_type is ValueType.FLAG


@dataclass(slots=True)
class SampleCall:
    """Genotype call for one sample.

    Attributes:
        alleles: Allele indices, None for an uncalled allele
        phased: Whether the call is phased
    """

    alleles: tuple[int | None, ...]
    phased: bool = False


@dataclass(slots=True)
class VariantRecord:
    """Owned copy of one decoded locus.

    Attributes:
        contig: Contig name
        position: 0-based start position
        alleles: Reference allele followed by the alternates
        quality: QUAL value, None if missing
        filters: Filter names as stored on the record
        info: INFO tag id -> decoded value (scalar or tuple)
        samples: Per-sample FORMAT tag id -> decoded value, in sample order
        genotypes: Per-sample GT call, None where the record has no GT
    """

    contig: str
    position: int
    alleles: tuple[str, ...]
    quality: float | None = None
    filters: list[str] = field(default_factory=list)
    info: dict[str, Any] = field(default_factory=dict)
    samples: list[dict[str, Any]] = field(default_factory=list)
    genotypes: list[SampleCall | None] = field(default_factory=list)

    @property
    def ref(self) -> str:
        return self.alleles[0]

    @property
    def alts(self) -> tuple[str, ...]:
        return self.alleles[1:]


@dataclass
class ConversionStats:
    """Running counts for one conversion."""

    records: int = 0
    rows: int = 0
    records_without_alts: int = 0
    empty_cells: int = 0

    @property
    def multiallelic_rows(self) -> int:
        """Rows beyond the first one per record (multi-allelic decomposition)."""
        return self.rows - (self.records - self.records_without_alts)
