"""Text rendering of decoded tag values.

Missing values render as an empty field, never as a "." token or "nan".
Floats are printed as the shortest decimal that round-trips to the stored
32-bit value, in positional notation, independent of locale.
"""

import math
from collections.abc import Callable, Sequence
from typing import Any

import numpy as np

from vcf2tsv.models import SampleCall, ValueType

# BCF sentinels (htslib bcf_int32_missing / bcf_int32_vector_end)
MISSING_INTEGER = -(2**31)
VECTOR_END_INTEGER = -(2**31) + 1

# BCF float sentinels are NaN payloads; the quiet bit is masked so that a
# value widened to double and back still matches.
MISSING_FLOAT_BITS = 0x7F800001
VECTOR_END_FLOAT_BITS = 0x7F800002
_QUIET_BIT_MASK = 0x7FBFFFFF

PASS_FILTER = "PASS"


def is_missing_float(value: float | None) -> bool:
    """Check if a float is the missing (or vector-end) sentinel."""
    if value is None:
        return True
    if not math.isnan(value):
        return False
    bits = int(np.array(value, dtype=np.float32).view(np.uint32)) & _QUIET_BIT_MASK
    return bits in (MISSING_FLOAT_BITS, VECTOR_END_FLOAT_BITS)


def format_integer(value: int | None) -> str:
    """Render an integer; the missing sentinel renders empty.

    Example:
        >>> format_integer(10)
        '10'
        >>> format_integer(MISSING_INTEGER)
        ''
    """
    if value is None or value in (MISSING_INTEGER, VECTOR_END_INTEGER):
        return ""
    return str(int(value))


def format_float(value: float | None) -> str:
    """Render a float with the shortest round-trip single-precision digits.

    Example:
        >>> format_float(0.10000000149011612)
        '0.1'
        >>> format_float(10.0)
        '10'
    """
    if is_missing_float(value):
        return ""
    if math.isnan(value):
        return "NaN"
    return np.format_float_positional(np.float32(value), unique=True, trim="-")


def format_flag(value: Any) -> str:
    """Render a flag as true/false; flags have no missing state."""
    return "true" if value else "false"


def format_string(value: str | bytes | None) -> str:
    """Render a string value; undecodable bytes render empty."""
    if value is None:
        return ""
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            return ""
    return str(value)


_FORMATTERS: dict[ValueType, Callable[[Any], str]] = {
    ValueType.INTEGER: format_integer,
    ValueType.FLOAT: format_float,
    ValueType.STRING: format_string,
    ValueType.FLAG: format_flag,
}


def formatter_for(value_type: ValueType) -> Callable[[Any], str]:
    """Get the formatter function for a declared value type."""
    return _FORMATTERS[value_type]


def format_genotype(call: SampleCall | None) -> str:
    """Render a genotype call as VCF GT text.

    Example:
        >>> format_genotype(SampleCall((0, 1), phased=False))
        '0/1'
        >>> format_genotype(SampleCall((None, None)))
        './.'
    """
    if call is None or not call.alleles:
        return ""
    separator = "|" if call.phased else "/"
    return separator.join("." if a is None else str(a) for a in call.alleles)


def format_filters(names: Sequence[str]) -> str:
    """Render the FILTER column.

    Unset filters render empty, a lone PASS renders "PASS", anything else
    is the semicolon-joined list of names.
    """
    if not names:
        return ""
    if len(names) == 1 and names[0] == PASS_FILTER:
        return PASS_FILTER
    return ";".join(names)
