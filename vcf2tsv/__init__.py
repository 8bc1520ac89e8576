"""
VCF/BCF to tab-delimited table converter.

Flattens multi-allelic variant records into one row per alternate allele,
resolving INFO and per-sample FORMAT values to the allele being emitted.
"""

__version__ = "0.1.0"

from vcf2tsv.exceptions import ConversionError
from vcf2tsv.main import convert, to_txt

__all__ = ["ConversionError", "convert", "to_txt", "__version__"]
