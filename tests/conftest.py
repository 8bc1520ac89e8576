"""Pytest fixtures for vcf2tsv tests."""

from pathlib import Path

import pytest

from vcf2tsv.catalog import TagCatalog, describe
from vcf2tsv.models import SampleCall, VariantRecord

VCF_HEADER = (
    "##fileformat=VCFv4.2\n"
    '##FILTER=<ID=PASS,Description="All filters passed">\n'
    '##INFO=<ID=DP,Number=1,Type=Integer,Description="Total depth">\n'
    '##INFO=<ID=AF,Number=A,Type=Float,Description="Allele frequency">\n'
    '##FORMAT=<ID=GT,Number=1,Type=String,Description="Genotype">\n'
    "##contig=<ID=chr1,length=1000000>\n"
    "#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\tFORMAT\tS1\n"
)


@pytest.fixture
def vcf_header() -> str:
    """Minimal one-sample header with DP, AF and GT."""
    return VCF_HEADER


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def multiallelic_vcf(fixtures_dir: Path) -> Path:
    """Two samples, three records (2 alts, no alt, 1 alt)."""
    return fixtures_dir / "multiallelic.vcf"


@pytest.fixture
def simple_vcf(tmp_path: Path) -> Path:
    """One sample, one record A -> C,G with DP=10, AF=0.1,0.2 and GT 0/1."""
    vcf = tmp_path / "simple.vcf"
    vcf.write_text(
        VCF_HEADER
        + "chr1\t100\t.\tA\tC,G\t30\tPASS\tDP=10;AF=0.1,0.2\tGT\t0/1\n"
    )
    return vcf


@pytest.fixture
def catalog() -> TagCatalog:
    """Catalog with one tag per cardinality class and GT/GQ/AD formats."""
    return TagCatalog.from_descriptors(
        info_tags=[
            describe("DP", "Integer", 1),
            describe("AF", "Float", "A"),
            describe("ADP", "Integer", "R"),
            describe("DB", "Flag", 0),
            describe("ANN", "String", "."),
        ],
        format_tags=[
            describe("GT", "String", 1),
            describe("GQ", "Integer", 1),
            describe("AD", "Integer", "R"),
        ],
    )


@pytest.fixture
def record() -> VariantRecord:
    """Record A -> C,G with two samples."""
    return VariantRecord(
        contig="chr1",
        position=99,
        alleles=("A", "C", "G"),
        quality=50.0,
        filters=["PASS"],
        info={"DP": 10, "AF": (0.1, 0.2), "ADP": (5, 3, 2), "DB": True, "ANN": ("x", "y")},
        samples=[{"GQ": 30, "AD": (5, 3, 2)}, {"GQ": None}],
        genotypes=[SampleCall((0, 1)), SampleCall((1, 2), phased=True)],
    )

