"""
Exceptions raised while converting a variant file to a table.
Every fatal condition derives from ConversionError so callers catch one type.
"""


class ConversionError(Exception):
    """Base exception for conversion failures."""
    pass


class VariantFileError(ConversionError):
    """Raised when the input variant file cannot be opened or read."""
    pass


class OutputWriteError(ConversionError):
    """Raised when the output table cannot be created or written."""
    pass


class RecordDecodeError(ConversionError):
    """Raised when a record cannot be decoded from the input stream."""
    pass


class UnsupportedTagLengthError(ConversionError):
    """Raised for a tag whose declared Number cannot be resolved per allele."""

    def __init__(self, tag_id: str, number: object) -> None:
        self.tag_id = tag_id
        self.number = number
        super().__init__(
            f"Tag '{tag_id}' has unsupported Number={number}; "
            "only fixed counts, A, R, G and . are supported"
        )


class UnsupportedTagTypeError(ConversionError):
    """Raised for a FORMAT tag declared with Type=Flag."""

    def __init__(self, tag_id: str) -> None:
        self.tag_id = tag_id
        super().__init__(
            f'FORMAT tag "{tag_id}" is declared as a Flag; '
            f'is "{tag_id}" an INFO tag?'
        )
