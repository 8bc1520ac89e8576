"""Delimited row writer.

Fields are written as-is: no quoting or escaping is performed, so a field
containing a tab or newline corrupts the table layout.
"""

from pathlib import Path
from types import TracebackType
from typing import TextIO

from vcf2tsv.exceptions import OutputWriteError

DELIMITER = "\t"
LINE_TERMINATOR = "\n"


class RowWriter:
    """Buffered, delimiter-aware sink for one output table.

    Inserts the delimiter before every field except the first of a row and
    tracks the field count of the current row. Implements the context
    manager protocol so the sink is flushed and closed on every exit path.

    Usage:
        with RowWriter.open(Path("out.tsv")) as writer:
            writer.write_field("chr1")
            writer.write_field("100")
            writer.newline()
    """

    def __init__(self, sink: TextIO, path: Path | None = None) -> None:
        """Wrap an already-open text sink.

        Args:
            sink: Writable text stream, owned by this writer from now on
            path: Path of the sink, used in error messages
        """
        self._sink = sink
        self.path = path
        self.field_count = 0
        self.rows_written = 0

    @classmethod
    def open(cls, path: Path) -> "RowWriter":
        """Create (or truncate) the output file and wrap it.

        Raises:
            OutputWriteError: If the file cannot be created
        """
        try:
            sink = open(path, "w", encoding="utf-8", newline="")
        except OSError as e:
            raise OutputWriteError(f"Cannot create output file {path}: {e}") from e
        return cls(sink, path)

    def write_field(self, value: str) -> None:
        """Append one field to the current row."""
        if self.field_count > 0:
            self._write(DELIMITER)
        self._write(value)
        self.field_count += 1

    def write_fields(self, values: list[str]) -> None:
        for value in values:
            self.write_field(value)

    def newline(self) -> None:
        """Terminate the current row."""
        self._write(LINE_TERMINATOR)
        self.field_count = 0
        self.rows_written += 1

    def _write(self, text: str) -> None:
        try:
            self._sink.write(text)
        except OSError as e:
            raise OutputWriteError(f"Failed writing to {self.path or 'output'}: {e}") from e

    def close(self) -> None:
        """Flush and close the sink."""
        if self._sink.closed:
            return
        try:
            self._sink.flush()
        except OSError as e:
            raise OutputWriteError(f"Failed flushing {self.path or 'output'}: {e}") from e
        finally:
            self._sink.close()

    def __enter__(self) -> "RowWriter":
        """Context manager entry."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Context manager exit - flush and close the sink."""
        self.close()
