"""Configuration dataclass for a conversion run."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ConversionConfig:
    """Configuration for converting one variant file to a table.

    Attributes:
        input_path: Path to the .vcf, .vcf.gz or .bcf input
        output_path: Path of the tab-delimited table to create (truncated if present)
        verbose: Enable debug logging and tracebacks on failure
        log_dir: Directory for a rotating log file (console only if None)
    """

    input_path: Path
    output_path: Path
    verbose: bool = False
    log_dir: Path | None = None

    def __post_init__(self) -> None:
        """Ensure paths are Path objects."""
        if isinstance(self.input_path, str):
            self.input_path = Path(self.input_path)
        if isinstance(self.output_path, str):
            self.output_path = Path(self.output_path)
        if isinstance(self.log_dir, str):
            self.log_dir = Path(self.log_dir)

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors.

        Returns:
            List of error messages (empty if valid)
        """
        errors: list[str] = []

        if not self.input_path.exists():
            errors.append(f"Input file not found: {self.input_path}")
        elif self.input_path.is_dir():
            errors.append(f"Input path is a directory: {self.input_path}")

        output_dir = self.output_path.parent
        if not output_dir.exists():
            errors.append(f"Output directory does not exist: {output_dir}")
        if self.output_path.is_dir():
            errors.append(f"Output path is a directory: {self.output_path}")

        return errors
