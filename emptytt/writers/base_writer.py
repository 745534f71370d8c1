"""Base class for files written into an emptytt output directory."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from emptytt.logging_config import get_logger


class BaseWriter(ABC):
    """
    Writes one file next to a subtitle document.

    Subclasses provide the payload encoding in ``_write``; naming, logging
    and the returned path are handled here so every output file is
    reported the same way.
    """

    extension = ""

    def __init__(self) -> None:
        self.logger = get_logger()

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Short name used in log events, e.g. 'XML' or 'PNG'."""
        ...

    @abstractmethod
    def _write(self, payload: Any, output_path: Path) -> int:
        """Encode ``payload`` into ``output_path`` and return the byte count."""
        ...

    def get_output_path(self, base_dir: Path, stem: str) -> Path:
        """
        Name the output file inside base_dir.

        Args:
            base_dir: Output directory
            stem: File stem, e.g. '<uuid>_r1' or an image uuid

        Returns:
            base_dir / stem plus the writer's extension
        """
        return Path(base_dir) / f"{stem}{self.extension}"

    def write(self, payload: Any, output_path: Path) -> Path:
        """
        Write the payload to output_path.

        Returns:
            output_path

        Raises:
            OSError: If the file cannot be written
        """
        self.logger.debug(f"Writing {self.format_name}", output_path=str(output_path))
        size = self._write(payload, output_path)
        self.logger.info(
            f"{self.format_name} written", output_path=str(output_path), bytes=size
        )
        return output_path

    def save(self, payload: Any, base_dir: Path, stem: str) -> Path:
        """Write the payload under the name get_output_path gives it."""
        return self.write(payload, self.get_output_path(base_dir, stem))
