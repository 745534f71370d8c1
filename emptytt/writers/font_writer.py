"""Copy the font resource referenced by LoadFont next to a document."""

import shutil
from pathlib import Path

from emptytt.subtitle.constants import FONT_ID
from emptytt.writers.base_writer import BaseWriter


class FontWriter(BaseWriter):
    """Writer that places the LoadFont resource in the output directory."""

    @property
    def format_name(self) -> str:
        return "Font"

    def _write(self, source: Path, output_path: Path) -> int:
        """
        Copy the font file.

        Raises:
            FileNotFoundError: If the font resource does not exist
            OSError: If the source is not a regular file or the copy fails
        """
        if not source.exists():
            raise FileNotFoundError(f"unable to stat file: {source}")
        if not source.is_file():
            raise OSError(f"not regular file: {source}")
        shutil.copyfile(source, output_path)
        return output_path.stat().st_size


def copy_font(source: Path, output_dir: Path) -> Path:
    """Copy the font resource into output_dir, keeping its filename."""
    return FontWriter().save(source, output_dir, source.name or FONT_ID)
