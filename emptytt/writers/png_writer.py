"""Transparent placeholder subpicture for image-profile documents."""

from pathlib import Path

from PIL import Image

from emptytt.subtitle.constants import PLACEHOLDER_IMAGE_SIZE, PNG_EXTENSION
from emptytt.writers.base_writer import BaseWriter


def make_placeholder(size: int = PLACEHOLDER_IMAGE_SIZE) -> Image.Image:
    """Create a fully transparent square RGBA image."""
    return Image.new("RGBA", (size, size), (0, 0, 0, 0))


class PngWriter(BaseWriter):
    """Writer for the transparent PNG referenced by an Image element."""

    extension = PNG_EXTENSION

    def __init__(self, size: int = PLACEHOLDER_IMAGE_SIZE) -> None:
        super().__init__()
        self.size = size

    @property
    def format_name(self) -> str:
        return "PNG"

    def _write(self, image_id: str, output_path: Path) -> int:
        make_placeholder(self.size).save(output_path, format="PNG")
        self.logger.debug("Placeholder image created", image_id=image_id)
        return output_path.stat().st_size


def write_png(image_id: str, output_dir: Path) -> Path:
    """Write <image_id>.png into output_dir."""
    return PngWriter().save(image_id, output_dir, image_id)
