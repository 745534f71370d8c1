"""Asset loading utilities using importlib.resources."""

from importlib.resources import files
from pathlib import Path
from typing import Optional

from emptytt.subtitle.constants import FONT_ID

# Reference to the assets package
_ASSETS = files("emptytt.assets")

FONT_DIR = "fonts"


def get_asset_path(filename: str) -> Path:
    """
    Get the path to an asset file.

    Args:
        filename: Asset path relative to the assets package (e.g., "fonts/<id>")

    Returns:
        Path to the asset file. The file may not exist.
    """
    return Path(str(_ASSETS.joinpath(filename)))


def get_font_path(override: Optional[Path] = None) -> Path:
    """
    Resolve the font resource that LoadFont refers to.

    Args:
        override: Explicit font file, e.g. from EMPTYTT_FONT_PATH

    Returns:
        Absolute path of the font resource
    """
    if override is not None:
        return Path(override).expanduser().resolve()
    return get_asset_path(f"{FONT_DIR}/{FONT_ID}")
