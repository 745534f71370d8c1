"""Static assets for emptytt package."""

from emptytt.assets.loader import get_asset_path, get_font_path

__all__ = [
    "get_asset_path",
    "get_font_path",
]
