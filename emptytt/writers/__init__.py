"""Writers package for files produced alongside ST 428-7 documents."""

from emptytt.writers.base_writer import BaseWriter
from emptytt.writers.font_writer import FontWriter, copy_font
from emptytt.writers.png_writer import PngWriter, write_png
from emptytt.writers.xml_writer import XmlWriter, render, write_xml

__all__ = [
    "BaseWriter",
    "FontWriter",
    "PngWriter",
    "XmlWriter",
    "copy_font",
    "render",
    "write_png",
    "write_xml",
]
