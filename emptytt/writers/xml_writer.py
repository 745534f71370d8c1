"""ST 428-7 XML serialization of the document model."""

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Final, Optional

from emptytt.errors import RenderFailure
from emptytt.subtitle.constants import XML_EXTENSION
from emptytt.subtitle.models import (
    Font,
    Image,
    NestedFont,
    Subtitle,
    SubtitleReel,
    Text,
)
from emptytt.writers.base_writer import BaseWriter

XML_HEADER: Final[str] = '<?xml version="1.0" encoding="UTF-8"?>\n'
INDENT: Final[str] = "  "

# Characters outside the XML 1.0 Char production
INVALID_XML_CHARS: Final = re.compile(
    r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]"
)


def _check_characters(root: ET.Element) -> None:
    """
    Raises:
        ValueError: If any text or attribute value cannot appear in XML 1.0
    """
    for element in root.iter():
        values = [element.text or ""]
        values += [str(value) for value in element.attrib.values()]
        for value in values:
            match = INVALID_XML_CHARS.search(value)
            if match:
                raise ValueError(
                    f"character {match.group()!r} not allowed in <{element.tag}>"
                )


def _set_attributes(element: ET.Element, source: Any) -> ET.Element:
    """Copy the non-empty XML attributes declared by ``source`` onto ``element``."""
    for field_name, xml_name in source.XML_ATTRIBUTES.items():
        value = getattr(source, field_name)
        if value:
            element.set(xml_name, str(value))
    return element


def _text_child(parent: ET.Element, tag: str, text: Any) -> ET.Element:
    child = ET.SubElement(parent, tag)
    child.text = str(text)
    return child


def _nested_font_element(parent: ET.Element, font: NestedFont) -> ET.Element:
    element = _set_attributes(ET.SubElement(parent, "Font"), font)
    if font.text:
        element.text = font.text
    return element


def _text_element(parent: ET.Element, run: Text) -> ET.Element:
    element = _set_attributes(ET.SubElement(parent, "Text"), run)
    # Empty runs are kept as explicit <Text></Text> placeholders
    element.text = run.text
    if run.font is not None:
        _nested_font_element(element, run.font)
    return element


def _image_element(parent: ET.Element, image: Image) -> ET.Element:
    element = _set_attributes(ET.SubElement(parent, "Image"), image)
    element.text = image.uri
    return element


def _subtitle_element(parent: ET.Element, subtitle: Subtitle) -> ET.Element:
    element = ET.SubElement(parent, "Subtitle")
    # TimeIn/TimeOut are required and always written
    if subtitle.spot_number:
        element.set("SpotNumber", subtitle.spot_number)
    element.set("TimeIn", subtitle.time_in)
    element.set("TimeOut", subtitle.time_out)
    if subtitle.fade_up_time:
        element.set("FadeUpTime", subtitle.fade_up_time)
    if subtitle.fade_down_time:
        element.set("FadeDownTime", subtitle.fade_down_time)

    for run in subtitle.texts:
        _text_element(element, run)
    for image in subtitle.images:
        _image_element(element, image)
    if subtitle.font is not None:
        _nested_font_element(element, subtitle.font)
    return element


def _font_element(parent: ET.Element, font: Font) -> ET.Element:
    element = _set_attributes(ET.SubElement(parent, "Font"), font)
    for subtitle in font.subtitles:
        _subtitle_element(element, subtitle)
    return element


def to_element(reel: SubtitleReel) -> ET.Element:
    """Build the ElementTree for a reel. Children use the default namespace."""
    root = ET.Element("SubtitleReel")
    if reel.xmlns:
        root.set("xmlns", reel.xmlns)

    _text_child(root, "Id", reel.id)
    if reel.content_title_text:
        _text_child(root, "ContentTitleText", reel.content_title_text)
    _text_child(root, "IssueDate", reel.issue_date)
    _text_child(root, "ReelNumber", reel.reel_number)
    _text_child(root, "Language", reel.language)
    _text_child(root, "EditRate", reel.edit_rate)
    _text_child(root, "TimeCodeRate", reel.timecode_rate)
    _text_child(root, "StartTime", reel.start_time)
    _text_child(root, "DisplayType", reel.display_type)

    if reel.load_font is not None:
        load_font = _text_child(root, "LoadFont", reel.load_font.font)
        load_font.set("ID", reel.load_font.id)

    subtitle_list = ET.SubElement(root, "SubtitleList")
    _font_element(subtitle_list, reel.subtitle_list)
    _check_characters(root)
    return root


def render(reel: SubtitleReel) -> bytes:
    """
    Render a reel as an indented UTF-8 XML document with declaration.

    Args:
        reel: The document model to serialize

    Returns:
        The encoded document

    Raises:
        RenderFailure: If the model cannot be serialized
    """
    try:
        root = to_element(reel)
        ET.indent(root, space=INDENT)
        body = ET.tostring(root, encoding="unicode", short_empty_elements=False)
    except (TypeError, ValueError, AttributeError) as exc:
        raise RenderFailure(f"unable to render {reel.filename}: {exc}") from exc
    return (XML_HEADER + body).encode("utf-8")


class XmlWriter(BaseWriter):
    """Writer for ST 428-7 XML documents."""

    extension = XML_EXTENSION

    def __init__(self, rendered: Optional[bytes] = None) -> None:
        super().__init__()
        self.rendered = rendered

    @property
    def format_name(self) -> str:
        return "XML"

    def _write(self, reel: SubtitleReel, output_path: Path) -> int:
        # Pre-rendered bytes are written as given
        data = self.rendered if self.rendered is not None else render(reel)
        return output_path.write_bytes(data)


def write_xml(
    reel: SubtitleReel, output_dir: Path, rendered: Optional[bytes] = None
) -> Path:
    """Write a reel as <uuid>_r<reel>.xml in output_dir."""
    return XmlWriter(rendered).save(reel, output_dir, reel.stem)
