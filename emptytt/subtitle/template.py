"""Read an existing ST 428-7 document for use as a template."""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, Optional, Tuple, Type, TypeVar, Union

from emptytt.errors import (
    InvalidExtension,
    InvalidNamespace,
    TemplateUndetermined,
    TemplateUnreadable,
)
from emptytt.logging_config import get_logger
from emptytt.subtitle.constants import (
    DEPRECATED_NAMESPACES,
    SUBTITLE_NAMESPACES,
    XML_EXTENSION,
)
from emptytt.subtitle.models import (
    Font,
    Image,
    LoadFont,
    NestedFont,
    Subtitle,
    SubtitleReel,
    Text,
)

logger = get_logger()

T = TypeVar("T")


def split_tag(tag: str) -> Tuple[str, str]:
    """Split an ElementTree tag into (namespace, local name)."""
    if tag.startswith("{"):
        namespace, _, local = tag[1:].partition("}")
        return namespace, local
    return "", tag


def parse_template(path: Union[str, Path]) -> SubtitleReel:
    """
    Parse an ST 428-7 document so its global properties can be reused.

    Args:
        path: Path to the template XML document

    Returns:
        The decoded SubtitleReel

    Raises:
        InvalidExtension: If the file does not end in .xml
        TemplateUnreadable: If the file cannot be read
        InvalidNamespace: If the document uses the deprecated 2007 namespace
        TemplateUndetermined: If the document is not a SubtitleReel in a
            known namespace
    """
    file_path = Path(path).resolve()
    if file_path.suffix != XML_EXTENSION:
        raise InvalidExtension(
            f"template document type cannot be determined: {file_path.name}"
        )

    try:
        data = file_path.read_bytes()
    except OSError as exc:
        raise TemplateUnreadable(f"unable to read template {file_path}: {exc}") from exc

    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise TemplateUndetermined(
            f"template document type cannot be determined: {exc}"
        ) from exc

    namespace, local = split_tag(root.tag)
    if local != "SubtitleReel":
        raise TemplateUndetermined(
            f"template document type cannot be determined: root element {local}"
        )
    if namespace in DEPRECATED_NAMESPACES:
        raise InvalidNamespace(f"invalid namespace: {namespace}")
    if namespace not in SUBTITLE_NAMESPACES:
        raise TemplateUndetermined(
            f"template document type cannot be determined: namespace {namespace!r}"
        )

    reel = decode_reel(root, namespace)
    logger.debug(
        "Parsed template",
        path=str(file_path),
        namespace=SUBTITLE_NAMESPACES[namespace],
        events=len(reel.subtitle_list.subtitles),
    )
    return reel


def decode_reel(root: ET.Element, namespace: str) -> SubtitleReel:
    """Decode a SubtitleReel element whose children live in ``namespace``."""

    def child_text(name: str) -> str:
        node = root.find(f"{{{namespace}}}{name}")
        if node is None or node.text is None:
            return ""
        return node.text.strip()

    reel_number = child_text("ReelNumber")

    load_font = None
    load_font_node = root.find(f"{{{namespace}}}LoadFont")
    if load_font_node is not None:
        load_font = LoadFont(
            font=(load_font_node.text or "").strip(),
            id=load_font_node.get("ID", ""),
        )

    font_node = root.find(f"{{{namespace}}}SubtitleList/{{{namespace}}}Font")
    subtitle_list = Font()
    if font_node is not None:
        subtitle_list = _decode_attributes(Font, font_node)
        subtitle_list.subtitles = [
            _decode_subtitle(node, namespace)
            for node in font_node.findall(f"{{{namespace}}}Subtitle")
        ]

    return SubtitleReel(
        xmlns=namespace,
        id=child_text("Id"),
        content_title_text=child_text("ContentTitleText"),
        issue_date=child_text("IssueDate"),
        reel_number=int(reel_number) if reel_number.isdigit() else 0,
        language=child_text("Language"),
        edit_rate=child_text("EditRate"),
        timecode_rate=child_text("TimeCodeRate"),
        start_time=child_text("StartTime"),
        display_type=child_text("DisplayType"),
        load_font=load_font,
        subtitle_list=subtitle_list,
    )


def _decode_attributes(cls: Type[T], node: ET.Element, **values: object) -> T:
    attributes: Dict[str, str] = getattr(cls, "XML_ATTRIBUTES")
    for field_name, xml_name in attributes.items():
        if xml_name in node.attrib:
            values[field_name] = node.attrib[xml_name]
    return cls(**values)


def _decode_nested_font(node: Optional[ET.Element]) -> Optional[NestedFont]:
    if node is None:
        return None
    return _decode_attributes(NestedFont, node, text=(node.text or "").strip())


def _decode_subtitle(node: ET.Element, namespace: str) -> Subtitle:
    texts = [
        _decode_attributes(
            Text,
            text_node,
            text=(text_node.text or "").strip(),
            font=_decode_nested_font(text_node.find(f"{{{namespace}}}Font")),
        )
        for text_node in node.findall(f"{{{namespace}}}Text")
    ]
    images = [
        _decode_attributes(Image, image_node, uri=(image_node.text or "").strip())
        for image_node in node.findall(f"{{{namespace}}}Image")
    ]
    return _decode_attributes(
        Subtitle,
        node,
        time_in=node.get("TimeIn", ""),
        time_out=node.get("TimeOut", ""),
        texts=texts,
        images=images,
        font=_decode_nested_font(node.find(f"{{{namespace}}}Font")),
    )
