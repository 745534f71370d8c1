#!/usr/bin/env python3
"""
Document model for ST 428-7 subtitle reels.

This module contains dataclasses for the SubtitleReel element tree as
defined by http://www.smpte-ra.org/schemas/428-7/2014/DCST.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, List, Optional

from emptytt.subtitle.constants import (
    REEL_INFIX,
    SUBTITLE_NAMESPACES,
    XML_EXTENSION,
)


class DisplayType(str, Enum):
    """How the reel is presented on screen."""

    MAIN_SUBTITLE = "MainSubtitle"
    CLOSED_CAPTION = "ClosedCaption"

    @classmethod
    def from_index(cls, index: int) -> "DisplayType":
        """
        Map a display index to a display type.

        0 is MainSubtitle; every index from 1 upwards is ClosedCaption.

        Raises:
            ValueError: If index is negative
        """
        if index < 0:
            raise ValueError(f"display index must not be negative: {index}")
        if index == 0:
            return cls.MAIN_SUBTITLE
        return cls.CLOSED_CAPTION

    @property
    def index(self) -> int:
        return 0 if self is DisplayType.MAIN_SUBTITLE else 1


class Profile(str, Enum):
    """Payload kind of the subtitle event."""

    TEXT = "text"
    IMAGE = "image"


def resolve_profile(text: bool, image: bool) -> Profile:
    """Pick the document profile. Image wins over text; text is the fallback."""
    if image:
        return Profile.IMAGE
    return Profile.TEXT


@dataclass
class LoadFont:
    """LoadFont element: a font resource referenced by ID."""

    font: str
    id: str


@dataclass
class NestedFont:
    """Font element nested inside a Subtitle or Text run."""

    XML_ATTRIBUTES: ClassVar[Dict[str, str]] = {
        "id": "ID",
        "weight": "Weight",
        "size": "Size",
        "color": "Color",
        "effect": "Effect",
        "effect_color": "EffectColor",
        "effect_size": "EffectSize",
        "italic": "Italic",
        "underline": "Underline",
        "aspect_adjust": "AspectAdjust",
        "spacing": "Spacing",
        "feather": "Feather",
    }

    id: str = ""
    weight: str = ""
    size: str = ""
    color: str = ""
    effect: str = ""
    effect_color: str = ""
    effect_size: str = ""
    italic: str = ""
    underline: str = ""
    aspect_adjust: str = ""
    spacing: str = ""
    feather: str = ""
    text: str = ""


@dataclass
class Text:
    """A text run. An empty run is a valid placeholder."""

    XML_ATTRIBUTES: ClassVar[Dict[str, str]] = {
        "halign": "Halign",
        "hposition": "Hposition",
        "valign": "Valign",
        "vposition": "Vposition",
        "direction": "Direction",
        "zposition": "Zposition",
        "variable_z": "VariableZ",
    }

    text: str = ""
    halign: str = ""
    hposition: str = ""
    valign: str = ""
    vposition: str = ""
    direction: str = ""
    zposition: str = ""
    variable_z: str = ""
    font: Optional[NestedFont] = None


@dataclass
class Image:
    """Reference to a PNG subpicture by urn:uuid."""

    XML_ATTRIBUTES: ClassVar[Dict[str, str]] = {
        "halign": "Halign",
        "hposition": "Hposition",
        "valign": "Valign",
        "vposition": "Vposition",
        "zposition": "Zposition",
        "variable_z": "VariableZ",
    }

    uri: str
    halign: str = ""
    hposition: str = ""
    valign: str = ""
    vposition: str = ""
    zposition: str = ""
    variable_z: str = ""


@dataclass
class Subtitle:
    """One timed event carrying either text runs or image references."""

    XML_ATTRIBUTES: ClassVar[Dict[str, str]] = {
        "spot_number": "SpotNumber",
        "time_in": "TimeIn",
        "time_out": "TimeOut",
        "fade_up_time": "FadeUpTime",
        "fade_down_time": "FadeDownTime",
    }

    time_in: str
    time_out: str
    spot_number: str = ""
    fade_up_time: str = ""
    fade_down_time: str = ""
    texts: List[Text] = field(default_factory=list)
    images: List[Image] = field(default_factory=list)
    font: Optional[NestedFont] = None

    @property
    def is_image(self) -> bool:
        return bool(self.images)


@dataclass
class Font(NestedFont):
    """Style block directly under SubtitleList, holding the events."""

    subtitles: List[Subtitle] = field(default_factory=list)


@dataclass
class SubtitleReel:
    """Root element of an ST 428-7 document."""

    xmlns: str
    id: str
    issue_date: str
    reel_number: int
    language: str
    edit_rate: str
    timecode_rate: str
    start_time: str
    display_type: str
    content_title_text: str = ""
    load_font: Optional[LoadFont] = None
    subtitle_list: Font = field(default_factory=Font)

    @property
    def namespace_tag(self) -> Optional[str]:
        """Short name of the schema variant, or None for unknown namespaces."""
        return SUBTITLE_NAMESPACES.get(self.xmlns)

    @property
    def frame_rate_prefix(self) -> str:
        """Frame rate as carried by the first two characters of EditRate."""
        return self.edit_rate[:2].strip()

    @property
    def profile(self) -> Profile:
        if self.load_font is not None:
            return Profile.TEXT
        return Profile.IMAGE

    @property
    def uuid(self) -> str:
        return self.id.rsplit(":", 1)[-1]

    @property
    def stem(self) -> str:
        """Output file stem: <uuid>_r<reel>"""
        return f"{self.uuid}{REEL_INFIX}{self.reel_number}"

    @property
    def filename(self) -> str:
        """Output filename: <uuid>_r<reel>.xml"""
        return f"{self.stem}{XML_EXTENSION}"

    def validate(self) -> None:
        """
        Check that text and image payloads are not mixed.

        Raises:
            ValueError: If a LoadFont is combined with image events, or text
                events appear without a LoadFont
        """
        subtitles = self.subtitle_list.subtitles
        has_images = any(sub.is_image for sub in subtitles)
        has_texts = any(sub.texts for sub in subtitles)

        if self.load_font is not None and has_images:
            raise ValueError("image-profile reel must not carry LoadFont")
        if self.load_font is None and has_texts:
            raise ValueError("text-profile reel requires LoadFont")

    def __str__(self) -> str:
        parts = [f"Reel {self.reel_number}", self.id, self.display_type]
        if self.content_title_text:
            parts.append(f"Title: {self.content_title_text}")
        parts.append(f"{len(self.subtitle_list.subtitles)} event(s)")
        return " | ".join(parts)
