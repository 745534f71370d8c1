"""ST 428-7 subtitle document model, timecode engine and template loader."""

from emptytt.subtitle.models import (
    DisplayType,
    Font,
    Image,
    LoadFont,
    NestedFont,
    Profile,
    Subtitle,
    SubtitleReel,
    Text,
    resolve_profile,
)
from emptytt.subtitle.template import parse_template
from emptytt.subtitle.timecode import Timecode, parse_frame_rate, parse_timecode

__all__ = [
    "DisplayType",
    "Font",
    "Image",
    "LoadFont",
    "NestedFont",
    "Profile",
    "Subtitle",
    "SubtitleReel",
    "Text",
    "Timecode",
    "parse_frame_rate",
    "parse_template",
    "parse_timecode",
    "resolve_profile",
]
