#!/usr/bin/env python3
"""
ST 428-7 document constants.

Namespaces, fixed event timing and file naming used when generating
minimal subtitle documents (ISDCF TD 16).
"""

from typing import Dict, Final

# Namespaces accepted for templates and output, keyed by URI
DCST_2007: Final[str] = "http://www.smpte-ra.org/schemas/428-7/2007/DCST"
DCST_2010: Final[str] = "http://www.smpte-ra.org/schemas/428-7/2010/DCST"
DCST_2014: Final[str] = "http://www.smpte-ra.org/schemas/428-7/2014/DCST"

SUBTITLE_NAMESPACES: Final[Dict[str, str]] = {
    DCST_2010: "dcst2010",
    DCST_2014: "dcst2014",
}
DEPRECATED_NAMESPACES: Final[Dict[str, str]] = {
    DCST_2007: "dcst2007",
}
DEFAULT_NAMESPACE: Final[str] = DCST_2014

# Well-known font resource referenced by LoadFont in text-profile documents
FONT_ID: Final[str] = "232c45d8-fde8-4e5e-86b9-86e96354daf3"
LOAD_FONT_ID: Final[str] = "Arial"

# Timing, in whole seconds, of the single placeholder event
START_SECONDS: Final[int] = 0
TIME_IN_SECONDS: Final[int] = 4
TIME_OUT_SECONDS: Final[int] = 19

# Placeholder raster for image-profile documents
PLACEHOLDER_IMAGE_SIZE: Final[int] = 128

# File naming
REEL_INFIX: Final[str] = "_r"
XML_EXTENSION: Final[str] = ".xml"
PNG_EXTENSION: Final[str] = ".png"
MXF_SUFFIX: Final[str] = "_sub.mxf"
URN_UUID: Final[str] = "urn:uuid:"

# Literal UTC offset appended to IssueDate
ISSUE_DATE_OFFSET: Final[str] = "-00:00"

# Defaults mirrored by the command line
DEFAULT_DURATION: Final[int] = 24
DEFAULT_FRAME_RATE: Final[str] = "24"
DEFAULT_LANGUAGE: Final[str] = "en"
DEFAULT_TITLE: Final[str] = "No Title"
DEFAULT_REEL: Final[int] = 1
