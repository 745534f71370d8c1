"""
Minimal ST 428-7 document synthesis.

Builds a SubtitleReel holding a single placeholder event, as required by
ISDCF TD 16 (Minimal Empty Document Requirements), renders it, and
optionally wraps it into a track file.

Failure policy:
- a template that cannot be used is logged and the caller's values are kept
- filesystem errors while writing the document, the placeholder image or
  the font resource are logged and do not fail the run
- a track-file wrapper that runs and fails raises WrapperExecutionFailure
"""

import sys
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from pathlib import Path
from typing import List, Optional, TextIO

from emptytt.assets import get_font_path
from emptytt.config import Settings, get_settings
from emptytt.errors import TemplateError, WrapperUnavailable
from emptytt.logging_config import get_logger
from emptytt.subtitle.constants import (
    DEFAULT_DURATION,
    DEFAULT_FRAME_RATE,
    DEFAULT_LANGUAGE,
    DEFAULT_NAMESPACE,
    DEFAULT_REEL,
    DEFAULT_TITLE,
    FONT_ID,
    ISSUE_DATE_OFFSET,
    LOAD_FONT_ID,
    START_SECONDS,
    TIME_IN_SECONDS,
    TIME_OUT_SECONDS,
    URN_UUID,
)
from emptytt.subtitle.models import (
    DisplayType,
    Image,
    LoadFont,
    Profile,
    Subtitle,
    SubtitleReel,
    Text,
    resolve_profile,
)
from emptytt.subtitle.template import parse_template
from emptytt.subtitle.timecode import parse_frame_rate, stamp
from emptytt.trackfile import create_mxf, ensure_wrapper
from emptytt.writers import copy_font, render, write_png
from emptytt.writers.xml_writer import XmlWriter

logger = get_logger()

# Placeholder text run position
TEXT_HALIGN = "center"
TEXT_VALIGN = "bottom"
TEXT_VPOSITION = "10"


@dataclass(frozen=True)
class RunContext:
    """Identifiers shared by everything produced in one run."""

    document_id: str
    trackfile_id: str
    issue_date: datetime

    @classmethod
    def create(cls) -> "RunContext":
        return cls(
            document_id=str(uuid.uuid4()),
            trackfile_id=str(uuid.uuid4()),
            issue_date=datetime.now(),
        )

    @property
    def document_urn(self) -> str:
        return f"{URN_UUID}{self.document_id}"

    @property
    def issue_date_text(self) -> str:
        # The offset is always the literal -00:00, whatever the local zone
        return self.issue_date.isoformat(timespec="seconds")[:19] + ISSUE_DATE_OFFSET


@dataclass(frozen=True)
class ReelOptions:
    """Caller-supplied parameters for one document."""

    text: bool = True
    image: bool = False
    track: bool = False
    encrypt: bool = False
    reel: int = DEFAULT_REEL
    display: int = 0
    duration: int = DEFAULT_DURATION
    frame_rate: str = DEFAULT_FRAME_RATE
    language: str = DEFAULT_LANGUAGE
    title: str = DEFAULT_TITLE
    template: Optional[Path] = None
    output: Optional[Path] = None
    namespace: str = DEFAULT_NAMESPACE
    timecode_rate: Optional[str] = None

    @property
    def profile(self) -> Profile:
        return resolve_profile(self.text, self.image)


@dataclass
class SynthesisResult:
    """What a synthesis run produced."""

    reel: SubtitleReel
    rendered: bytes
    document_path: Optional[Path] = None
    image_path: Optional[Path] = None
    font_path: Optional[Path] = None
    trackfile_path: Optional[Path] = None
    warnings: List[str] = field(default_factory=list)


def apply_template(options: ReelOptions, template: SubtitleReel) -> ReelOptions:
    """
    Override the caller's global properties with those of a template.

    Namespace, title, language, frame rate (first two characters of
    EditRate) and time-code rate are taken from the template where it has
    them. DisplayType MainSubtitle/ClosedCaption selects index 0/1; any
    other value keeps the caller's index.
    """
    display = options.display
    if template.display_type == DisplayType.MAIN_SUBTITLE.value:
        display = 0
    elif template.display_type == DisplayType.CLOSED_CAPTION.value:
        display = 1

    return replace(
        options,
        namespace=template.xmlns or options.namespace,
        title=template.content_title_text or options.title,
        language=template.language or options.language,
        frame_rate=template.frame_rate_prefix or options.frame_rate,
        timecode_rate=template.timecode_rate or options.timecode_rate,
        display=display,
    )


def load_template(options: ReelOptions) -> ReelOptions:
    """Apply options.template if set. Unusable templates leave options unchanged."""
    if options.template is None:
        return options
    try:
        template = parse_template(options.template)
    except TemplateError as exc:
        logger.warning(
            "unable to use template, running with default values",
            template=str(options.template),
            error=str(exc),
        )
        return options

    logger.info("Using template", template=str(options.template))
    return apply_template(options, template)


def build_reel(
    options: ReelOptions, context: RunContext, image_id: Optional[str] = None
) -> SubtitleReel:
    """
    Build the minimal reel described by the options.

    Args:
        options: Resolved options (template already applied)
        context: Run identifiers and issue date
        image_id: UUID of the placeholder image for the image profile;
            generated when not given

    Returns:
        A SubtitleReel with one placeholder Subtitle event

    Raises:
        InvalidFrameRate: If the frame rate is not a positive number
        ValueError: If the display index is negative
    """
    rate = parse_frame_rate(options.frame_rate)

    reel = SubtitleReel(
        xmlns=options.namespace,
        id=context.document_urn,
        content_title_text=options.title,
        issue_date=context.issue_date_text,
        reel_number=options.reel,
        language=options.language,
        edit_rate=f"{options.frame_rate} 1",
        timecode_rate=options.timecode_rate or options.frame_rate,
        start_time=stamp(START_SECONDS, rate),
        display_type=DisplayType.from_index(options.display).value,
    )

    event = Subtitle(
        time_in=stamp(TIME_IN_SECONDS, rate),
        time_out=stamp(TIME_OUT_SECONDS, rate),
    )
    if options.profile is Profile.IMAGE:
        image_id = image_id or str(uuid.uuid4())
        event.images.append(Image(uri=f"{URN_UUID}{image_id}"))
    else:
        reel.load_font = LoadFont(font=FONT_ID, id=LOAD_FONT_ID)
        event.texts.append(
            Text(halign=TEXT_HALIGN, valign=TEXT_VALIGN, vposition=TEXT_VPOSITION)
        )

    reel.subtitle_list.subtitles.append(event)
    reel.validate()
    return reel


def synthesize(
    options: ReelOptions,
    context: Optional[RunContext] = None,
    settings: Optional[Settings] = None,
    stream: Optional[TextIO] = None,
) -> SynthesisResult:
    """
    Create a minimal ST 428-7 document and, optionally, its track file.

    Without an output directory the document is written to ``stream``
    (stdout by default). With one, ``<uuid>_r<reel>.xml`` is written there,
    together with the font resource (text profile) or the placeholder PNG
    (image profile), and the track file when requested.

    Args:
        options: Caller parameters
        context: Run identifiers; a fresh context is created when omitted
        settings: Font path and wrapper configuration
        stream: Console sink used when no output directory is set

    Returns:
        SynthesisResult describing the document and any files written

    Raises:
        InvalidFrameRate: If the frame rate is not a positive number
        RenderFailure: If the document cannot be serialized
        WrapperExecutionFailure: If the track-file wrapper fails
    """
    context = context or RunContext.create()
    settings = settings or get_settings()
    options = load_template(options)

    image_id = None
    if options.profile is Profile.IMAGE:
        image_id = str(uuid.uuid4())

    # Nothing is written until the reel has been built and rendered
    reel = build_reel(options, context, image_id)
    rendered = render(reel)
    result = SynthesisResult(reel=reel, rendered=rendered)

    if image_id is not None and options.output is not None:
        try:
            result.image_path = write_png(image_id, Path(options.output))
        except OSError as exc:
            logger.error("unable to write placeholder image", error=str(exc))

    if options.output is None:
        out = stream or sys.stdout
        out.write(rendered.decode("utf-8") + "\n")
        if options.track:
            logger.warning("track file requires an output directory, skipping")
        return result

    output_dir = Path(options.output)
    writer = XmlWriter(rendered)
    xml_path = writer.get_output_path(output_dir, reel.stem)
    try:
        result.document_path = writer.write(reel, xml_path)
    except OSError as exc:
        logger.error("unable to write document", path=str(xml_path), error=str(exc))

    if reel.profile is Profile.TEXT:
        font_source = get_font_path(settings.font_path)
        try:
            result.font_path = copy_font(font_source, output_dir)
        except OSError as exc:
            logger.error(
                "unable to copy font resource", font=str(font_source), error=str(exc)
            )

    if options.track:
        try:
            ensure_wrapper(settings.asdcp_wrap)
        except WrapperUnavailable as exc:
            logger.warning(str(exc))
            result.warnings.append(str(exc))
            return result
        result.trackfile_path = create_mxf(
            encrypt=options.encrypt,
            frame_rate=options.frame_rate,
            output=output_dir,
            xml_path=xml_path,
            reel=options.reel,
            duration=options.duration,
            trackfile_id=context.trackfile_id,
            binary=settings.asdcp_wrap,
            timeout=settings.wrap_timeout,
        )

    return result
