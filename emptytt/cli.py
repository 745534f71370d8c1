"""Command-line entry point for emptytt."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from emptytt import __version__
from emptytt.errors import EmptyTTError
from emptytt.logging_config import configure_logging, get_logger
from emptytt.subtitle.constants import (
    DEFAULT_DURATION,
    DEFAULT_FRAME_RATE,
    DEFAULT_LANGUAGE,
    DEFAULT_REEL,
    DEFAULT_TITLE,
)
from emptytt.subtitle.synthesis import ReelOptions, RunContext, synthesize

logger = get_logger()


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="emptytt",
        description=(
            "Create a minimal SMPTE ST 428-7 subtitle document "
            "(ISDCF TD 16) and optionally wrap it into an MXF track file."
        ),
    )
    parser.add_argument(
        "--text",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="use the text profile (default)",
    )
    parser.add_argument(
        "--image",
        action="store_true",
        help="use the image profile; takes precedence over --text",
    )
    parser.add_argument(
        "-T", dest="track", action="store_true", help="write MXF track file, requires -o"
    )
    parser.add_argument(
        "-e", dest="encrypt", action="store_true", help="encrypt the track file"
    )
    parser.add_argument(
        "-d",
        dest="duration",
        type=positive_int,
        default=DEFAULT_DURATION,
        help="duration of the track file in frames (default: %(default)s)",
    )
    parser.add_argument(
        "-p",
        dest="frame_rate",
        default=DEFAULT_FRAME_RATE,
        help="frame rate of the document and track file (default: %(default)s)",
    )
    parser.add_argument(
        "-m",
        dest="display",
        type=non_negative_int,
        default=0,
        help="DisplayType: 0=MainSubtitle, 1=ClosedCaption (default: %(default)s)",
    )
    parser.add_argument(
        "-r",
        dest="reel",
        type=positive_int,
        default=DEFAULT_REEL,
        help="ReelNumber (default: %(default)s)",
    )
    parser.add_argument(
        "-l",
        dest="language",
        default=DEFAULT_LANGUAGE,
        help="RFC 5646 language subtag (default: %(default)s)",
    )
    parser.add_argument(
        "-t",
        dest="title",
        default=DEFAULT_TITLE,
        help="ContentTitleText value (default: %(default)s)",
    )
    parser.add_argument(
        "-x", dest="template", type=Path, help="path to an ST 428-7 XML to use as template"
    )
    parser.add_argument(
        "-o", dest="output", type=Path, help="output directory (default: stdout)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def options_from_args(args: argparse.Namespace) -> ReelOptions:
    return ReelOptions(
        text=args.text,
        image=args.image,
        track=args.track,
        encrypt=args.encrypt,
        reel=args.reel,
        display=args.display,
        duration=args.duration,
        frame_rate=args.frame_rate,
        language=args.language,
        title=args.title,
        template=args.template,
        output=args.output,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Run the generator. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        configure_logging("DEBUG")

    try:
        result = synthesize(options_from_args(args), RunContext.create())
    except EmptyTTError as exc:
        print(exc, file=sys.stderr)
        return 1

    logger.debug("Document created", reel=str(result.reel))
    return 0


if __name__ == "__main__":
    sys.exit(main())
