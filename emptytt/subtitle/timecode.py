"""
SMPTE timecode arithmetic.

Converts between total frame counts and HH:MM:SS:FF stamps. Fractional
(pulldown) rates such as 23.976 count frames at the next whole rate.
"""

import math
import re
from typing import Final, Union

from emptytt.errors import InvalidFrameRate

TIMECODE_PATTERN: Final = re.compile(r"^(\d\d)[:;](\d\d)[:;](\d\d)[:.](\d+)$")


def parse_frame_rate(value: Union[str, float, int]) -> float:
    """
    Convert a frame rate given as text (e.g. "24", "23.976") to a float.

    Args:
        value: Frame rate as a string or number. An empty string yields 0.0.

    Returns:
        The frame rate as a float

    Raises:
        InvalidFrameRate: If the value is not numeric
    """
    if isinstance(value, (int, float)):
        return float(value)
    if not value.strip():
        return 0.0
    try:
        return float(value)
    except ValueError as exc:
        raise InvalidFrameRate(f"unsupported framerate: {value!r}") from exc


class Timecode:
    """A frame-accurate SMPTE timecode at a fixed frame rate."""

    def __init__(self, frame_rate: float) -> None:
        if not math.isfinite(frame_rate) or frame_rate <= 0:
            raise InvalidFrameRate("unsupported framerate")
        self.frame_rate = float(frame_rate)
        self.hours = 0
        self.minutes = 0
        self.seconds = 0
        self.frames = 0

    @property
    def effective_rate(self) -> int:
        """Whole-number rate used for frame counting (rounded up when fractional)."""
        whole, fraction = divmod(self.frame_rate, 1)
        if fraction:
            return math.ceil(self.frame_rate)
        return int(whole)

    @property
    def total_frames(self) -> int:
        """Frame count represented by the stored hours, minutes, seconds and frames."""
        seconds = self.hours * 3600 + self.minutes * 60 + self.seconds
        return seconds * self.effective_rate + self.frames

    def set_frames(self, frame_count: int) -> "Timecode":
        """
        Set the timecode from an absolute frame count.

        Args:
            frame_count: Number of frames from 00:00:00:00

        Returns:
            self, so calls can be chained into get_timecode()

        Raises:
            ValueError: If frame_count is negative
        """
        if frame_count < 0:
            raise ValueError(f"frame count must not be negative: {frame_count}")
        seconds, self.frames = divmod(frame_count, self.effective_rate)
        minutes, self.seconds = divmod(seconds, 60)
        self.hours, self.minutes = divmod(minutes, 60)
        return self

    def get_timecode(self) -> str:
        """Return the timecode as a zero-padded HH:MM:SS:FF string."""
        seconds, frames = divmod(self.total_frames, self.effective_rate)
        minutes, seconds = divmod(seconds, 60)
        hours, minutes = divmod(minutes, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}:{frames:02d}"

    def __str__(self) -> str:
        return self.get_timecode()

    def __repr__(self) -> str:
        return f"Timecode({self.frame_rate!r}, {self.get_timecode()!r})"


def parse_timecode(value: str, frame_rate: float) -> Timecode:
    """
    Parse an HH:MM:SS:FF stamp.

    ";" is accepted between hours, minutes and seconds; "." may stand in
    for ":" before the frame field.

    Args:
        value: The timecode string
        frame_rate: Frame rate the stamp is expressed in

    Returns:
        A Timecode holding the parsed fields

    Raises:
        ValueError: If the string is not a timecode or a field is out of range
    """
    match = TIMECODE_PATTERN.match(value.strip())
    if match is None:
        raise ValueError(f"not a SMPTE timecode: {value!r}")

    tc = Timecode(frame_rate)
    hours, minutes, seconds, frames = (int(group) for group in match.groups())
    if minutes >= 60 or seconds >= 60 or frames >= tc.effective_rate:
        raise ValueError(f"timecode field out of range: {value!r}")

    tc.hours, tc.minutes, tc.seconds, tc.frames = hours, minutes, seconds, frames
    return tc


def stamp(seconds: int, frame_rate: float) -> str:
    """Format a whole number of seconds as a timecode at the given rate."""
    tc = Timecode(frame_rate)
    return tc.set_frames(seconds * tc.effective_rate).get_timecode()
