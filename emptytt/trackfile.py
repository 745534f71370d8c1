"""
D-Cinema track file creation through asdcp-wrap.

The wrapper is an external executable that must be on $PATH. It is run
synchronously; with no timeout configured a hung wrapper blocks the run.
"""

import math
import secrets
import shutil
import subprocess
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from emptytt.config import DEFAULT_ASDCP_WRAP
from emptytt.errors import WrapperExecutionFailure, WrapperUnavailable
from emptytt.logging_config import get_logger
from emptytt.subtitle.constants import MXF_SUFFIX, REEL_INFIX
from emptytt.subtitle.timecode import Timecode, parse_frame_rate

logger = get_logger()

KEY_BYTES = 16


@dataclass(frozen=True)
class EncryptionKey:
    """Content key handed to the wrapper. Never written to disk."""

    key_id: str
    key_hex: str

    @classmethod
    def generate(cls) -> "EncryptionKey":
        return cls(key_id=str(uuid.uuid4()), key_hex=secrets.token_hex(KEY_BYTES))


def wrapper_available(binary: str = DEFAULT_ASDCP_WRAP) -> bool:
    """Check whether the wrapper executable can be found on $PATH."""
    return shutil.which(binary) is not None


def ensure_wrapper(binary: str = DEFAULT_ASDCP_WRAP) -> None:
    """
    Raises:
        WrapperUnavailable: If the wrapper is not on $PATH
    """
    if not wrapper_available(binary):
        raise WrapperUnavailable(f"{binary} not installed or not available at $PATH")


def trackfile_name(trackfile_id: str, reel: int) -> str:
    """Track file name: <uuid>_r<reel>_sub.mxf"""
    return f"{trackfile_id}{REEL_INFIX}{reel}{MXF_SUFFIX}"


def build_wrap_args(
    trackfile_id: str,
    duration: int,
    frame_rate: str,
    xml_path: Path,
    mxf_path: Path,
    key: Optional[EncryptionKey] = None,
) -> List[str]:
    """
    Build the asdcp-wrap argument list (without the executable).

    Args:
        trackfile_id: Asset UUID of the track file
        duration: Track duration in frames
        frame_rate: Edit rate passed with -p
        xml_path: Subtitle document to wrap
        mxf_path: Track file to create
        key: Content key; adds -j/-k when given

    Returns:
        List of command line arguments
    """
    args = ["-L"]
    if key is not None:
        args += ["-j", key.key_id, "-k", key.key_hex]
    args += [
        "-a",
        trackfile_id,
        "-d",
        str(duration),
        "-p",
        frame_rate,
        str(xml_path),
        str(mxf_path),
    ]
    return args


def create_mxf(
    encrypt: bool,
    frame_rate: str,
    output: Path,
    xml_path: Path,
    reel: int,
    duration: int,
    trackfile_id: str,
    binary: str = DEFAULT_ASDCP_WRAP,
    timeout: Optional[float] = None,
) -> Path:
    """
    Wrap a subtitle document into an MXF track file.

    When encrypting, the generated key id and key are printed for the
    operator to keep; they are not stored anywhere else.

    Args:
        encrypt: Encrypt the track file with a fresh content key
        frame_rate: Edit rate of the track file
        output: Directory for the track file
        xml_path: Rendered subtitle document
        reel: Reel number, used in the file name
        duration: Track duration in frames
        trackfile_id: Asset UUID of the track file
        binary: Wrapper executable
        timeout: Seconds to wait for the wrapper; None waits indefinitely

    Returns:
        Path of the created track file

    Raises:
        WrapperExecutionFailure: If the wrapper cannot be started, exits
            non-zero, or exceeds the timeout
    """
    mxf_path = Path(output) / trackfile_name(trackfile_id, reel)

    key = None
    if encrypt:
        key = EncryptionKey.generate()
        print(
            f"\nKeep the following safe!\nKeyID: {key.key_id}\nKeyString: {key.key_hex}\n"
        )

    cmd = [binary] + build_wrap_args(
        trackfile_id, duration, frame_rate, xml_path, mxf_path, key
    )

    rate = parse_frame_rate(frame_rate)
    length = None
    if math.isfinite(rate) and rate > 0:
        length = Timecode(rate).set_frames(duration).get_timecode()
    logger.info(
        "Wrapping track file",
        mxf=str(mxf_path),
        duration=duration,
        length=length,
        encrypted=encrypt,
    )

    try:
        subprocess.run(cmd, capture_output=True, check=True, timeout=timeout)
    except subprocess.CalledProcessError as exc:
        stderr = (exc.stderr or b"").decode(errors="replace").strip()
        raise WrapperExecutionFailure(
            f"error writing MXF: {binary} exited with {exc.returncode}: {stderr}"
        ) from exc
    except subprocess.TimeoutExpired as exc:
        raise WrapperExecutionFailure(
            f"error writing MXF: {binary} did not finish within {timeout}s"
        ) from exc
    except OSError as exc:
        raise WrapperExecutionFailure(f"error writing MXF: {exc}") from exc

    logger.info("Track file written", mxf=str(mxf_path))
    return mxf_path
