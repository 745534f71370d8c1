"""Environment configuration for emptytt.

Values come from the process environment, optionally seeded from a ``.env``
file in the working directory:

- ``LOG_LEVEL``: root log level (default ``INFO``)
- ``EMPTYTT_FONT_PATH``: font resource copied next to text-profile documents
- ``EMPTYTT_ASDCP_WRAP``: name or path of the track-file wrapper executable
- ``EMPTYTT_WRAP_TIMEOUT``: seconds to wait for the wrapper (unset waits forever)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_ASDCP_WRAP = "asdcp-wrap"


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the environment."""

    log_level: str = "INFO"
    font_path: Optional[Path] = None
    asdcp_wrap: str = DEFAULT_ASDCP_WRAP
    wrap_timeout: Optional[float] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            A populated Settings instance

        Raises:
            ValueError: If EMPTYTT_WRAP_TIMEOUT is not a number
        """
        env = os.environ if environ is None else environ

        font_path = env.get("EMPTYTT_FONT_PATH")
        timeout = env.get("EMPTYTT_WRAP_TIMEOUT", "").strip()

        return cls(
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            font_path=Path(font_path) if font_path else None,
            asdcp_wrap=env.get("EMPTYTT_ASDCP_WRAP") or DEFAULT_ASDCP_WRAP,
            wrap_timeout=float(timeout) if timeout else None,
        )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the process-wide Settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
