"""Pytest configuration for emptytt tests."""

import sys
from datetime import datetime
from pathlib import Path
from typing import Callable

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from emptytt.config import Settings  # noqa: E402
from emptytt.subtitle.constants import DCST_2014  # noqa: E402
from emptytt.subtitle.synthesis import RunContext  # noqa: E402

DOCUMENT_ID = "0f1e2d3c-4b5a-4968-8776-655443322110"
TRACKFILE_ID = "a1b2c3d4-e5f6-4a7b-8c9d-0e1f2a3b4c5d"

TEMPLATE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<SubtitleReel xmlns="{namespace}">
  <Id>urn:uuid:5c7d8e9f-0a1b-4c2d-9e3f-405162738495</Id>
  <ContentTitleText>{title}</ContentTitleText>
  <IssueDate>2020-06-01T10:00:00-00:00</IssueDate>
  <ReelNumber>2</ReelNumber>
  <Language>{language}</Language>
  <EditRate>{edit_rate}</EditRate>
  <TimeCodeRate>{timecode_rate}</TimeCodeRate>
  <StartTime>00:00:00:00</StartTime>
  <DisplayType>{display_type}</DisplayType>
  <LoadFont ID="Arial">232c45d8-fde8-4e5e-86b9-86e96354daf3</LoadFont>
  <SubtitleList>
    <Font Size="42" Color="FFFFFFFF">
      <Subtitle SpotNumber="1" TimeIn="00:00:04:00" TimeOut="00:00:19:00" FadeUpTime="00:00:00:02" FadeDownTime="00:00:00:03">
        <Text Valign="top" Vposition="10">Bonjour</Text>
      </Subtitle>
    </Font>
  </SubtitleList>
</SubtitleReel>
"""


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def run_context() -> RunContext:
    """Run identifiers fixed for reproducible output."""
    return RunContext(
        document_id=DOCUMENT_ID,
        trackfile_id=TRACKFILE_ID,
        issue_date=datetime(2026, 10, 19, 12, 34, 56, 789000),
    )


@pytest.fixture
def font_file(tmp_path: Path) -> Path:
    """A stand-in font resource named after the well-known font id."""
    font_dir = tmp_path / "resources"
    font_dir.mkdir()
    font = font_dir / "232c45d8-fde8-4e5e-86b9-86e96354daf3"
    font.write_bytes(b"\x00\x01\x00\x00fontdata")
    return font


@pytest.fixture
def settings(font_file: Path) -> Settings:
    """Settings pointing at the stand-in font and the default wrapper."""
    return Settings(font_path=font_file)


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def make_template(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a template document and returning its path."""

    def _make(
        namespace: str = DCST_2014,
        title: str = "Feature",
        language: str = "fr",
        edit_rate: str = "25 1",
        timecode_rate: str = "25",
        display_type: str = "ClosedCaption",
        filename: str = "template.xml",
    ) -> Path:
        path = tmp_path / filename
        path.write_text(
            TEMPLATE_XML.format(
                namespace=namespace,
                title=title,
                language=language,
                edit_rate=edit_rate,
                timecode_rate=timecode_rate,
                display_type=display_type,
            ),
            encoding="utf-8",
        )
        return path

    return _make
