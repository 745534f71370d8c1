"""Tests for reading template documents."""

from pathlib import Path
from typing import Callable

import pytest

from emptytt.errors import (
    InvalidExtension,
    InvalidNamespace,
    TemplateError,
    TemplateUndetermined,
    TemplateUnreadable,
)
from emptytt.subtitle.constants import DCST_2007, DCST_2010, DCST_2014, FONT_ID
from emptytt.subtitle.models import Profile
from emptytt.subtitle.template import parse_template, split_tag


class TestParseTemplate:
    """Tests for parse_template."""

    def test_reads_global_properties(self, make_template: Callable[..., Path]) -> None:
        reel = parse_template(make_template())

        assert reel.xmlns == DCST_2014
        assert reel.id == "urn:uuid:5c7d8e9f-0a1b-4c2d-9e3f-405162738495"
        assert reel.content_title_text == "Feature"
        assert reel.issue_date == "2020-06-01T10:00:00-00:00"
        assert reel.reel_number == 2
        assert reel.language == "fr"
        assert reel.edit_rate == "25 1"
        assert reel.frame_rate_prefix == "25"
        assert reel.timecode_rate == "25"
        assert reel.start_time == "00:00:00:00"
        assert reel.display_type == "ClosedCaption"

    def test_reads_load_font(self, make_template: Callable[..., Path]) -> None:
        reel = parse_template(make_template())
        assert reel.load_font is not None
        assert reel.load_font.id == "Arial"
        assert reel.load_font.font == FONT_ID
        assert reel.profile is Profile.TEXT

    def test_reads_events(self, make_template: Callable[..., Path]) -> None:
        reel = parse_template(make_template())
        assert reel.subtitle_list.size == "42"
        assert reel.subtitle_list.color == "FFFFFFFF"

        [subtitle] = reel.subtitle_list.subtitles
        assert subtitle.spot_number == "1"
        assert subtitle.time_in == "00:00:04:00"
        assert subtitle.time_out == "00:00:19:00"
        assert subtitle.fade_up_time == "00:00:00:02"
        assert subtitle.fade_down_time == "00:00:00:03"

        [run] = subtitle.texts
        assert run.text == "Bonjour"
        assert run.valign == "top"
        assert run.vposition == "10"
        assert run.halign == ""
        assert subtitle.images == []

    def test_accepts_2010_namespace(self, make_template: Callable[..., Path]) -> None:
        reel = parse_template(make_template(namespace=DCST_2010))
        assert reel.namespace_tag == "dcst2010"

    def test_relative_path(
        self,
        make_template: Callable[..., Path],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        path = make_template()
        monkeypatch.chdir(path.parent)
        assert parse_template(path.name).language == "fr"

    def test_deprecated_namespace(self, make_template: Callable[..., Path]) -> None:
        """The 2007 schema is known but no longer accepted."""
        with pytest.raises(InvalidNamespace, match="invalid namespace"):
            parse_template(make_template(namespace=DCST_2007))

    def test_unknown_namespace(self, make_template: Callable[..., Path]) -> None:
        with pytest.raises(TemplateUndetermined) as excinfo:
            parse_template(make_template(namespace="urn:example:subtitles"))
        assert not isinstance(excinfo.value, InvalidNamespace)

    def test_missing_namespace(self, tmp_path: Path) -> None:
        path = tmp_path / "bare.xml"
        path.write_text("<SubtitleReel><Id>x</Id></SubtitleReel>", encoding="utf-8")
        with pytest.raises(TemplateUndetermined):
            parse_template(path)

    def test_wrong_extension(self, make_template: Callable[..., Path]) -> None:
        """Non-.xml files fall into the generic undetermined failure."""
        path = make_template(filename="template.txt")
        with pytest.raises(InvalidExtension) as excinfo:
            parse_template(path)
        assert isinstance(excinfo.value, TemplateUndetermined)

    def test_extension_is_case_sensitive(self, make_template: Callable[..., Path]) -> None:
        with pytest.raises(InvalidExtension):
            parse_template(make_template(filename="template.XML"))

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(TemplateUnreadable):
            parse_template(tmp_path / "missing.xml")

    def test_directory_is_unreadable(self, tmp_path: Path) -> None:
        folder = tmp_path / "folder.xml"
        folder.mkdir()
        with pytest.raises(TemplateUnreadable):
            parse_template(folder)

    def test_malformed_xml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.xml"
        path.write_text(f'<SubtitleReel xmlns="{DCST_2014}"><Id>', encoding="utf-8")
        with pytest.raises(TemplateUndetermined):
            parse_template(path)

    def test_wrong_root_element(self, tmp_path: Path) -> None:
        path = tmp_path / "other.xml"
        path.write_text(f'<DCSubtitle xmlns="{DCST_2014}"/>', encoding="utf-8")
        with pytest.raises(TemplateUndetermined, match="root element DCSubtitle"):
            parse_template(path)

    def test_all_failures_are_template_errors(self, tmp_path: Path) -> None:
        with pytest.raises(TemplateError):
            parse_template(tmp_path / "missing.xml")


class TestSplitTag:
    """Tests for split_tag."""

    def test_namespaced(self) -> None:
        assert split_tag(f"{{{DCST_2014}}}SubtitleReel") == (DCST_2014, "SubtitleReel")

    def test_plain(self) -> None:
        assert split_tag("SubtitleReel") == ("", "SubtitleReel")
