"""Unit tests for changelog fragment collection and insertion."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import pytest

from release_coordinator.core.changelog import (
    ChangelogEntry,
    ChangelogFragment,
    build_changelog_entry,
    collect_changelog,
    collect_fragments,
    insert_entry,
)
from release_coordinator.core.version import Version
from release_coordinator.exceptions import CommandError
from tests.helpers import CHANGELOG

if TYPE_CHECKING:
    from pathlib import Path

RELEASED_ON = date(2024, 6, 1)


def _entry(body: str = "- Something") -> ChangelogEntry:
    return ChangelogEntry(version=Version(1, 3, 0), released_on=RELEASED_ON, body=body)


class TestCollectFragments:
    """Tests for collect_fragments()."""

    def test_sorted_by_file_name(self, tmp_path: Path):
        """Fragments come back in file name order, not creation order."""
        (tmp_path / "b.md").write_text("B")
        (tmp_path / "a.md").write_text("A")

        fragments = collect_fragments(tmp_path)

        assert [f.name for f in fragments] == ["a.md", "b.md"]
        assert [f.text for f in fragments] == ["A", "B"]

    def test_index_file_excluded(self, tmp_path: Path):
        """The reserved README.md is never a fragment."""
        (tmp_path / "README.md").write_text("How to write fragments")
        (tmp_path / "fix.md").write_text("- Fixed it")

        assert [f.name for f in collect_fragments(tmp_path)] == ["fix.md"]

    def test_custom_index_name(self, tmp_path: Path):
        (tmp_path / "INDEX.md").write_text("index")
        (tmp_path / "README.md").write_text("a real fragment")

        fragments = collect_fragments(tmp_path, index_name="INDEX.md")

        assert [f.name for f in fragments] == ["README.md"]

    def test_only_matching_suffix(self, tmp_path: Path):
        """Files without the fragment suffix are ignored."""
        (tmp_path / "note.txt").write_text("not a fragment")
        (tmp_path / ".gitkeep").write_text("")
        (tmp_path / "feat.md").write_text("- Feature")

        assert [f.name for f in collect_fragments(tmp_path)] == ["feat.md"]

    def test_subdirectories_ignored(self, tmp_path: Path):
        (tmp_path / "nested.md").mkdir()
        (tmp_path / "real.md").write_text("- Real")

        assert [f.name for f in collect_fragments(tmp_path)] == ["real.md"]

    def test_trims_and_drops_empty(self, tmp_path: Path):
        """Whitespace is trimmed and blank fragments are dropped."""
        (tmp_path / "a.md").write_text("\n\n  - Trimmed  \n\n")
        (tmp_path / "b.md").write_text("   \n\t\n")

        fragments = collect_fragments(tmp_path)

        assert fragments == [ChangelogFragment(name="a.md", text="- Trimmed")]

    def test_missing_directory(self, tmp_path: Path):
        """A missing directory yields no fragments."""
        assert collect_fragments(tmp_path / "changelog.d") == []


class TestBuildChangelogEntry:
    """Tests for build_changelog_entry()."""

    def test_fragments_joined_by_blank_line(self):
        fragments = [ChangelogFragment("a.md", "A"), ChangelogFragment("b.md", "B")]

        entry = build_changelog_entry(Version(1, 3, 0), RELEASED_ON, fragments)

        assert entry.body == "A\n\nB"

    def test_heading(self):
        assert _entry().heading == "## [1.3.0] - 2024-06-01"

    def test_render(self):
        assert _entry("- X").render() == "\n## [1.3.0] - 2024-06-01\n\n- X\n"


class TestInsertEntry:
    """Tests for insert_entry()."""

    def test_insert_before_newest_entry(self):
        """The new entry lands directly above the previous newest one."""
        result = insert_entry(CHANGELOG, _entry("- New"))

        new_pos = result.index("## [1.3.0]")
        old_pos = result.index("## [1.2.3]")
        assert result.index("# Changelog") < new_pos < old_pos
        assert "- New\n\n## [1.2.3] - 2024-01-01" in result

    def test_insert_only_before_first_heading(self):
        """Only the first matching heading is used as the anchor."""
        existing = "# Changelog\n\n## [2.0.0] - 2024-02-01\n\n## [1.0.0] - 2024-01-01\n"

        result = insert_entry(existing, _entry())

        assert result.count("## [1.3.0]") == 1
        assert result.index("## [1.3.0]") < result.index("## [2.0.0]")

    def test_append_when_no_entries(self):
        """Without any entry heading the entry is appended."""
        existing = "# Changelog\n"

        result = insert_entry(existing, _entry("- First"))

        assert result == "# Changelog\n\n## [1.3.0] - 2024-06-01\n\n- First\n"

    def test_append_to_empty_changelog(self):
        assert insert_entry("", _entry("- First")) == _entry("- First").render()

    def test_crlf_changelog_keeps_line_endings(self):
        """A CRLF changelog gets a CRLF entry and no bare LF."""
        existing = CHANGELOG.replace("\n", "\r\n")

        result = insert_entry(existing, _entry("- New"))

        assert "\r\n## [1.3.0] - 2024-06-01\r\n\r\n- New\r\n\r\n## [1.2.3]" in result
        assert result.replace("\r\n", "").count("\n") == 0

    def test_append_to_crlf_changelog(self):
        result = insert_entry("# Changelog\r\n", _entry("- First"))

        assert result == "# Changelog\r\n\r\n## [1.3.0] - 2024-06-01\r\n\r\n- First\r\n"


class TestCollectChangelog:
    """Tests for collect_changelog()."""

    def test_updates_changelog(self, project: Path):
        """Fragments are written into the changelog file."""
        (project / "changelog.d" / "b.md").write_text("B")
        (project / "changelog.d" / "a.md").write_text("A")

        count = collect_changelog(
            Version(1, 3, 0),
            RELEASED_ON,
            fragments_dir=project / "changelog.d",
            changelog_path=project / "CHANGELOG.md",
        )

        content = (project / "CHANGELOG.md").read_text()
        assert count == 2
        assert "## [1.3.0] - 2024-06-01\n\nA\n\nB\n" in content

    def test_no_fragments_is_noop(self, project: Path):
        """Only the index file present: the changelog is untouched."""
        count = collect_changelog(
            Version(1, 3, 0),
            RELEASED_ON,
            fragments_dir=project / "changelog.d",
            changelog_path=project / "CHANGELOG.md",
        )

        assert count == 0
        assert (project / "CHANGELOG.md").read_text() == CHANGELOG

    def test_missing_fragments_dir_is_noop(self, project: Path):
        count = collect_changelog(
            Version(1, 3, 0),
            RELEASED_ON,
            fragments_dir=project / "does-not-exist",
            changelog_path=project / "CHANGELOG.md",
        )

        assert count == 0
        assert (project / "CHANGELOG.md").read_text() == CHANGELOG

    def test_missing_changelog_not_created(self, project: Path):
        """Fragments without a changelog file leave the disk untouched."""
        (project / "CHANGELOG.md").unlink()
        (project / "changelog.d" / "a.md").write_text("A")

        count = collect_changelog(
            Version(1, 3, 0),
            RELEASED_ON,
            fragments_dir=project / "changelog.d",
            changelog_path=project / "CHANGELOG.md",
        )

        assert count == 0
        assert not (project / "CHANGELOG.md").exists()

    def test_crlf_changelog_round_trip(self, project: Path):
        """Existing CRLF bytes are kept and the new entry is written with CRLF."""
        changelog = project / "CHANGELOG.md"
        original = CHANGELOG.replace("\n", "\r\n").encode("utf-8")
        changelog.write_bytes(original)
        (project / "changelog.d" / "a.md").write_text("- Added A")

        collect_changelog(
            Version(1, 3, 0),
            RELEASED_ON,
            fragments_dir=project / "changelog.d",
            changelog_path=changelog,
        )

        written = changelog.read_bytes()
        assert b"## [1.3.0] - 2024-06-01\r\n\r\n- Added A\r\n\r\n## [1.2.3]" in written
        assert written.replace(b"\r\n", b"").count(b"\n") == 0
        assert written.startswith(original.split(b"## [1.2.3]")[0])

    def test_undecodable_fragment_raises_command_error(self, project: Path):
        """A fragment that is not UTF-8 is reported with its path."""
        (project / "changelog.d" / "bad.md").write_bytes(b"\xff\xfe- broken")

        with pytest.raises(CommandError, match="bad.md"):
            collect_changelog(
                Version(1, 3, 0),
                RELEASED_ON,
                fragments_dir=project / "changelog.d",
                changelog_path=project / "CHANGELOG.md",
            )
        assert (project / "CHANGELOG.md").read_text(encoding="utf-8") == CHANGELOG

    def test_undecodable_changelog_raises_command_error(self, project: Path):
        changelog = project / "CHANGELOG.md"
        changelog.write_bytes(b"\xff\xfe# Changelog")
        (project / "changelog.d" / "a.md").write_text("A")

        with pytest.raises(CommandError, match="Could not decode"):
            collect_changelog(
                Version(1, 3, 0),
                RELEASED_ON,
                fragments_dir=project / "changelog.d",
                changelog_path=changelog,
            )
        assert changelog.read_bytes() == b"\xff\xfe# Changelog"
