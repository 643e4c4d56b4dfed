"""
Tests for models/markers.py.

Covers:
- validate_markers: whitespace, control characters, duplicates, positions
- MarkerSet construction and ValidationError messages
- Defaults
"""

import sys
from pathlib import Path

# Add src to path so imports work without installation
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from task_list_kanban.models.markers import (
    DEFAULT_DONE_STATUS_MARKERS,
    DEFAULT_IGNORED_STATUS_MARKERS,
    MarkerSet,
    ValidationError,
    create_done_status_markers,
    create_ignored_status_markers,
    create_marker_set,
    validate_done_status_markers,
    validate_ignored_status_markers,
    validate_markers,
)


# ---------------------------------------------------------------------------
# validate_done_status_markers
# ---------------------------------------------------------------------------

class TestValidateDoneMarkers:
    @pytest.mark.parametrize("markers", ["xX", "✓✅👍", "x", "*+?", "🚀👍✅", "éñü"])
    def test_accepts_valid_markers(self, markers):
        assert validate_done_status_markers(markers) == []

    def test_rejects_empty(self):
        assert validate_done_status_markers("") == ["Done status markers cannot be empty"]

    def test_whitespace_only_is_not_reported_as_empty(self):
        errors = validate_done_status_markers("   ")
        assert errors
        assert "Done status markers cannot be empty" not in errors

    def test_space_position(self):
        assert "Marker at position 2 is whitespace" in validate_done_status_markers("x X")

    def test_newline_is_whitespace(self):
        assert "Marker at position 2 is whitespace" in validate_done_status_markers("x\nX")

    def test_tab_is_whitespace_and_control(self):
        errors = validate_done_status_markers("x\tX")
        assert errors == [
            "Marker at position 2 is whitespace",
            "Marker at position 2 is a control character",
        ]

    def test_control_character(self):
        assert validate_done_status_markers("x\u0001X") == [
            "Marker at position 2 is a control character"
        ]

    def test_c1_control_character(self):
        assert "Marker at position 1 is a control character" in validate_done_status_markers("\u0085")

    def test_duplicate_position(self):
        assert validate_done_status_markers("xXx") == ["Duplicate marker 'x' at position 3"]

    def test_duplicates_are_case_sensitive(self):
        assert validate_done_status_markers("xX") == []

    def test_accumulates_errors_in_order(self):
        errors = validate_done_status_markers("x x\tx")
        assert errors == [
            "Marker at position 2 is whitespace",
            "Duplicate marker 'x' at position 3",
            "Marker at position 4 is whitespace",
            "Marker at position 4 is a control character",
            "Duplicate marker 'x' at position 5",
        ]

    def test_emoji_counts_as_one_position(self):
        # 🚀 is outside the BMP; it must still be a single position
        errors = validate_done_status_markers("🚀 x")
        assert errors == ["Marker at position 2 is whitespace"]

    def test_duplicate_emoji(self):
        assert validate_done_status_markers("👍x👍") == ["Duplicate marker '👍' at position 3"]

    def test_repeated_whitespace_is_also_duplicate(self):
        errors = validate_done_status_markers("x  ")
        assert errors == [
            "Marker at position 2 is whitespace",
            "Marker at position 3 is whitespace",
            "Duplicate marker ' ' at position 3",
        ]


# ---------------------------------------------------------------------------
# validate_ignored_status_markers
# ---------------------------------------------------------------------------

class TestValidateIgnoredMarkers:
    @pytest.mark.parametrize("markers", ["-~", "❌🚫", "-", "~"])
    def test_accepts_valid_markers(self, markers):
        assert validate_ignored_status_markers(markers) == []

    def test_accepts_empty(self):
        assert validate_ignored_status_markers("") == []

    def test_rejects_whitespace(self):
        assert "Marker at position 2 is whitespace" in validate_ignored_status_markers("- ")

    def test_rejects_duplicates(self):
        assert "Duplicate marker '-' at position 2" in validate_ignored_status_markers("--")

    def test_rejects_control_characters(self):
        assert validate_ignored_status_markers("-\u0007") == [
            "Marker at position 2 is a control character"
        ]


class TestValidateMarkers:
    def test_empty_message_uses_kind(self):
        assert validate_markers("", True, "ignored") == ["Ignored status markers cannot be empty"]

    def test_empty_allowed_when_not_required(self):
        assert validate_markers("", False) == []


# ---------------------------------------------------------------------------
# MarkerSet
# ---------------------------------------------------------------------------

class TestMarkerSet:
    def test_create_done(self):
        markers = create_done_status_markers("xX✓")
        assert str(markers) == "xX✓"
        assert markers.kind == "done"
        assert len(markers) == 3

    def test_membership_is_by_character(self):
        markers = create_done_status_markers("xX👍")
        assert "x" in markers
        assert "👍" in markers
        assert "y" not in markers
        assert "xX" not in markers

    def test_first_is_canonical(self):
        assert create_done_status_markers("✓x").first == "✓"

    def test_order_preserved(self):
        assert list(create_done_status_markers("Xx✓")) == ["X", "x", "✓"]

    def test_create_ignored_empty(self):
        markers = create_ignored_status_markers("")
        assert str(markers) == ""
        assert not markers

    def test_empty_set_has_no_first(self):
        with pytest.raises(ValueError):
            create_ignored_status_markers("").first

    def test_immutable(self):
        markers = create_done_status_markers("xX")
        with pytest.raises(AttributeError):
            markers.markers = ("y",)

    def test_constructor_validates(self):
        with pytest.raises(ValidationError) as exc:
            MarkerSet(kind="done", markers=("x", "x", " "))
        assert exc.value.violations == [
            "Duplicate marker 'x' at position 2",
            "Marker at position 3 is whitespace",
        ]

    def test_constructor_rejects_empty_done(self):
        with pytest.raises(ValidationError, match="Done status markers cannot be empty"):
            MarkerSet(kind="done")

    def test_constructor_allows_empty_ignored(self):
        assert len(MarkerSet(kind="ignored")) == 0

    def test_constructor_rejects_multi_character_entries(self):
        with pytest.raises(ValueError, match="single character"):
            MarkerSet(kind="done", markers=("xX",))

    def test_constructor_rejects_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown marker kind"):
            MarkerSet(kind="other", markers=("x",))

    def test_create_marker_set_dispatches_on_kind(self):
        assert create_marker_set("-", "ignored").kind == "ignored"
        assert MarkerSet.create("x", "done").kind == "done"


class TestValidationError:
    def test_empty_done_markers(self):
        with pytest.raises(ValidationError, match="Invalid done status markers: Done status markers cannot be empty"):
            create_done_status_markers("")

    def test_whitespace_message(self):
        with pytest.raises(ValidationError) as exc:
            create_done_status_markers("x x")
        assert str(exc.value) == "Invalid done status markers: Marker at position 2 is whitespace"

    def test_multiple_violations_joined(self):
        with pytest.raises(ValidationError) as exc:
            create_done_status_markers("x xx")
        assert exc.value.violations == [
            "Marker at position 2 is whitespace",
            "Duplicate marker 'x' at position 4",
        ]
        assert str(exc.value) == (
            "Invalid done status markers: Marker at position 2 is whitespace, "
            "Duplicate marker 'x' at position 4"
        )

    def test_ignored_message(self):
        with pytest.raises(ValidationError, match="Invalid ignored status markers: Marker at position 2 is whitespace"):
            create_ignored_status_markers("- ")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            create_done_status_markers("xx")

    def test_kind_recorded(self):
        with pytest.raises(ValidationError) as exc:
            create_ignored_status_markers("--")
        assert exc.value.kind == "ignored"


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

class TestDefaults:
    def test_default_done_markers(self):
        assert DEFAULT_DONE_STATUS_MARKERS == "xX"
        assert validate_done_status_markers(DEFAULT_DONE_STATUS_MARKERS) == []
        assert str(create_done_status_markers(DEFAULT_DONE_STATUS_MARKERS)) == "xX"

    def test_default_ignored_markers(self):
        assert DEFAULT_IGNORED_STATUS_MARKERS == ""
        assert validate_ignored_status_markers(DEFAULT_IGNORED_STATUS_MARKERS) == []
        create_ignored_status_markers(DEFAULT_IGNORED_STATUS_MARKERS)
