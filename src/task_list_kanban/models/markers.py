"""
Status marker validation.

A marker string is a run of single-character status markers, e.g. ``"xX"``
for the characters that mark a task as done. Characters are counted as
Unicode codepoints, so an emoji such as ``🚀`` occupies one position.

Main API:
    validate_markers(markers, require_non_empty, kind)  → List[str]
    create_marker_set(markers, kind)  → MarkerSet  (raises ValidationError)
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Iterator, List, Literal, Set, Tuple

MarkerKind = Literal["done", "ignored"]

DEFAULT_DONE_STATUS_MARKERS = "xX"
DEFAULT_IGNORED_STATUS_MARKERS = ""

# Ignored markers may be empty ("ignore nothing"); done markers may not.
_REQUIRE_NON_EMPTY = {
    "done": True,
    "ignored": False,
}


class ValidationError(ValueError):
    """A marker string broke one or more of the marker rules."""

    def __init__(self, kind: str, violations: List[str]) -> None:
        self.kind = kind
        self.violations = list(violations)
        super().__init__(f"Invalid {kind} status markers: " + ", ".join(self.violations))


def _is_control(char: str) -> bool:
    return unicodedata.category(char) == "Cc"


def validate_markers(markers: str, require_non_empty: bool, kind: str = "done") -> List[str]:
    """
    Check a marker string and describe every problem found.

    Positions are 1-based and count codepoints. A character that is both
    whitespace and a control character (tab, newline) is reported twice.

    Args:
        markers: Candidate marker string
        require_non_empty: Reject the empty string
        kind: Marker kind used in the empty-string message

    Returns:
        Violation messages in discovery order (empty when valid)
    """
    if require_non_empty and not markers:
        return [f"{kind.capitalize()} status markers cannot be empty"]

    violations: List[str] = []
    seen: Set[str] = set()

    for position, char in enumerate(markers, start=1):
        if char.isspace():
            violations.append(f"Marker at position {position} is whitespace")
        if _is_control(char):
            violations.append(f"Marker at position {position} is a control character")
        if char in seen:
            violations.append(f"Duplicate marker '{char}' at position {position}")
        seen.add(char)

    return violations


def validate_done_status_markers(markers: str) -> List[str]:
    return validate_markers(markers, require_non_empty=True, kind="done")


def validate_ignored_status_markers(markers: str) -> List[str]:
    return validate_markers(markers, require_non_empty=False, kind="ignored")


@dataclass(frozen=True)
class MarkerSet:
    """
    Validated, ordered, immutable set of status marker characters.

    Every construction path validates, so a MarkerSet that exists always
    satisfies the marker rules.
    """

    kind: MarkerKind
    markers: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.kind not in _REQUIRE_NON_EMPTY:
            raise ValueError(f"Unknown marker kind '{self.kind}'")
        joined = "".join(self.markers)
        # One codepoint per marker
        if len(joined) != len(self.markers):
            raise ValueError("Each marker must be a single character")
        violations = validate_markers(joined, _REQUIRE_NON_EMPTY[self.kind], self.kind)
        if violations:
            raise ValidationError(self.kind, violations)

    @classmethod
    def create(cls, markers: str, kind: MarkerKind) -> MarkerSet:
        """Validate ``markers`` and build the set, or raise ValidationError."""
        return cls(kind=kind, markers=tuple(markers))

    @property
    def first(self) -> str:
        """The canonical marker, used when a task has to be marked done."""
        if not self.markers:
            raise ValueError(f"No {self.kind} status markers configured")
        return self.markers[0]

    def __contains__(self, char: object) -> bool:
        return char in self.markers

    def __iter__(self) -> Iterator[str]:
        return iter(self.markers)

    def __len__(self) -> int:
        return len(self.markers)

    def __str__(self) -> str:
        return "".join(self.markers)


def create_marker_set(markers: str, kind: MarkerKind) -> MarkerSet:
    return MarkerSet.create(markers, kind)


def create_done_status_markers(markers: str) -> MarkerSet:
    return MarkerSet.create(markers, "done")


def create_ignored_status_markers(markers: str) -> MarkerSet:
    return MarkerSet.create(markers, "ignored")


DEFAULT_DONE_MARKERS = MarkerSet(kind="done", markers=tuple(DEFAULT_DONE_STATUS_MARKERS))
DEFAULT_IGNORED_MARKERS = MarkerSet(kind="ignored", markers=())
