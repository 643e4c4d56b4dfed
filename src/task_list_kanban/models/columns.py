"""
Column tags.

A board column is written into a task line as a hashtag: the column
"Next week" is stored as ``#next-week``. ColumnTagTable holds both directions
of that mapping so neither side has to be re-derived on every lookup.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

# Reserved column for archived tasks. Never looked up in the table.
ARCHIVED_COLUMN = "archived"


def kebab(text: str) -> str:
    """
    Canonicalise a column name or tag to kebab-case.

    "Next week" → "next-week", "inProgress" → "in-progress", "to_do" → "to-do"
    """
    text = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", text.strip())
    text = re.sub(r"[\s_]+", "-", text)
    text = re.sub(r"-{2,}", "-", text)
    return text.strip("-").lower()


class ColumnTagTable:
    """
    Bidirectional map between kebab-case column tags and display names.

    Usage:
        table = ColumnTagTable.from_columns(["Later", "Next week"])
        table.column_for_tag("Next-Week")   # "Next week"
        table.tag_for_column("Next week")   # "next-week"
    """

    def __init__(self, columns: Optional[Mapping[str, str]] = None) -> None:
        self._by_tag: Dict[str, str] = {}
        self._by_column: Dict[str, str] = {}
        for tag, column in (columns or {}).items():
            key = kebab(tag)
            if key in self._by_tag:
                raise ValueError(f"Duplicate column tag '{key}'")
            self._by_tag[key] = column
            self._by_column[column] = key

    @classmethod
    def from_columns(cls, columns: Iterable[str]) -> ColumnTagTable:
        """Build the table from display names, deriving each tag with kebab()."""
        table = cls()
        for column in columns:
            key = kebab(column)
            if not key:
                raise ValueError(f"Column name '{column}' has no usable tag")
            if key in table._by_tag:
                raise ValueError(f"Duplicate column tag '{key}' (from '{column}')")
            table._by_tag[key] = column
            table._by_column[column] = key
        return table

    def column_for_tag(self, tag: str) -> Optional[str]:
        """Display name for a hashtag (without ``#``), or None if not a column."""
        return self._by_tag.get(kebab(tag))

    def tag_for_column(self, column: str) -> str:
        """Hashtag (without ``#``) for a display name; unknown names are kebab-cased."""
        if column in self._by_column:
            return self._by_column[column]
        return kebab(column)

    def resolve(self, name: str) -> Optional[str]:
        """Accept a display name or a tag and return the display name."""
        if name in self._by_column:
            return name
        return self.column_for_tag(name)

    @property
    def tags(self) -> List[str]:
        return list(self._by_tag)

    @property
    def columns(self) -> List[str]:
        return list(self._by_column)

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and kebab(tag) in self._by_tag

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_tag)

    def __len__(self) -> int:
        return len(self._by_tag)

    def __repr__(self) -> str:
        return f"ColumnTagTable({self._by_tag!r})"
