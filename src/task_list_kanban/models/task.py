"""
Core task data model.

A Task is one tracked checklist line. Parsing lives in parsers.task_parser;
format_task here is its inverse. A task that was parsed and never changed
formats back to exactly the line it came from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Set

from task_list_kanban.models.columns import ARCHIVED_COLUMN, ColumnTagTable, kebab
from task_list_kanban.models.markers import (
    DEFAULT_DONE_MARKERS,
    DEFAULT_IGNORED_MARKERS,
    MarkerSet,
)

OPEN_STATUS_MARKER = " "


@dataclass(frozen=True)
class ColumnSplice:
    """Where the column hashtag sat in the parsed line, and what was cut out."""

    column: str
    content: str
    index: int
    text: str


@dataclass
class Task:
    """
    A single tracked task line.

    The line is rebuilt from these fields by format_task:
        indentation + "- [" + status_marker + "] " + content
        [+ " #" + column tag] [+ " ^" + block_link]
    """

    content: str
    status_marker: str = OPEN_STATUS_MARKER
    indentation: str = ""
    column: Optional[str] = None
    block_link: Optional[str] = None
    tags: Set[str] = field(default_factory=set)
    location: Optional[str] = None
    row_index: int = 0
    column_tags: ColumnTagTable = field(default_factory=ColumnTagTable)
    consolidate_tags: bool = False
    done_markers: MarkerSet = DEFAULT_DONE_MARKERS
    ignored_markers: MarkerSet = DEFAULT_IGNORED_MARKERS
    column_splice: Optional[ColumnSplice] = field(default=None, repr=False, compare=False)

    @property
    def id(self) -> str:
        """Task reference in 'location:row' format."""
        return f"{self.location or ''}:{self.row_index}"

    @property
    def done(self) -> bool:
        return self.status_marker in self.done_markers

    @done.setter
    def done(self, value: bool) -> None:
        if value:
            # Keep an existing done marker (x vs X, custom glyphs)
            if not self.done:
                self.status_marker = self.done_markers.first
        else:
            self.status_marker = OPEN_STATUS_MARKER

    @property
    def archived(self) -> bool:
        return self.column == ARCHIVED_COLUMN

    @property
    def column_tag(self) -> Optional[str]:
        """The hashtag (without ``#``) the current column is written as."""
        if self.column is None:
            return None
        if self.column == ARCHIVED_COLUMN:
            return ARCHIVED_COLUMN
        return self.column_tags.tag_for_column(self.column)

    def set_column(self, column: Optional[str]) -> None:
        """
        Move the task to another column.

        Accepts a display name, a column tag, the archived column or None.
        Only the column hashtag written by format_task changes.
        """
        if column is None or column == ARCHIVED_COLUMN:
            self.column = column
            return
        resolved = self.column_tags.resolve(column)
        if resolved is None:
            raise ValueError(f"Unknown column '{column}'")
        self.column = resolved

    def archive(self) -> None:
        """Mark the task done and move it to the archived column."""
        self.column = ARCHIVED_COLUMN
        self.done = True

    def serialise(self) -> str:
        return format_task(self)

    def __str__(self) -> str:
        """Format task as its markdown line."""
        return format_task(self)


# Formatting functions

def _append(body: str, token: str) -> str:
    return f"{body} {token}" if body else token


def format_task(task: Task) -> str:
    """
    Format a task back into its markdown line.

    If the column and content are what the parser produced, the column
    hashtag goes back where it was found, with its original spelling.
    Otherwise it is appended after the content.
    """
    body = task.content
    splice = task.column_splice
    if (
        splice is not None
        and splice.column == task.column
        and splice.content == task.content
    ):
        body = body[: splice.index] + splice.text + body[splice.index:]
    elif task.column is not None:
        body = _append(body, f"#{task.column_tag or kebab(task.column)}")

    if task.block_link:
        body = f"{body} ^{task.block_link}"

    return f"{task.indentation}- [{task.status_marker}] {body}"
