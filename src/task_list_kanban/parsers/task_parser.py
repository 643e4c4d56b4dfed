"""
Parser for tracked task lines.

Main API:
    is_tracked_task_line(line, ignored_markers)  → bool
    parse_task_line(line, ...)  → Optional[Task]
    parse_content(content, location, settings)  → List[Task]
    update_content(content, tasks)  → str

A tracked task line looks like ``<indent>- [<marker>] <body>``. The body is
split into content, an optional column hashtag and an optional trailing
``^block-id``. format_task (models.task) puts the pieces back together.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Set, Tuple, Union

from task_list_kanban.models.columns import ARCHIVED_COLUMN, ColumnTagTable, kebab
from task_list_kanban.models.markers import (
    DEFAULT_DONE_MARKERS,
    DEFAULT_IGNORED_MARKERS,
    MarkerSet,
    create_done_status_markers,
    create_ignored_status_markers,
)
from task_list_kanban.models.settings import BoardSettings
from task_list_kanban.models.task import ColumnSplice, Task, format_task

log = logging.getLogger(__name__)

MarkersArg = Union[MarkerSet, str, None]

# indent, bracket contents, body. "[" and "]" are never status markers, which
# keeps "- [[link]]" out; the required space after "]" keeps "- [x](url)" out.
_TASK_LINE = re.compile(r"^(\s*)- \[([^\[\]]+)\] (.*)$")

_BLOCK_LINK = re.compile(r" \^(\S+)$")

# Hashtags start the text or follow whitespace, so URL fragments are skipped.
_HASHTAG = re.compile(r"(?<!\S)#([\w/-]+)")

_WIKILINK = re.compile(r"\[\[.*?\]\]")


# ---------------------------------------------------------------------------
# Low-level parsers
# ---------------------------------------------------------------------------

def _done_markers(markers: MarkersArg) -> MarkerSet:
    if markers is None:
        return DEFAULT_DONE_MARKERS
    if isinstance(markers, MarkerSet):
        return markers
    return create_done_status_markers(markers)


def _ignored_markers(markers: MarkersArg) -> MarkerSet:
    if markers is None:
        return DEFAULT_IGNORED_MARKERS
    if isinstance(markers, MarkerSet):
        return markers
    return create_ignored_status_markers(markers)


def _mask_wikilinks(text: str) -> str:
    """Blank out [[...]] with equal-length spaces so positions stay aligned."""
    return _WIKILINK.sub(lambda m: " " * len(m.group()), text)


def split_block_link(body: str) -> Tuple[str, Optional[str]]:
    """Split a trailing `` ^block-id`` off a task body."""
    m = _BLOCK_LINK.search(body)
    if not m:
        return body, None
    return body[: m.start()], m.group(1)


def find_hashtags(text: str) -> List[Tuple[str, int, int]]:
    """Return (name, start, end) for every hashtag outside wiki-links."""
    return [(m.group(1), m.start(), m.end()) for m in _HASHTAG.finditer(_mask_wikilinks(text))]


def _resolve_column(tag: str, column_tags: ColumnTagTable) -> Optional[str]:
    # The archived sentinel shadows any configured column with the same tag
    if kebab(tag) == ARCHIVED_COLUMN:
        return ARCHIVED_COLUMN
    return column_tags.column_for_tag(tag)


def _cut_hashtag(text: str, start: int, end: int) -> Tuple[str, int, str]:
    """
    Remove text[start:end] together with one neighbouring space.

    The preceding space is taken when there is one, otherwise the following
    one. Returns (remaining text, cut position, removed text).
    """
    if start > 0 and text[start - 1] == " ":
        start -= 1
    elif end < len(text) and text[end] == " ":
        end += 1
    return text[:start] + text[end:], start, text[start:end]


def split_column(
    text: str, column_tags: ColumnTagTable
) -> Tuple[str, Optional[str], Set[str], Optional[ColumnSplice]]:
    """
    Pull the column hashtag out of a task body.

    The first hashtag naming a column wins; later column hashtags stay inline
    like any other tag.

    Returns:
        (content, column, tags, splice) where tags includes the column's tag
    """
    tags: Set[str] = set()
    column: Optional[str] = None
    cut: Optional[Tuple[int, int]] = None

    for name, start, end in find_hashtags(text):
        if column is None:
            resolved = _resolve_column(name, column_tags)
            if resolved is not None:
                column = resolved
                cut = (start, end)
                tags.add(kebab(name))
                continue
        tags.add(name)

    if cut is None:
        return text, None, tags, None

    content, index, removed = _cut_hashtag(text, *cut)
    return content, column, tags, ColumnSplice(column=column, content=content, index=index, text=removed)


def is_tracked_task_line(line: str, ignored_markers: MarkersArg = None) -> bool:
    """
    Decide whether a line is a task the board should track.

    Wiki-links (``- [[x]]``) and markdown links (``- [x](url)``) are not
    tasks. Neither is a task whose marker is in ``ignored_markers``.
    """
    stripped = line.lstrip()
    if stripped.startswith("- [["):
        return False

    m = _TASK_LINE.match(line)
    if not m:
        return False

    ignored = _ignored_markers(ignored_markers)
    if ignored and m.group(2) in ignored:
        log.debug("Ignoring task with marker %r: %s", m.group(2), line)
        return False
    return True


def parse_task_line(
    line: str,
    location: Optional[str] = None,
    row_index: int = 0,
    column_tags: Optional[ColumnTagTable] = None,
    consolidate_tags: bool = False,
    done_markers: MarkersArg = None,
    ignored_markers: MarkersArg = None,
) -> Optional[Task]:
    """
    Parse a single task line.

    Args:
        line: Markdown line (no line ending)
        location: Source file reference, stored on the task as-is
        row_index: Line offset within the source, stored as-is
        column_tags: Column table used to recognise the column hashtag
        consolidate_tags: Display hint, stored as-is
        done_markers: Done markers (MarkerSet or string; default "xX")
        ignored_markers: Ignored markers (MarkerSet or string; default none)

    Returns:
        Task, or None if the line is not a tracked task
    """
    done = _done_markers(done_markers)
    ignored = _ignored_markers(ignored_markers)
    if not is_tracked_task_line(line, ignored):
        return None

    m = _TASK_LINE.match(line)
    indentation, status_marker, body = m.group(1), m.group(2), m.group(3)
    table = column_tags if column_tags is not None else ColumnTagTable()

    body, block_link = split_block_link(body)
    content, column, tags, splice = split_column(body, table)

    return Task(
        content=content,
        status_marker=status_marker,
        indentation=indentation,
        column=column,
        block_link=block_link,
        tags=tags,
        location=location,
        row_index=row_index,
        column_tags=table,
        consolidate_tags=consolidate_tags,
        done_markers=done,
        ignored_markers=ignored,
        column_splice=splice,
    )


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

def _split_line_ending(line: str) -> Tuple[str, str]:
    if line.endswith("\r"):
        return line[:-1], "\r"
    return line, ""


def parse_content(
    content: str,
    location: Optional[str] = None,
    settings: Optional[BoardSettings] = None,
) -> List[Task]:
    """
    Parse every tracked task in a markdown document.

    Each task's row_index is its 0-based line number in ``content``.
    """
    settings = settings or BoardSettings()
    column_tags = settings.column_table()
    done = settings.done_markers()
    ignored = settings.ignored_markers()

    tasks: List[Task] = []
    for row_index, raw in enumerate(content.split("\n")):
        line, _ = _split_line_ending(raw)
        task = parse_task_line(
            line,
            location=location,
            row_index=row_index,
            column_tags=column_tags,
            consolidate_tags=settings.consolidate_tags,
            done_markers=done,
            ignored_markers=ignored,
        )
        if task is not None:
            tasks.append(task)

    log.debug("Parsed %d task(s) from %s", len(tasks), location or "<content>")
    return tasks


def update_content(content: str, tasks: Iterable[Task]) -> str:
    """
    Write tasks back into the document they were parsed from.

    Only the lines at each task's row_index are replaced; line endings and
    every other line are left untouched.
    """
    lines = content.split("\n")
    for task in tasks:
        if not 0 <= task.row_index < len(lines):
            raise IndexError(f"Task row {task.row_index} is outside the document ({len(lines)} lines)")
        _, ending = _split_line_ending(lines[task.row_index])
        lines[task.row_index] = format_task(task) + ending
    return "\n".join(lines)


def parse_file(file_path: Path, settings: Optional[BoardSettings] = None) -> List[Task]:
    """Parse all tracked tasks in a markdown file."""
    return parse_content(file_path.read_text(encoding="utf-8"), file_path.as_posix(), settings)


def write_tasks(file_path: Path, tasks: Iterable[Task]) -> None:
    """Rewrite the lines of ``tasks`` in a markdown file."""
    tasks = list(tasks)
    content = file_path.read_text(encoding="utf-8")
    file_path.write_text(update_content(content, tasks), encoding="utf-8")
    log.info("Wrote %d task(s) to %s", len(tasks), file_path)
