"""Handler functions behind the REST API. Each returns a JSON-ready dict."""

import logging
from typing import Optional

from task_list_kanban.models.board import Board
from task_list_kanban.models.markers import validate_markers
from task_list_kanban.models.settings import BoardSettings
from task_list_kanban.models.task import Task
from task_list_kanban.parsers.task_parser import parse_content, parse_task_line

log = logging.getLogger(__name__)


class UntrackedLineError(ValueError):
    """The line is not a tracked task, so there is nothing to act on."""


def task_to_dict(task: Task) -> dict:
    """Serialize a Task to a JSON-serializable dict."""
    return {
        "id": task.id,
        "location": task.location,
        "row_index": task.row_index,
        "indentation": task.indentation,
        "status_marker": task.status_marker,
        "done": task.done,
        "content": task.content,
        "tags": sorted(task.tags),
        "column": task.column,
        "column_tag": task.column_tag,
        "block_link": task.block_link,
        "archived": task.archived,
        "consolidate_tags": task.consolidate_tags,
        "line": task.serialise(),
    }


def _parse(settings: BoardSettings, line: str, location: Optional[str] = None, row_index: int = 0) -> Optional[Task]:
    return parse_task_line(
        line,
        location=location,
        row_index=row_index,
        column_tags=settings.column_table(),
        consolidate_tags=settings.consolidate_tags,
        done_markers=settings.done_markers(),
        ignored_markers=settings.ignored_markers(),
    )


def _require_task(settings: BoardSettings, line: str) -> Task:
    task = _parse(settings, line)
    if task is None:
        raise UntrackedLineError(f"Not a tracked task line: {line!r}")
    return task


def handle_markers_validate(*, markers: str, kind: str = "done") -> dict:
    violations = validate_markers(markers, require_non_empty=(kind == "done"), kind=kind)
    return {
        "kind": kind,
        "markers": markers,
        "valid": not violations,
        "violations": violations,
    }


def handle_task_parse(
    settings: BoardSettings,
    *,
    line: str,
    location: Optional[str] = None,
    row_index: int = 0,
) -> dict:
    task = _parse(settings, line, location, row_index)
    if task is None:
        return {"tracked": False}
    return {"tracked": True, **task_to_dict(task)}


def handle_task_archive(settings: BoardSettings, *, line: str) -> dict:
    task = _require_task(settings, line)
    task.archive()
    log.info("Archived task: %s", task.content)
    return task_to_dict(task)


def handle_task_move(settings: BoardSettings, *, line: str, column: Optional[str]) -> dict:
    task = _require_task(settings, line)
    task.set_column(column)
    return task_to_dict(task)


def handle_board(settings: BoardSettings, *, content: str, location: Optional[str] = None) -> dict:
    board = Board.from_tasks(parse_content(content, location, settings), settings)
    return {
        "columns": [
            {
                "tag": column.tag,
                "title": column.title,
                "collapsed": column.collapsed,
                "tasks": [task_to_dict(t) for t in column.tasks],
            }
            for column in board.columns
        ]
    }
