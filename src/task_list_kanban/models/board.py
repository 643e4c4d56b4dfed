"""
Board data model.

Tasks are grouped into columns by tag. Besides the configured columns the
board always has two default columns:

- ``uncategorised``: tasks without a column hashtag (hidden when
  prevent_uncategorized is set)
- ``done``: completed tasks, whatever their column hashtag

Archived tasks stay in their files but are not shown on the board.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from task_list_kanban.models.settings import BoardSettings
from task_list_kanban.models.task import Task

UNCATEGORISED = "uncategorised"
DONE = "done"


@dataclass
class BoardColumn:
    """One column of the board and the tasks currently in it."""

    tag: str
    title: str
    tasks: List[Task] = field(default_factory=list)
    collapsed: bool = False


@dataclass
class Board:
    columns: List[BoardColumn] = field(default_factory=list)
    settings: BoardSettings = field(default_factory=BoardSettings)

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task], settings: BoardSettings) -> Board:
        collapsed = settings.collapsed_column_tags()
        table = settings.column_table()

        columns: List[BoardColumn] = []
        if not settings.prevent_uncategorized:
            columns.append(BoardColumn(UNCATEGORISED, "Uncategorised"))
        for column in settings.columns:
            columns.append(BoardColumn(table.tag_for_column(column), column))
        columns.append(BoardColumn(DONE, "Done"))
        for column in columns:
            column.collapsed = column.tag in collapsed

        board = cls(columns=columns, settings=settings)
        for task in tasks:
            if task.archived:
                continue
            target = board.column(board.column_for(task))
            if target is not None:
                target.tasks.append(task)
        return board

    @staticmethod
    def column_for(task: Task) -> str:
        """Tag of the column a task belongs in (archived tasks return 'archived')."""
        if task.archived:
            return task.column_tag
        if task.done:
            return DONE
        if task.column is not None:
            return task.column_tag
        return UNCATEGORISED

    @property
    def tags(self) -> List[str]:
        return [column.tag for column in self.columns]

    def column(self, tag: str) -> Optional[BoardColumn]:
        for column in self.columns:
            if column.tag == tag:
                return column
        return None

    def is_collapsed(self, tag: str) -> bool:
        """Default columns can be collapsed like configured ones."""
        return tag in self.settings.collapsed_column_tags()

    def all_tasks(self) -> List[Task]:
        return [task for column in self.columns for task in column.tasks]

    def as_dict(self) -> Dict[str, List[Task]]:
        return {column.tag: list(column.tasks) for column in self.columns}

    def move_task(self, task: Task, tag: str) -> None:
        """
        Move a task to the column with the given tag.

        ``done`` marks the task done and keeps its column hashtag.
        ``uncategorised`` clears the column; any configured column sets it.
        Both un-do a completed task.
        """
        if tag == DONE:
            task.done = True
        elif tag == UNCATEGORISED:
            task.column = None
            task.done = False
        else:
            column = self.settings.column_table().column_for_tag(tag)
            if column is None:
                raise ValueError(f"Unknown column '{tag}'")
            task.column = column
            task.done = False

        for column in self.columns:
            column.tasks = [t for t in column.tasks if t is not task]
        target = self.column(self.column_for(task))
        if target is not None and not task.archived:
            target.tasks.append(task)
