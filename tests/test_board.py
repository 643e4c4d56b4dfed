"""
Tests for models/board.py.

Covers:
- Grouping tasks into default and configured columns
- Collapsed columns and prevent_uncategorized
- Moving tasks between columns
"""

import sys
from pathlib import Path

# Add src to path so imports work without installation
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from task_list_kanban.models.board import DONE, UNCATEGORISED, Board
from task_list_kanban.models.settings import BoardSettings
from task_list_kanban.parsers.task_parser import parse_content

SETTINGS = BoardSettings(columns=["Later", "Next week"])

DOCUMENT = """\
# Tasks

- [ ] Loose task
- [ ] Plan trip #later
- [ ] Book hotel #next-week ^hotel
- [x] Pay bills #later
- [x] Old thing #archived
- [[Not a task]]
"""


def _board(settings=SETTINGS, content=DOCUMENT):
    tasks = parse_content(content, "TODO.md", settings)
    return tasks, Board.from_tasks(tasks, settings)


def _contents(board, tag):
    return [task.content for task in board.column(tag).tasks]


# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------

class TestFromTasks:
    def test_column_order(self):
        _, board = _board()
        assert board.tags == [UNCATEGORISED, "later", "next-week", DONE]
        assert [c.title for c in board.columns] == ["Uncategorised", "Later", "Next week", "Done"]

    def test_grouping(self):
        _, board = _board()
        assert _contents(board, UNCATEGORISED) == ["Loose task"]
        assert _contents(board, "later") == ["Plan trip"]
        assert _contents(board, "next-week") == ["Book hotel"]
        assert _contents(board, DONE) == ["Pay bills"]

    def test_archived_tasks_hidden(self):
        tasks, board = _board()
        assert len(tasks) == 5
        assert len(board.all_tasks()) == 4
        assert "Old thing" not in [t.content for t in board.all_tasks()]

    def test_prevent_uncategorized(self):
        settings = BoardSettings(columns=["Later", "Next week"], prevent_uncategorized=True)
        _, board = _board(settings)
        assert UNCATEGORISED not in board.tags
        assert board.column(UNCATEGORISED) is None
        assert "Loose task" not in [t.content for t in board.all_tasks()]

    def test_collapsed_columns(self):
        settings = BoardSettings(columns=["Later", "Next week"], collapsed_columns=["later", DONE])
        _, board = _board(settings)
        assert board.column("later").collapsed is True
        assert board.column(DONE).collapsed is True
        assert board.column("next-week").collapsed is False
        assert board.is_collapsed(DONE)
        assert not board.is_collapsed(UNCATEGORISED)

    def test_column_for(self):
        tasks, _ = _board()
        assert [Board.column_for(t) for t in tasks] == [
            UNCATEGORISED, "later", "next-week", DONE, "archived",
        ]

    def test_as_dict(self):
        _, board = _board()
        grouped = board.as_dict()
        assert list(grouped) == board.tags
        assert [t.content for t in grouped["later"]] == ["Plan trip"]

    def test_unknown_column_missing(self):
        _, board = _board()
        assert board.column("someday") is None


# ---------------------------------------------------------------------------
# move_task
# ---------------------------------------------------------------------------

class TestMoveTask:
    def _task(self, board, content):
        return next(t for t in board.all_tasks() if t.content == content)

    def test_move_to_configured_column(self):
        _, board = _board()
        task = self._task(board, "Plan trip")
        board.move_task(task, "next-week")
        assert task.column == "Next week"
        assert _contents(board, "later") == []
        assert _contents(board, "next-week") == ["Book hotel", "Plan trip"]
        assert task.serialise() == "- [ ] Plan trip #next-week"

    def test_move_to_done_keeps_column(self):
        _, board = _board()
        task = self._task(board, "Book hotel")
        board.move_task(task, DONE)
        assert task.done is True
        assert task.column == "Next week"
        assert _contents(board, DONE) == ["Pay bills", "Book hotel"]
        assert task.serialise() == "- [x] Book hotel #next-week ^hotel"

    def test_move_out_of_done_reopens(self):
        _, board = _board()
        task = self._task(board, "Pay bills")
        board.move_task(task, "later")
        assert task.done is False
        assert _contents(board, "later") == ["Plan trip", "Pay bills"]
        assert task.serialise() == "- [ ] Pay bills #later"

    def test_move_to_uncategorised(self):
        _, board = _board()
        task = self._task(board, "Plan trip")
        board.move_task(task, UNCATEGORISED)
        assert task.column is None
        assert _contents(board, UNCATEGORISED) == ["Loose task", "Plan trip"]
        assert task.serialise() == "- [ ] Plan trip"

    def test_unknown_column(self):
        _, board = _board()
        task = self._task(board, "Plan trip")
        with pytest.raises(ValueError, match="Unknown column 'someday'"):
            board.move_task(task, "someday")
        assert task.column == "Later"
        assert _contents(board, "later") == ["Plan trip"]
