"""
Vault scanner.

Walks a directory tree for markdown files and parses their tracked tasks.
Each task's location is the file path relative to the scanned root, in
posix form, so it lines up with the folder scope settings.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional

from task_list_kanban.models.settings import BoardSettings
from task_list_kanban.models.task import Task
from task_list_kanban.parsers.task_parser import parse_content
from task_list_kanban.utils.folders import should_include_file_path

log = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def iter_markdown_files(root: Path) -> Iterator[Path]:
    """Yield markdown files under root in a stable order, skipping dot-directories."""
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
        for filename in sorted(filenames):
            if filename.endswith(MARKDOWN_SUFFIX):
                yield Path(dirpath) / filename


def scan_tasks(
    root: Path,
    settings: Optional[BoardSettings] = None,
    folder: Optional[str] = None,
) -> List[Task]:
    """
    Parse tracked tasks from every markdown file under root.

    Args:
        root: Vault root directory
        settings: Board settings (defaults if None)
        folder: Vault-relative folder to restrict to when scope is "folder"

    Returns:
        Tasks in file order, then line order
    """
    settings = settings or BoardSettings()
    filename_filter = folder if settings.scope == "folder" else None

    tasks: List[Task] = []
    files = 0
    for file_path in iter_markdown_files(root):
        relative = file_path.relative_to(root).as_posix()
        if not should_include_file_path(relative, filename_filter, settings.exclude_folders):
            continue
        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Skipping unreadable file %s: %s", file_path, e)
            continue
        tasks.extend(parse_content(content, relative, settings))
        files += 1

    log.info("Scanned %s: %d file(s), %d task(s)", root, files, len(tasks))
    return tasks
