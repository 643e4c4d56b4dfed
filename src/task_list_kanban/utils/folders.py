"""
Folder scope checks for vault-relative paths.

Paths are compared as normalised posix strings: backslashes become slashes,
repeated slashes collapse, and leading/trailing slashes are dropped.
"""

import re
from typing import Iterable, Optional


def normalize_path(path: str) -> str:
    path = path.replace("\\", "/")
    path = re.sub(r"/+", "/", path)
    return path.strip("/")


def is_path_inside_folder(file_path: str, folder_path: str) -> bool:
    """
    True if file_path is folder_path itself or lies anywhere beneath it.

    An empty folder is no scope at all; "." and "/" contain everything.
    """
    if not folder_path:
        return False
    if folder_path.strip() in (".", "/"):
        return True

    file_norm = normalize_path(file_path)
    folder_norm = normalize_path(folder_path)
    if folder_norm in ("", "."):
        return True
    if file_norm == folder_norm:
        return True
    # Trailing slash so "notes" doesn't match "notes-archive/..."
    return file_norm.startswith(f"{folder_norm}/")


def is_path_excluded(file_path: str, exclude_folders: Optional[Iterable[str]]) -> bool:
    if not exclude_folders:
        return False
    return any(is_path_inside_folder(file_path, folder) for folder in exclude_folders)


def should_include_file_path(
    file_path: str,
    filename_filter: Optional[str] = None,
    exclude_folders: Optional[Iterable[str]] = None,
) -> bool:
    """Apply the board's folder scope, then its exclusions."""
    if filename_filter and not is_path_inside_folder(file_path, filename_filter):
        return False
    if is_path_excluded(file_path, exclude_folders):
        return False
    return True
