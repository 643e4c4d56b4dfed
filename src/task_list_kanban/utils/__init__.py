from .folders import is_path_excluded, is_path_inside_folder, normalize_path, should_include_file_path

__all__ = [
    "is_path_excluded",
    "is_path_inside_folder",
    "normalize_path",
    "should_include_file_path",
]
