from workspace_fs.files import (
    clear_directory,
    ensure_dir,
    exists,
    read_json,
    remove_git_directory,
    update_json,
    write_file,
    write_json,
)
from workspace_fs.templates import TemplateMaterializer

__all__ = [
    "TemplateMaterializer",
    "clear_directory",
    "ensure_dir",
    "exists",
    "read_json",
    "remove_git_directory",
    "update_json",
    "write_file",
    "write_json",
]
