from __future__ import annotations

import json
import shutil
from pathlib import Path
from typing import Any


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def exists(path: Path) -> bool:
    return path.exists()


def write_file(path: Path, content: str) -> None:
    """Write `content` with surrounding whitespace stripped, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content.strip(), encoding="utf-8")


def write_json(path: Path, data: Any) -> None:
    write_file(path, json.dumps(data, indent=2))


def read_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def _as_object(value: Any) -> dict[str, Any]:
    if isinstance(value, dict):
        return value
    if isinstance(value, (list, str)):
        return {str(idx): item for idx, item in enumerate(value)}
    return {}


def update_json(path: Path, new_data: dict[str, Any]) -> dict[str, Any]:
    """Shallow-merge `new_data` into the JSON value at `path`.

    Top-level keys in `new_data` replace existing values wholesale; nested objects are never
    merged. A missing file is treated as an empty object. An existing array or string contributes
    its elements under their index keys; any other scalar contributes nothing.
    """
    current = _as_object(read_json(path)) if path.exists() else {}
    merged = {**current, **new_data}
    write_json(path, merged)
    return merged


def clear_directory(path: Path) -> None:
    """Remove everything inside `path`, keeping the directory itself. No-op when missing."""
    if not path.is_dir():
        return
    for child in path.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()


def remove_git_directory(app_dir: Path) -> bool:
    git_dir = app_dir / ".git"
    if not git_dir.exists():
        return False
    print(f"Removing .git directory from {app_dir.name} app...")
    if git_dir.is_dir() and not git_dir.is_symlink():
        shutil.rmtree(git_dir)
    else:
        git_dir.unlink()
    return True
