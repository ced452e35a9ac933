from __future__ import annotations

import json
from pathlib import Path

import pytest

from workspace_fs import (
    clear_directory,
    ensure_dir,
    exists,
    read_json,
    remove_git_directory,
    update_json,
    write_file,
    write_json,
)


def test_ensure_dir_is_recursive_and_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "c"
    ensure_dir(target)
    (target / "keep.txt").write_text("x", encoding="utf-8")
    ensure_dir(target)
    assert (target / "keep.txt").read_text(encoding="utf-8") == "x"


def test_write_file_creates_parents_and_trims(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "dir" / "file.ts"
    write_file(path, "\n\n  export const x = 1;\n\n")
    assert path.read_text(encoding="utf-8") == "export const x = 1;"


def test_write_json_uses_two_space_indent(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    write_json(path, {"name": "demo", "scripts": {"build": "turbo run build"}})
    assert path.read_text(encoding="utf-8") == (
        '{\n  "name": "demo",\n  "scripts": {\n    "build": "turbo run build"\n  }\n}'
    )


@pytest.mark.parametrize(
    "value",
    [
        {"name": "@repo/db", "private": True, "exports": {".": {"types": "./src/index.ts"}}},
        ["apps/*", "packages/*"],
        {"unicode": "héllo", "nested": [1, 2.5, None, {"deep": False}]},
        "  padded string  ",
        42,
    ],
)
def test_json_round_trip(tmp_path: Path, value: object) -> None:
    path = tmp_path / "value.json"
    write_json(path, value)
    assert read_json(path) == value


def test_read_json_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="File not found"):
        read_json(tmp_path / "missing.json")


def test_update_json_is_a_shallow_merge(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    update_json(path, {"a": 1})
    update_json(path, {"b": 2})
    assert read_json(path) == {"a": 1, "b": 2}

    update_json(path, {"a": 3})
    assert read_json(path) == {"a": 3, "b": 2}

    update_json(path, {"n": {"x": 1}})
    update_json(path, {"n": {"y": 2}})
    assert read_json(path)["n"] == {"y": 2}


def test_update_json_preserves_existing_key_order(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    write_json(path, {"name": "x", "private": True})
    merged = update_json(path, {"name": "y", "type": "module"})
    assert list(merged) == ["name", "private", "type"]
    assert list(json.loads(path.read_text(encoding="utf-8"))) == ["name", "private", "type"]


@pytest.mark.parametrize(
    ("existing", "expected"),
    [
        ([1, 2], {"0": 1, "1": 2, "a": 1}),
        ("xy", {"0": "x", "1": "y", "a": 1}),
        (42, {"a": 1}),
        (None, {"a": 1}),
    ],
)
def test_update_json_merges_over_non_object_values(tmp_path: Path, existing: object, expected: dict) -> None:
    path = tmp_path / "value.json"
    write_json(path, existing)
    assert update_json(path, {"a": 1}) == expected
    assert read_json(path) == expected


def test_clear_directory_keeps_directory(tmp_path: Path) -> None:
    target = tmp_path / "target"
    (target / "sub" / "deeper").mkdir(parents=True)
    (target / "file.txt").write_text("x", encoding="utf-8")
    (target / "sub" / "deeper" / "f.txt").write_text("y", encoding="utf-8")

    clear_directory(target)

    assert target.is_dir()
    assert list(target.iterdir()) == []


def test_clear_directory_missing_is_noop(tmp_path: Path) -> None:
    target = tmp_path / "nope"
    clear_directory(target)
    assert not target.exists()


def test_exists_for_files_and_directories(tmp_path: Path) -> None:
    (tmp_path / "f.txt").write_text("x", encoding="utf-8")
    assert exists(tmp_path / "f.txt")
    assert exists(tmp_path)
    assert not exists(tmp_path / "missing")


def test_remove_git_directory(tmp_path: Path) -> None:
    app_dir = tmp_path / "web"
    (app_dir / ".git" / "objects").mkdir(parents=True)
    (app_dir / "package.json").write_text("{}", encoding="utf-8")

    assert remove_git_directory(app_dir) is True
    assert not (app_dir / ".git").exists()
    assert (app_dir / "package.json").exists()
    assert remove_git_directory(app_dir) is False
