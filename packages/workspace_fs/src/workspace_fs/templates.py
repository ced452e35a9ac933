from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path


def _eprint(*args: object) -> None:
    print(*args, file=sys.stderr)


def _validate_template_id(template_id: str) -> None:
    if not template_id or template_id.strip() != template_id:
        raise ValueError(f"Invalid template id: {template_id!r}")
    if template_id in {".", ".."}:
        raise ValueError("Template id must not be '.' or '..'.")
    seps = {"/", "\\"}
    if os.path.sep:
        seps.add(os.path.sep)
    if os.path.altsep:
        seps.add(os.path.altsep)
    if any(sep in template_id for sep in seps):
        raise ValueError(f"Template id must not contain path separators: {template_id!r}")


class TemplateMaterializer:
    """Copies fixed template trees shipped under `templates_root` into unit directories."""

    def __init__(self, templates_root: Path) -> None:
        self.templates_root = templates_root

    def template_dir(self, template_id: str) -> Path:
        _validate_template_id(template_id)
        return self.templates_root / template_id

    def materialize(self, template_id: str, target_dir: Path) -> bool:
        """Merge-copy template `template_id` onto `target_dir`.

        Files from the template overwrite same-named files in the target; anything else already in
        the target is left alone. A missing template is reported and skipped without touching the
        filesystem. Returns whether a copy happened.
        """
        source_dir = self.template_dir(template_id)
        print(f"Template source: {source_dir}")
        print(f"Target: {target_dir}")

        if not source_dir.is_dir():
            _eprint(f"ERROR: Template directory not found: {source_dir}")
            return False

        target_dir.mkdir(parents=True, exist_ok=True)
        shutil.copytree(source_dir, target_dir, dirs_exist_ok=True)
        print(f"Materialized '{template_id}' template into {target_dir}")
        return True
