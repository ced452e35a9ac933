from __future__ import annotations

import os

from k4.errors import K4Error


def validate_simple_name(name: str, *, what: str = "Name") -> None:
    """Reject names that would not land as a single directory under the target."""
    if not name:
        raise K4Error(f"{what} must not be empty.")
    if name.strip() != name:
        raise K4Error(f"{what} must not have leading/trailing whitespace.")
    if name in {".", ".."}:
        raise K4Error(f"{what} must not be '.' or '..'.")
    if "\x00" in name:
        raise K4Error(f"{what} must not contain NUL bytes.")

    seps = {"/", "\\"}
    if os.path.sep:
        seps.add(os.path.sep)
    if os.path.altsep:
        seps.add(os.path.altsep)
    if any(sep in name for sep in seps):
        raise K4Error(f"{what} must not contain path separators.")
