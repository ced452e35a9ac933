from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Literal, TextIO

from k4.errors import K4Error

AppVariant = Literal["next", "node"]

VARIANT_CHOICES: tuple[tuple[str, AppVariant], ...] = (
    ("Next.js", "next"),
    ("Node.js", "node"),
)


def select_variant(
    *,
    input_fn: Callable[[str], str] = input,
    output: TextIO | None = None,
) -> AppVariant:
    """Ask which kind of app to create. Accepts a list number or the variant value."""
    out = output or sys.stdout
    print("What type of app do you want to create?", file=out)
    for idx, (label, value) in enumerate(VARIANT_CHOICES, start=1):
        print(f"  {idx}) {label} [{value}]", file=out)

    while True:
        try:
            answer = input_fn("  Enter number: ").strip().lower()
        except EOFError as exc:
            raise K4Error("No app type selected.") from exc
        if answer.isdigit() and 1 <= int(answer) <= len(VARIANT_CHOICES):
            return VARIANT_CHOICES[int(answer) - 1][1]
        for label, value in VARIANT_CHOICES:
            if answer in {value, label.lower()}:
                return value
        print("  Invalid choice. Please try again.", file=out)
