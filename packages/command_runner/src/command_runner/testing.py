"""Test-only utilities for command_runner.

:class:`RecordingRunner` never spawns a process. It records each call in order, which lets
orchestrator tests assert on the exact command sequence without touching a real package manager
or the network.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from command_runner.runner import CommandError

__all__ = [
    "RecordedCall",
    "RecordingRunner",
]


@dataclass(frozen=True)
class RecordedCall:
    argv: list[str]
    cwd: Path
    capture: bool


@dataclass
class RecordingRunner:
    """Deterministic fake for :class:`command_runner.CommandRunner`.

    Calls are keyed by their space-joined argv:

    - ``outputs`` maps a key to the stdout returned from ``run_capturing``.
    - ``failures`` maps a key to the exit code raised as :class:`CommandError`.
    - ``side_effects`` maps a key to a callback invoked with the call's cwd before it "succeeds",
      e.g. to emulate files an external scaffolder would create.
    """

    outputs: dict[str, str] = field(default_factory=dict)
    failures: dict[str, int] = field(default_factory=dict)
    side_effects: dict[str, Callable[[Path], None]] = field(default_factory=dict)
    calls: list[RecordedCall] = field(default_factory=list)

    def _record(self, argv: list[str], *, cwd: Path, capture: bool) -> str:
        key = " ".join(argv)
        self.calls.append(RecordedCall(argv=list(argv), cwd=cwd, capture=capture))
        if key in self.failures:
            raise CommandError(argv, self.failures[key], cwd=cwd)
        effect = self.side_effects.get(key)
        if effect is not None:
            effect(cwd)
        return key

    def run(self, argv: list[str], *, cwd: Path) -> None:
        self._record(argv, cwd=cwd, capture=False)

    def run_capturing(self, argv: list[str], *, cwd: Path) -> str:
        key = self._record(argv, cwd=cwd, capture=True)
        return self.outputs.get(key, "").strip()

    def commands(self) -> list[str]:
        return [" ".join(call.argv) for call in self.calls]
