from __future__ import annotations

import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Protocol, runtime_checkable

DEFAULT_FALLBACK_VERSION = "9.15.4"


def _eprint(*args: object) -> None:
    print(*args, file=sys.stderr)


class CommandError(RuntimeError):
    """An external command could not be started or exited nonzero."""

    def __init__(self, argv: list[str], returncode: int, *, cwd: Path, detail: str | None = None) -> None:
        msg = f"Command failed ({returncode}): {' '.join(argv)} (in {cwd})"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
        self.argv = list(argv)
        self.returncode = returncode
        self.cwd = cwd


@runtime_checkable
class CommandRunner(Protocol):
    """Blocking external-command execution.

    Orchestrators take a runner instead of calling `subprocess` directly so that tests can
    substitute a recording fake (see :mod:`command_runner.testing`).
    """

    def run(self, argv: list[str], *, cwd: Path) -> None:  # pragma: no cover
        raise NotImplementedError

    def run_capturing(self, argv: list[str], *, cwd: Path) -> str:  # pragma: no cover
        raise NotImplementedError


def resolve_argv(argv: list[str]) -> list[str]:
    """Resolve argv[0] via PATH for cross-platform execution.

    On Windows, package-manager entrypoints (`pnpm`, `npx`) are usually `.cmd` shims. `subprocess.run()` cannot
    execute `.cmd`/`.bat` files directly, so we invoke them via `cmd.exe /c`.
    """

    if not argv:
        raise ValueError("Internal error: empty argv")

    cmd = argv[0]
    if any(sep and sep in cmd for sep in ("/", "\\", os.path.sep, os.path.altsep)):
        return argv

    resolved = shutil.which(cmd)
    if resolved is None:
        return argv

    if os.name == "nt":
        suffix = Path(resolved).suffix.lower()
        if suffix in {".cmd", ".bat"}:
            comspec = os.environ.get("ComSpec", "cmd.exe")
            return [comspec, "/d", "/c", resolved, *argv[1:]]

    return [resolved, *argv[1:]]


class SubprocessRunner:
    """Runs commands with `subprocess.run`, failing fast on any nonzero exit."""

    def _spawn(self, argv: list[str], *, cwd: Path, capture: bool) -> subprocess.CompletedProcess[str]:
        if not Path(cwd).is_dir():
            raise FileNotFoundError(f"Working directory not found: {cwd}")
        resolved_argv = resolve_argv(argv)
        _eprint(f"+ ({cwd}) {' '.join(argv)}")
        try:
            cp = subprocess.run(
                resolved_argv,
                cwd=str(cwd),
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
                capture_output=capture,
            )
        except FileNotFoundError as exc:
            raise CommandError(argv, 127, cwd=cwd, detail=f"command not found: {Path(argv[0]).name!r}") from exc
        except OSError as exc:
            raise CommandError(argv, 126, cwd=cwd, detail=str(exc)) from exc

        if cp.returncode != 0:
            detail = None
            if capture:
                detail = (cp.stderr or "").strip() or (cp.stdout or "").strip() or None
            raise CommandError(argv, cp.returncode, cwd=cwd, detail=detail)
        return cp

    def run(self, argv: list[str], *, cwd: Path) -> None:
        self._spawn(argv, cwd=cwd, capture=False)

    def run_capturing(self, argv: list[str], *, cwd: Path) -> str:
        cp = self._spawn(argv, cwd=cwd, capture=True)
        return (cp.stdout or "").strip()


def detect_package_manager_version(
    runner: CommandRunner,
    *,
    command: str = "pnpm",
    cwd: Path,
    fallback: str = DEFAULT_FALLBACK_VERSION,
) -> str:
    """Return `<command> --version`, or `fallback` when the probe fails for any reason."""
    try:
        version = runner.run_capturing([command, "--version"], cwd=cwd).strip()
    except Exception:  # noqa: BLE001
        version = ""
    if not version:
        _eprint(f"WARNING: Could not determine {command} version. Using default.")
        return fallback
    return version
