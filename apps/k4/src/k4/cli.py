from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from command_runner import CommandError, CommandRunner, SubprocessRunner
from workspace_fs import TemplateMaterializer

from k4 import __version__
from k4.apps import AppOrchestrator
from k4.config import load_config, templates_root
from k4.errors import K4Error
from k4.workspace import WorkspaceOrchestrator


def _eprint(*args: object) -> None:
    print(*args, file=sys.stderr)


def _cmd_init(args: argparse.Namespace, *, runner: CommandRunner, cwd: Path) -> int:
    orchestrator = WorkspaceOrchestrator(
        runner=runner,
        config=load_config(),
        materializer=TemplateMaterializer(templates_root()),
    )
    orchestrator.init(args.name, base_dir=cwd)
    return 0


def _cmd_app(args: argparse.Namespace, *, runner: CommandRunner, cwd: Path) -> int:
    orchestrator = AppOrchestrator(runner=runner, config=load_config())
    orchestrator.create(args.name, args.variant, workspace_root=cwd)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="k4",
        description="CLI to bootstrap and manage pnpm/turborepo monorepos",
    )
    parser.add_argument("--version", action="version", version=f"k4 {__version__}")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_init = sub.add_parser("init", help="Initialize a new monorepo")
    p_init.add_argument("name")
    p_init.set_defaults(func=_cmd_init)

    p_app = sub.add_parser("app", help="Initialize a new app in the monorepo")
    p_app.add_argument("name")
    variant = p_app.add_mutually_exclusive_group()
    variant.add_argument(
        "--next",
        "--framework",
        dest="variant",
        action="store_const",
        const="next",
        help="Create a Next.js app",
    )
    variant.add_argument(
        "--node",
        "--runtime",
        dest="variant",
        action="store_const",
        const="node",
        help="Create a Node.js app",
    )
    p_app.set_defaults(func=_cmd_app, variant=None)
    return parser


def main(
    argv: list[str] | None = None,
    *,
    runner: CommandRunner | None = None,
    cwd: Path | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args, runner=runner or SubprocessRunner(), cwd=cwd or Path.cwd()))
    except CommandError as exc:
        _eprint(f"ERROR: {exc}")
        return exc.returncode or 1
    except K4Error as exc:
        _eprint(f"ERROR: {exc}")
        return 2
    except (FileNotFoundError, json.JSONDecodeError) as exc:
        _eprint(f"ERROR: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
