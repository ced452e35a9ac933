"""`k4 app`: add an application unit to an existing workspace."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from command_runner import CommandRunner
from manifest_composer import (
    TYPESCRIPT_CONFIG_PACKAGE,
    build_tool_config,
    runtime_app_manifest,
    runtime_app_type_check_config,
    workspace_dependency,
)
from workspace_fs import ensure_dir, remove_git_directory, write_file, write_json

from k4.config import GeneratorConfig
from k4.errors import K4Error
from k4.naming import validate_simple_name
from k4.prompt import VARIANT_CHOICES, AppVariant, select_variant

APP_STATES: tuple[str, ...] = (
    "variant-resolved",
    "directory-created",
    "variant-scaffolded",
    "complete",
)

GREETING_SOURCE = 'console.log("Hello, World!");'


@dataclass(frozen=True)
class AppUnit:
    name: str
    variant: AppVariant
    directory: Path


def _format_with_context(template: str, context: dict[str, str]) -> str:
    try:
        return template.format_map(context)
    except KeyError as exc:
        raise K4Error(f"Unknown placeholder in framework scaffolder command: {exc}") from exc


class AppOrchestrator:
    def __init__(
        self,
        *,
        runner: CommandRunner,
        config: GeneratorConfig,
        prompt: Callable[[], AppVariant] = select_variant,
    ) -> None:
        self.runner = runner
        self.config = config
        self.prompt = prompt
        self.history: list[str] = []

    def create(self, name: str, variant: AppVariant | None = None, *, workspace_root: Path) -> AppUnit:
        validate_simple_name(name, what="App name")
        self.history = []

        if variant is None:
            variant = self.prompt()
        if variant not in {value for _, value in VARIANT_CHOICES}:
            raise K4Error(f"Unknown app type: {variant!r}")
        self.history.append("variant-resolved")

        rel_dir = Path(self.config.apps_dir) / name
        app_dir = workspace_root / rel_dir
        if app_dir.exists() and (not app_dir.is_dir() or any(app_dir.iterdir())):
            raise K4Error(f"Destination already exists and is not empty: {rel_dir.as_posix()}")
        ensure_dir(app_dir)
        self.history.append("directory-created")

        if variant == "next":
            self._scaffold_framework_app(name, rel_dir=rel_dir, app_dir=app_dir, workspace_root=workspace_root)
        else:
            self._scaffold_runtime_app(name, app_dir=app_dir)
        self.history.append("variant-scaffolded")

        self.history.append("complete")
        print(f"App {name} initialized successfully!")
        return AppUnit(name=name, variant=variant, directory=app_dir)

    def _scaffold_framework_app(self, name: str, *, rel_dir: Path, app_dir: Path, workspace_root: Path) -> None:
        cfg = self.config
        context = {"app_dir": rel_dir.as_posix(), "name": name}
        argv = [_format_with_context(arg, context) for arg in cfg.framework_command]
        self.runner.run(argv, cwd=workspace_root)

        # The scaffolder initialises its own repository; members live in the workspace's.
        remove_git_directory(app_dir)

        print(f"Installing {cfg.scope}/db package...")
        self.runner.run([cfg.package_manager, "add", workspace_dependency("db", scope=cfg.scope)], cwd=app_dir)

    def _scaffold_runtime_app(self, name: str, *, app_dir: Path) -> None:
        cfg = self.config
        pm = cfg.package_manager

        write_json(app_dir / "package.json", runtime_app_manifest(name, scope=cfg.scope, package_manager=pm))
        write_file(app_dir / "tsup.config.ts", build_tool_config(clean=False))
        write_json(app_dir / "tsconfig.json", runtime_app_type_check_config(scope=cfg.scope))
        write_file(app_dir / "src" / "index.ts", GREETING_SOURCE)

        print("Installing dependencies for the Node.js app...")
        self.runner.run([pm, "add", workspace_dependency(TYPESCRIPT_CONFIG_PACKAGE, scope=cfg.scope)], cwd=app_dir)
        self.runner.run([pm, "add", "-D", "tsup", "typescript"], cwd=app_dir)
