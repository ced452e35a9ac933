from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from workspace_fs import TemplateMaterializer, ensure_dir, write_file, write_json

from manifest_composer.manifests import (
    DEFAULT_SCOPE,
    build_tool_config,
    package_manifest,
    scoped_name,
    type_check_config,
)

PackageKind = Literal["library", "service-queue", "data-access"]


@dataclass(frozen=True)
class PackageUnit:
    name: str
    kind: PackageKind = "library"
    scope: str = DEFAULT_SCOPE
    # Relative path -> content, written after the template is materialized.
    files: dict[str, str] = field(default_factory=dict)
    # Overrides merged over the default build/check-types/dev scripts.
    scripts: dict[str, str] = field(default_factory=dict)
    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()
    template: str | None = None

    @property
    def manifest_name(self) -> str:
        return scoped_name(self.name, scope=self.scope)

    def manifest(self) -> dict[str, object]:
        return package_manifest(self.name, scope=self.scope, scripts=self.scripts)


def realize_package_unit(
    unit: PackageUnit,
    packages_dir: Path,
    *,
    materializer: TemplateMaterializer | None = None,
) -> Path:
    """Write `unit` to `packages_dir/<name>`: manifest, configs, template sources, then files.

    Dependency installation is not part of this step; see :func:`unit_install_commands`.
    """
    unit_dir = ensure_dir(packages_dir / unit.name)
    ensure_dir(unit_dir / "src")

    write_json(unit_dir / "package.json", unit.manifest())
    write_json(unit_dir / "tsconfig.json", type_check_config(scope=unit.scope))
    write_file(unit_dir / "tsup.config.ts", build_tool_config())

    if unit.template is not None:
        if materializer is None:
            raise ValueError(f"Package unit {unit.name!r} names template {unit.template!r} but no materializer given")
        materializer.materialize(unit.template, unit_dir)

    for rel_path, content in unit.files.items():
        write_file(unit_dir / rel_path, content)
    return unit_dir


def unit_install_commands(unit: PackageUnit, *, package_manager: str = "pnpm") -> list[list[str]]:
    commands: list[list[str]] = []
    if unit.dev_dependencies:
        commands.append([package_manager, "add", "-D", *unit.dev_dependencies])
    if unit.dependencies:
        commands.append([package_manager, "add", *unit.dependencies])
    return commands
