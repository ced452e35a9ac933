from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from manifest_composer import (
    PackageUnit,
    database_name,
    dev_services_compose,
    dump_yaml,
    package_manifest,
    realize_package_unit,
    runtime_app_manifest,
    task_runner_config,
    type_check_config,
    unit_install_commands,
    workspace_dependency,
    workspace_manifest,
    workspace_membership,
)
from workspace_fs import TemplateMaterializer


def test_workspace_manifest_shape() -> None:
    manifest = workspace_manifest("demo", package_manager="pnpm", package_manager_version="9.7.0")
    assert manifest == {
        "name": "demo",
        "private": True,
        "packageManager": "pnpm@9.7.0",
        "scripts": {
            "build": "turbo run build",
            "dev": "turbo run dev",
            "lint": "turbo run lint",
            "check-types": "turbo run check-types",
            "test": "turbo run test",
        },
        "devDependencies": {"turbo": "latest"},
    }


def test_task_runner_config_pipeline() -> None:
    config = task_runner_config(schema="https://turbo.build/schema.json", ui="tui")
    assert list(config) == ["$schema", "ui", "tasks"]
    assert config["tasks"]["build"]["dependsOn"] == ["^build"]
    assert config["tasks"]["check-types"] == {"dependsOn": ["^check-types"]}
    assert config["tasks"]["dev"] == {"cache": False, "persistent": True}
    assert config["tasks"]["test"] == {"cache": False, "persistent": True}


def test_package_manifest_overrides_replace_defaults() -> None:
    manifest = package_manifest("db", scripts={"build": "pnpm build:prisma && tsup --clean", "push": "prisma db push"})
    assert manifest["name"] == "@repo/db"
    assert manifest["type"] == "module"
    assert manifest["exports"] == {".": {"types": "./src/index.ts", "default": "./dist/index.js"}}
    assert manifest["scripts"] == {
        "build": "pnpm build:prisma && tsup --clean",
        "check-types": "tsc --noEmit",
        "dev": "tsup --watch",
        "push": "prisma db push",
    }


def test_type_check_config_extends_shared_base() -> None:
    assert type_check_config(scope="@acme") == {
        "extends": "@acme/typescript-config/base.json",
        "compilerOptions": {"outDir": "./dist"},
        "include": ["src/**/*"],
        "exclude": ["node_modules"],
    }


def test_workspace_membership_yaml() -> None:
    text = dump_yaml(workspace_membership())
    assert yaml.safe_load(text) == {"packages": ["apps/*", "packages/*"]}
    assert text.startswith("packages:")


@pytest.mark.parametrize(
    ("workspace", "expected"),
    [("demo", "demo_dev"), ("my-cool-app", "my_cool_app_dev")],
)
def test_database_name_replaces_hyphens(workspace: str, expected: str) -> None:
    assert database_name(workspace) == expected


def test_dev_services_compose_round_trips_through_yaml() -> None:
    compose = yaml.safe_load(dump_yaml(dev_services_compose("my-app")))
    postgres = compose["services"]["postgres"]
    assert postgres["environment"]["POSTGRES_DB"] == "my_app_dev"
    assert postgres["ports"] == ["5432:5432"]
    assert compose["services"]["redis"]["ports"] == ["6379:6379"]


def test_runtime_app_manifest_dev_hook() -> None:
    manifest = runtime_app_manifest("worker")
    assert manifest["name"] == "@repo/worker"
    assert manifest["scripts"]["dev"] == "tsup --watch --onSuccess 'pnpm start'"
    assert manifest["scripts"]["start"] == "node dist/index.js"
    assert "exports" not in manifest


def test_workspace_dependency_spec() -> None:
    assert workspace_dependency("typescript-config") == "@repo/typescript-config@workspace:*"


def test_unit_install_commands_dev_then_runtime() -> None:
    unit = PackageUnit(
        name="queue",
        kind="service-queue",
        dependencies=("bullmq", "ioredis"),
        dev_dependencies=("tsup", "typescript"),
    )
    assert unit_install_commands(unit) == [
        ["pnpm", "add", "-D", "tsup", "typescript"],
        ["pnpm", "add", "bullmq", "ioredis"],
    ]
    assert unit_install_commands(PackageUnit(name="empty")) == []


def test_realize_package_unit_writes_manifest_configs_and_files(tmp_path: Path) -> None:
    templates = tmp_path / "templates"
    (templates / "queue" / "src").mkdir(parents=True)
    (templates / "queue" / "src" / "index.ts").write_text("export const QUEUE_NAME = 'queue';\n", encoding="utf-8")

    unit = PackageUnit(
        name="queue",
        kind="service-queue",
        template="queue",
        files={"src/extra.ts": "\nexport const extra = true;\n"},
    )
    unit_dir = realize_package_unit(unit, tmp_path / "packages", materializer=TemplateMaterializer(templates))

    assert unit_dir == tmp_path / "packages" / "queue"
    manifest = json.loads((unit_dir / "package.json").read_text(encoding="utf-8"))
    assert manifest["name"] == "@repo/queue"
    tsconfig = json.loads((unit_dir / "tsconfig.json").read_text(encoding="utf-8"))
    assert tsconfig["extends"] == "@repo/typescript-config/base.json"
    assert "defineConfig" in (unit_dir / "tsup.config.ts").read_text(encoding="utf-8")
    assert (unit_dir / "src" / "index.ts").read_text(encoding="utf-8").startswith("export const QUEUE_NAME")
    assert (unit_dir / "src" / "extra.ts").read_text(encoding="utf-8") == "export const extra = true;"


def test_realize_package_unit_requires_materializer_for_templates(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="no materializer"):
        realize_package_unit(PackageUnit(name="db", template="db"), tmp_path)
