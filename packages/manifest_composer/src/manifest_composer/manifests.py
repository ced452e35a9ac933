"""Builders for the manifests and config files of a pnpm/turborepo workspace.

Every function here is pure: it returns plain data (or text) and leaves serialization to the
caller. JSON documents go through :func:`workspace_fs.write_json`; YAML documents are rendered with
:func:`dump_yaml`.
"""

from __future__ import annotations

from typing import Any

import yaml

DEFAULT_SCOPE = "@repo"
WORKSPACE_TASKS: tuple[str, ...] = ("build", "dev", "lint", "check-types", "test")
TYPESCRIPT_CONFIG_PACKAGE = "typescript-config"
DEV_SERVICES_PACKAGE = "docker-dev"
BASE_CONFIG_PATH = "base.json"


def dump_yaml(data: Any) -> str:
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False, allow_unicode=True)


def scoped_name(name: str, *, scope: str = DEFAULT_SCOPE) -> str:
    return f"{scope}/{name}"


def workspace_dependency(name: str, *, scope: str = DEFAULT_SCOPE) -> str:
    return f"{scoped_name(name, scope=scope)}@workspace:*"


def base_config_reference(*, scope: str = DEFAULT_SCOPE) -> str:
    return f"{scoped_name(TYPESCRIPT_CONFIG_PACKAGE, scope=scope)}/{BASE_CONFIG_PATH}"


def database_name(workspace_name: str) -> str:
    return workspace_name.replace("-", "_") + "_dev"


def workspace_membership(*, apps_dir: str = "apps", packages_dir: str = "packages") -> dict[str, Any]:
    return {"packages": [f"{apps_dir}/*", f"{packages_dir}/*"]}


def workspace_manifest(
    name: str,
    *,
    package_manager: str,
    package_manager_version: str,
    task_runner: str = "turbo",
) -> dict[str, Any]:
    return {
        "name": name,
        "private": True,
        "packageManager": f"{package_manager}@{package_manager_version}",
        "scripts": {task: f"{task_runner} run {task}" for task in WORKSPACE_TASKS},
        "devDependencies": {task_runner: "latest"},
    }


def task_runner_config(*, schema: str, ui: str) -> dict[str, Any]:
    return {
        "$schema": schema,
        "ui": ui,
        "tasks": {
            "build": {
                "dependsOn": ["^build"],
                "inputs": ["$TURBO_DEFAULT$", ".env*"],
                "outputs": [".next/**", "!.next/cache/**", "dist/**"],
            },
            "check-types": {"dependsOn": ["^check-types"]},
            "dev": {"cache": False, "persistent": True},
            "test": {"cache": False, "persistent": True},
        },
    }


def package_manifest(
    name: str,
    *,
    scope: str = DEFAULT_SCOPE,
    scripts: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Manifest for a library member of the packages group; `scripts` override the defaults."""
    return {
        "name": scoped_name(name, scope=scope),
        "private": True,
        "type": "module",
        "exports": {
            ".": {
                "types": "./src/index.ts",
                "default": "./dist/index.js",
            },
        },
        "scripts": {
            "build": "tsup --clean",
            "check-types": "tsc --noEmit",
            "dev": "tsup --watch",
            **(scripts or {}),
        },
    }


def type_check_config(*, scope: str = DEFAULT_SCOPE, out_dir: str = "./dist") -> dict[str, Any]:
    return {
        "extends": base_config_reference(scope=scope),
        "compilerOptions": {"outDir": out_dir},
        "include": ["src/**/*"],
        "exclude": ["node_modules"],
    }


def typescript_config_package(*, scope: str = DEFAULT_SCOPE) -> dict[str, Any]:
    return {
        "name": scoped_name(TYPESCRIPT_CONFIG_PACKAGE, scope=scope),
        "version": "1.0.0",
        "private": True,
        "license": "MIT",
        "publishConfig": {"access": "public"},
    }


def typescript_base_config(*, extends: str = "@tsconfig/node20/tsconfig.json") -> dict[str, Any]:
    return {
        "$schema": "https://json.schemastore.org/tsconfig",
        "extends": extends,
        "compilerOptions": {
            "module": "ESNext",
            "moduleResolution": "Bundler",
        },
    }


def dev_services_manifest(*, scope: str = DEFAULT_SCOPE) -> dict[str, Any]:
    return {
        "name": scoped_name(DEV_SERVICES_PACKAGE, scope=scope),
        "private": True,
        "scripts": {
            "dev": "docker compose up",
            "db:reset": "docker compose rm --force --stop postgres && docker compose up -d",
        },
        "devDependencies": {"typescript": "^5.5.4"},
    }


def dev_services_compose(workspace_name: str) -> dict[str, Any]:
    """Local Postgres + Redis services; the database is named after the workspace."""
    return {
        "services": {
            "postgres": {
                "image": "postgres:16",
                "environment": {
                    "POSTGRES_USER": "postgres",
                    "POSTGRES_PASSWORD": "postgres",
                    "POSTGRES_DB": database_name(workspace_name),
                },
                "ports": ["5432:5432"],
                "volumes": ["/var/lib/postgresql/data"],
            },
            "redis": {
                "image": "redis:6.2-alpine",
                "ports": ["6379:6379"],
            },
        },
    }


def runtime_app_manifest(name: str, *, scope: str = DEFAULT_SCOPE, package_manager: str = "pnpm") -> dict[str, Any]:
    return {
        "name": scoped_name(name, scope=scope),
        "private": True,
        "type": "module",
        "scripts": {
            "build": "tsup --clean",
            "check-types": "tsc --noEmit",
            "dev": f"tsup --watch --onSuccess '{package_manager} start'",
            "start": "node dist/index.js",
        },
    }


def runtime_app_type_check_config(*, scope: str = DEFAULT_SCOPE) -> dict[str, Any]:
    return {"extends": base_config_reference(scope=scope)}


def build_tool_config(*, clean: bool = True) -> str:
    lines = [
        'import { defineConfig } from "tsup";',
        "",
        "export default defineConfig({",
        '  entry: ["src/index.ts"],',
        '  format: ["esm"],',
        "  splitting: false,",
        "  sourcemap: true,",
    ]
    if clean:
        lines.append("  clean: true,")
    lines.append("});")
    return "\n".join(lines) + "\n"


def gitignore() -> str:
    return """
# Dependencies
node_modules

# Builds
.next/
dist/

# Misc
.DS_Store
*.pem

# Debug
npm-debug.log*
yarn-debug.log*
yarn-error.log*

# Local env files
.env*.local

# Turbo
.turbo
"""
