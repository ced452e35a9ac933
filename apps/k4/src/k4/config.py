from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from k4.errors import ConfigError

CONFIG_ENV_VAR = "K4_CONFIG"
_PACKAGE_DIR = Path(__file__).resolve().parent


def defaults_path() -> Path:
    return _PACKAGE_DIR / "defaults.yaml"


def schema_path() -> Path:
    return _PACKAGE_DIR / "config_schema.json"


def templates_root() -> Path:
    return _PACKAGE_DIR / "templates"


@dataclass(frozen=True)
class GeneratorConfig:
    package_manager: str
    fallback_version: str
    scope: str
    apps_dir: str
    packages_dir: str
    task_runner: str
    task_runner_schema: str
    task_runner_ui: str
    workspace_dev_dependencies: tuple[str, ...]
    typescript_base: str
    framework_command: tuple[str, ...]

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> GeneratorConfig:
        pm = data["package_manager"]
        layout = data["layout"]
        runner = data["task_runner"]
        workspace = data["workspace"]
        return cls(
            package_manager=pm["command"],
            fallback_version=pm["fallback_version"],
            scope=data["scope"],
            apps_dir=layout["apps_dir"],
            packages_dir=layout["packages_dir"],
            task_runner=runner["name"],
            task_runner_schema=runner["schema"],
            task_runner_ui=runner["ui"],
            workspace_dev_dependencies=tuple(workspace["dev_dependencies"]),
            typescript_base=workspace["typescript_base"],
            framework_command=tuple(data["framework_scaffolder"]["command"]),
        )


def _load_yaml_mapping(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML in {path}: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(raw).__name__}.")
    return raw


def validate_config(data: Any) -> list[str]:
    schema = json.loads(schema_path().read_text(encoding="utf-8"))
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: str(e.path))
    formatted: list[str] = []
    for error in errors:
        path = "$"
        for part in error.path:
            path += f"[{part!r}]" if isinstance(part, int) else f".{part}"
        formatted.append(f"{path}: {error.message}")
    return formatted


def load_config(path: Path | None = None, *, environ: dict[str, str] | None = None) -> GeneratorConfig:
    """Load packaged defaults, then overlay `path` (or `$K4_CONFIG`) section by section."""
    env = os.environ if environ is None else environ
    if path is None:
        override = env.get(CONFIG_ENV_VAR, "").strip()
        if override:
            path = Path(override).expanduser()

    data = _load_yaml_mapping(defaults_path())
    if path is not None:
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        # Top-level sections replace the defaults wholesale.
        data = {**data, **_load_yaml_mapping(path)}

    errors = validate_config(data)
    if errors:
        source = path if path is not None else defaults_path()
        raise ConfigError(f"Invalid k4 config ({source}):\n" + "\n".join(f"- {e}" for e in errors), errors=errors)
    return GeneratorConfig.from_mapping(data)
