from manifest_composer.manifests import (
    DEFAULT_SCOPE,
    DEV_SERVICES_PACKAGE,
    TYPESCRIPT_CONFIG_PACKAGE,
    WORKSPACE_TASKS,
    base_config_reference,
    build_tool_config,
    database_name,
    dev_services_compose,
    dev_services_manifest,
    dump_yaml,
    gitignore,
    package_manifest,
    runtime_app_manifest,
    runtime_app_type_check_config,
    scoped_name,
    task_runner_config,
    type_check_config,
    typescript_base_config,
    typescript_config_package,
    workspace_dependency,
    workspace_manifest,
    workspace_membership,
)
from manifest_composer.units import PackageKind, PackageUnit, realize_package_unit, unit_install_commands

__all__ = [
    "DEFAULT_SCOPE",
    "DEV_SERVICES_PACKAGE",
    "TYPESCRIPT_CONFIG_PACKAGE",
    "WORKSPACE_TASKS",
    "PackageKind",
    "PackageUnit",
    "base_config_reference",
    "build_tool_config",
    "database_name",
    "dev_services_compose",
    "dev_services_manifest",
    "dump_yaml",
    "gitignore",
    "package_manifest",
    "realize_package_unit",
    "runtime_app_manifest",
    "runtime_app_type_check_config",
    "scoped_name",
    "task_runner_config",
    "type_check_config",
    "typescript_base_config",
    "typescript_config_package",
    "unit_install_commands",
    "workspace_dependency",
    "workspace_manifest",
    "workspace_membership",
]
