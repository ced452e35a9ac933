from command_runner.runner import (
    DEFAULT_FALLBACK_VERSION,
    CommandError,
    CommandRunner,
    SubprocessRunner,
    detect_package_manager_version,
    resolve_argv,
)

__all__ = [
    "DEFAULT_FALLBACK_VERSION",
    "CommandError",
    "CommandRunner",
    "SubprocessRunner",
    "detect_package_manager_version",
    "resolve_argv",
]
