from __future__ import annotations


class K4Error(RuntimeError):
    pass


class ConfigError(K4Error):
    def __init__(self, message: str, *, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []
