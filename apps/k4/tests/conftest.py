from __future__ import annotations

import pytest

from command_runner.testing import RecordingRunner
from k4.config import CONFIG_ENV_VAR, GeneratorConfig, load_config


@pytest.fixture(autouse=True)
def _no_user_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.fixture
def config() -> GeneratorConfig:
    return load_config()


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner(outputs={"pnpm --version": "9.7.0\n"})
