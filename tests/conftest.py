"""Pytest configuration and fixtures."""

import logging
import os

import pytest

from typedenv.accessor import OptionalEnv, RequiredEnv
from typedenv.config import EnvSettings, reset_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep TYPEDENV_* variables from the developer's shell out of the tests.

    Settings are cached process-wide, so the cache is dropped on both sides
    of every test.
    """

    for name in list(os.environ):
        if name.startswith("TYPEDENV_"):
            monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def environ() -> dict[str, str]:
    """A private environment mapping for accessors under test."""
    return {}


@pytest.fixture
def settings() -> EnvSettings:
    return EnvSettings(log_malformed=True, malformed_log_level="warning")


@pytest.fixture
def env(environ: dict[str, str]) -> RequiredEnv:
    return RequiredEnv(environ)


@pytest.fixture
def opt(environ: dict[str, str], settings: EnvSettings) -> OptionalEnv:
    return OptionalEnv(environ, settings=settings)


@pytest.fixture
def accessor_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.DEBUG, logger="typedenv.accessor")
    return caplog
