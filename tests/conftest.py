import os

import pytest

from solid_principles.config.schemas import AppConfig
from solid_principles.infrastructure.di import DIContainer, register_all_services


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep SOLID_* variables from the outer shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("SOLID_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def app_config():
    return AppConfig()


@pytest.fixture
def container(app_config):
    return register_all_services(DIContainer(), app_config)
