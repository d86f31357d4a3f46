"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from nutricard.api.app import create_app
from nutricard.config import Settings
from nutricard.containers import AppContainer, build_container


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", debug=True)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
