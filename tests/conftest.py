"""Test configuration and fixtures."""
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.main import app
from app.models.schemas import AddressInput, PersonInput


@pytest.fixture
def client() -> TestClient:
    """Test client fixture."""
    return TestClient(app)


@pytest.fixture
def person() -> PersonInput:
    """Person record with two addresses."""
    return PersonInput(
        nome="Teste",
        idade=48,
        enderecos=[
            AddressInput(rua="Rua 3", numero=27, cidade="Londrina"),
            AddressInput(rua="Avenida Paraná", numero=0, cidade="Maringá"),
        ],
    )


@pytest.fixture
def fresh_settings() -> Iterator[None]:
    """Re-read settings from the environment for the duration of a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
