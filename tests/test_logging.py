"""Tests for structured logging setup."""
import json
from collections.abc import Iterator

import pytest
import structlog
from fastapi.testclient import TestClient

from app.core.logging import configure_logging
from app.models.schemas import PersonInput
from app.services import ConverterService


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Put back the structlog configuration a test replaced."""
    previous = structlog.get_config()
    yield
    structlog.configure(**previous)


def test_conversion_events_are_json(
    person: PersonInput,
    capsys: pytest.CaptureFixture[str],
    restore_logging: None,
) -> None:
    """Test conversion events print as JSON lines with the bound component."""
    configure_logging("INFO")

    ConverterService().convert(person)

    lines = capsys.readouterr().out.strip().splitlines()
    events = [json.loads(line) for line in lines]
    assert [event["event"] for event in events] == [
        "conversion_started",
        "conversion_complete",
    ]
    assert events[0]["level"] == "info"
    assert events[0]["component"] == "converter_service"
    assert events[0]["address_count"] == 2
    assert "timestamp" in events[1]


def test_log_level_filters_conversion_events(
    client: TestClient,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
    fresh_settings: None,
    restore_logging: None,
) -> None:
    """Test LOG_LEVEL=ERROR silences info events from the request path."""
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    configure_logging()

    response = client.post(
        "/home",
        json={
            "nome": "Teste",
            "idade": 48,
            "enderecos": [{"rua": "Rua 3", "numero": 27, "cidade": "Londrina"}],
        },
    )

    assert response.status_code == 200
    out = capsys.readouterr().out
    assert "conversion_started" not in out
    assert "conversion_complete" not in out
