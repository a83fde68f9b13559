"""Shared pytest fixtures."""

import pytest

from country_explorer.logging.context import clear_log_context
from tests.helpers import load_response

ENV_VARS = ("COUNTRYLAYER_API_KEY", "PORT", "LOG_LEVEL", "ENVIRONMENT")


@pytest.fixture(autouse=True)
def clean_log_context():
    """Every test starts and ends with an empty logging context."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment variables the app reads."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def france_document():
    """Single REST Countries document for France."""
    return load_response("france.json")


@pytest.fixture
def capital_paris_response():
    """Body of GET /capital/Paris."""
    return load_response("capital_paris.json")


@pytest.fixture
def country_land_response():
    """Body of a substring name search returning two countries."""
    return load_response("country_land.json")


@pytest.fixture
def irregular_records():
    """Documents with string names, string capitals, empty maps and short latlng."""
    return load_response("irregular_records.json")
