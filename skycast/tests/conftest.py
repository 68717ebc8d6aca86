"""Shared test fixtures."""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from skycast.ingest.feed_parser import parse_civil, parse_meteo
from skycast.models.forecast import CivilForecast, MeteoForecast

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep IPSTACK_KEY and anything loaded from .env out of other tests."""
    monkeypatch.delenv("IPSTACK_KEY", raising=False)
    with patch.dict(os.environ):
        yield


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def civil_raw() -> dict:
    with open(FIXTURE_DIR / "civil_sample.json") as f:
        return json.load(f)


@pytest.fixture
def meteo_raw() -> dict:
    with open(FIXTURE_DIR / "meteo_sample.json") as f:
        return json.load(f)


@pytest.fixture
def civil_forecast(civil_raw: dict) -> CivilForecast:
    return parse_civil(civil_raw)


@pytest.fixture
def meteo_forecast(meteo_raw: dict) -> MeteoForecast:
    return parse_meteo(meteo_raw)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "location": {"latitude": 26.43516, "longitude": -81.810913},
        "output": {"path": str(tmp_path / "weather_forecast.json")},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
