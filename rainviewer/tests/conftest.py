"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from rainviewer.client import RainViewerClient
from rainviewer.config.schema import ClientConfig

TEST_DISCOVERY_URL = "https://test-rainviewer.example.com/public/weather-maps.json"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def weather_maps_body(fixtures_dir: Path) -> str:
    return (fixtures_dir / "weather_maps.json").read_text()


@pytest.fixture
def client() -> RainViewerClient:
    return RainViewerClient(discovery_url=TEST_DISCOVERY_URL)


@pytest.fixture
def default_config() -> ClientConfig:
    return ClientConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"discovery_url": TEST_DISCOVERY_URL, "timeout": 10.0},
        "tiles": {"max_zoom": 10},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
