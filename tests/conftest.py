"""
Test Configuration
==================

Pytest configuration with fixtures for all test types.
Provides test settings, formatters and sample models.
"""

from typing import Any, Dict, Generator, List
from unittest.mock import patch

import pytest
from pydantic_settings import SettingsConfigDict

from microformats.config.settings import Settings
from microformats.core.engine import Microformat
from microformats.core.rendering.coordinates import CoordinateFormatter
from microformats.core.rendering.formatter import Formatter

from tests.utils.data_generators import MicroformatDataGenerator


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    log_level: str = "DEBUG"

    model_config = SettingsConfigDict(env_file=".env.test")


@pytest.fixture(scope="session")
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(scope="session", autouse=True)
def override_settings(test_settings: TestSettings) -> Generator[TestSettings, None, None]:
    """Override the global settings for testing."""
    with patch("microformats.config.settings.settings", test_settings):
        yield test_settings


@pytest.fixture
def formatter(test_settings: TestSettings) -> Formatter:
    """Formatter using the test settings."""
    return Formatter(test_settings)


@pytest.fixture
def coordinate_formatter() -> CoordinateFormatter:
    """Coordinate formatter with the default format and symbols."""
    return CoordinateFormatter(default_format="%02.6f", symbols=["°", "′", "″"])


@pytest.fixture
def person() -> Dict[str, Any]:
    """Sample person model."""
    return MicroformatDataGenerator.generate_person()


@pytest.fixture
def hcard_attributes() -> List[Any]:
    """Sample h-card attribute list."""
    return MicroformatDataGenerator.generate_hcard_attributes()


@pytest.fixture
def engine(person: Dict[str, Any]) -> Microformat:
    """Engine with no attributes, used as normalization context."""
    return Microformat(microformat="h-card", model=person, attributes=[])
