"""
Pytest configuration: project root on sys.path plus shared CORS fixtures.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

ROOT = Path(__file__).resolve().parent.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.cors.models import CorsConfig  # noqa: E402
from src.cors.provider import GatewayResourceProvider  # noqa: E402


@pytest.fixture
def cors_config() -> CorsConfig:
    """A fully populated CORS configuration."""
    return CorsConfig(
        allowMethods=["GET", "PUT"],
        allowOrigin="*",
        allowHeaders=["x-header"],
        exposeHeaders=["x-expose"],
        maxAge=123,
        allowCredentials=True,
    )


@pytest.fixture
def minimal_cors_config() -> CorsConfig:
    """Only the required fields."""
    return CorsConfig(allowMethods=["GET", "PUT"], allowOrigin="*")


@pytest.fixture
def mock_provider() -> AsyncMock:
    """Gateway provider whose calls all succeed."""
    return AsyncMock(spec=GatewayResourceProvider)
