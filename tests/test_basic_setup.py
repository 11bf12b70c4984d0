"""
Basic test to verify the project setup is working correctly.
"""

import pytest
from fastapi.testclient import TestClient
from app.main import app
from app.core.dependencies import ServiceContainer
from app.core.exceptions import NotInitializedError


def test_app_creation():
    """Test that the FastAPI app can be created successfully."""
    assert app is not None
    assert app.title == "NZ Spelling Converter API"


def test_root_endpoint(client):
    """Test the root endpoint returns expected response."""
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert "message" in data
    assert "version" in data
    assert "status" in data
    assert data["status"] == "running"


def test_service_container_creation():
    """Test that an empty ServiceContainer reports itself uninitialized."""
    container = ServiceContainer()
    assert container.initialized is False
    with pytest.raises(NotInitializedError):
        container.get_converter()


@pytest.mark.asyncio
async def test_service_container_initialization(converter_settings):
    """Test that the container loads the bundled data."""
    from app.config.settings import Settings

    container = ServiceContainer(Settings(converter=converter_settings))
    await container.initialize_services()

    assert container.initialized
    assert await container.get_converter().convert("color") == "colour"

    await container.cleanup_services()
    assert container.initialized is False


if __name__ == "__main__":
    pytest.main([__file__])
