"""Pytest configuration and fixtures."""

from datetime import datetime
import pytest
from httpx import AsyncClient, ASGITransport
from unittest.mock import AsyncMock, MagicMock

from main import app
from chat.client import ChatApiClient
from chat.session import ChatSession
from learn.service import LearnService, get_learn_service


@pytest.fixture
async def async_client():
    """Async HTTP client for testing API endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def fixed_clock():
    """Clock that always returns 09:30."""
    return lambda: datetime(2024, 6, 1, 9, 30)


@pytest.fixture
def mock_chat_transport():
    """Mock ChatApiClient for testing sessions."""
    transport = MagicMock(spec=ChatApiClient)
    transport.send = AsyncMock(side_effect=lambda message: f"Echo: {message}")
    transport.close = AsyncMock()
    return transport


@pytest.fixture
def chat_session(mock_chat_transport, fixed_clock):
    """ChatSession wired to the mock transport."""
    return ChatSession(mock_chat_transport, clock=fixed_clock)


@pytest.fixture
def content_dir(tmp_path):
    """Temporary learning content directory."""
    (tmp_path / "buoyancy.md").write_text("# Buoyancy Control\n\nHover.\n", encoding="utf-8")
    (tmp_path / "equipment.md").write_text("# Equipment Overview\n\nMask.\n", encoding="utf-8")
    (tmp_path / "night-diving.md").write_text("# Night Diving\n", encoding="utf-8")
    (tmp_path / "README.txt").write_text("not a topic", encoding="utf-8")
    return tmp_path


@pytest.fixture
def learn_service(content_dir):
    """LearnService over the temporary content directory."""
    return LearnService(content_dir)


@pytest.fixture
def override_learn_service(learn_service):
    """Route learning endpoints to the temporary content directory."""
    app.dependency_overrides[get_learn_service] = lambda: learn_service
    yield learn_service
    app.dependency_overrides.pop(get_learn_service, None)
