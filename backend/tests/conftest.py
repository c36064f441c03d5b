"""
Pytest configuration and shared fixtures.

All fixtures use mocks: no test reaches the Groq API.

Usage:
    async def test_example(stack_service, mock_llm):
        mock_llm.ainvoke.return_value.content = '["React"]'
        result = await stack_service.extract("React developer")
"""

import pytest
from unittest.mock import AsyncMock, MagicMock


# =============================================================================
# LLM MOCK FIXTURES
# =============================================================================


@pytest.fixture
def mock_llm_response():
    """
    Factory fixture for creating mock LLM responses.

    Usage:
        def test_example(mock_llm_response):
            response = mock_llm_response('["Docker"]')
            assert response.content == '["Docker"]'
    """
    def _create_response(content="[]"):
        response = MagicMock()
        response.content = content
        return response
    return _create_response


@pytest.fixture
def mock_llm(mock_llm_response):
    """
    AsyncMock that simulates ChatGroq.ainvoke.

    Defaults to an empty JSON array; override per test:
        mock_llm.ainvoke.return_value = mock_llm_response('["React"]')
        mock_llm.ainvoke.side_effect = TimeoutError()
    """
    llm = AsyncMock()
    llm.ainvoke.return_value = mock_llm_response("[]")
    return llm


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def stack_service(mock_llm):
    """StackExtractionService wired to the mocked LLM."""
    from jjugg.services.stack_extraction import StackExtractionService

    return StackExtractionService(llm=mock_llm, model_name="test-model")


@pytest.fixture
def unconfigured_service():
    """StackExtractionService without provider (no GROQ_API_KEY)."""
    from jjugg.services.stack_extraction import StackExtractionService

    return StackExtractionService(llm=None, model_name="test-model")


@pytest.fixture
def test_settings():
    """
    Factory for Settings isolated from .env files.

    Usage:
        def test_example(test_settings):
            settings = test_settings(groq_api_key="key")
    """
    from jjugg.core.config import Settings

    def _create(**overrides):
        return Settings(_env_file=None, **overrides)
    return _create


# =============================================================================
# API FIXTURES
# =============================================================================


@pytest.fixture
def api_client():
    """
    Factory for a TestClient whose stack service is replaced.

    Usage:
        def test_example(api_client, stack_service):
            client = api_client(stack_service)
            client.post("/api/infer-tech-stack", json={...})
    """
    from fastapi.testclient import TestClient

    from jjugg.api.routes.stack import get_stack_service
    from jjugg.main import app

    def _create(service):
        app.dependency_overrides[get_stack_service] = lambda: service
        return TestClient(app)

    yield _create
    app.dependency_overrides.clear()


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
