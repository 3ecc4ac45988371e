"""
Pytest configuration and shared fixtures for translator tests.
"""
import os
import sys
import pytest
from unittest.mock import MagicMock, AsyncMock

# Add python directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from translator.config import ProviderConfig


@pytest.fixture
def provider_config():
    """Fully populated provider configuration."""
    return ProviderConfig(
        endpoint="https://example.openai.azure.com",
        api_key="secret-key-123",
        deployment_name="gpt-4o",
    )


@pytest.fixture
def incomplete_config():
    """Configuration missing the provider credential."""
    return ProviderConfig(
        endpoint="https://example.openai.azure.com",
        deployment_name="gpt-4o",
    )


@pytest.fixture
def valid_payload():
    return {"text": "Hello", "sourceLang": "en", "targetLang": "es"}


@pytest.fixture
def completion_payload():
    """Build a chat-completions response body."""
    def _build(content="Hola"):
        return {
            "id": "chatcmpl-1",
            "object": "chat.completion",
            "choices": [
                {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
            ],
        }
    return _build


@pytest.fixture
def mock_http_response():
    """Build a mock httpx response."""
    def _build(status_code=200, json_data=None, text=""):
        resp = MagicMock()
        resp.status_code = status_code
        if isinstance(json_data, Exception):
            resp.json.side_effect = json_data
        else:
            resp.json.return_value = json_data
        resp.text = text
        return resp
    return _build


@pytest.fixture
def mock_async_client():
    """
    Factory returning (client_factory, client_instance) for code that does
    `async with factory() as client`.
    """
    def _build(response=None, side_effect=None):
        instance = AsyncMock()
        if side_effect is not None:
            instance.post.side_effect = side_effect
        else:
            instance.post.return_value = response
        factory = MagicMock()
        factory.return_value.__aenter__.return_value = instance
        factory.return_value.__aexit__.return_value = False
        return factory, instance
    return _build
