import os

import pytest
from unittest.mock import MagicMock, AsyncMock
import httpx

os.environ.setdefault("NEWSAPI_KEY", "test-newsapi-key")
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ.setdefault("AZURE_SPEECH_KEY", "test-speech-key")
os.environ.setdefault("AZURE_SPEECH_REGION", "westeurope")


@pytest.fixture
def mock_settings():
    settings = MagicMock()
    settings.newsapi_key = "test-newsapi-key"
    settings.openai_api_key = "test-openai-key"
    settings.openai_model_name = "gpt-4.1-mini"
    settings.azure_speech_key = "test-speech-key"
    settings.azure_speech_region = "westeurope"
    settings.azure_speech_voice = "hi-IN-SwaraNeural"
    settings.azure_speech_language = "hi-IN"
    return settings


@pytest.fixture
def sample_news_payload():
    return {
        "status": "ok",
        "totalResults": 2,
        "articles": [
            {"title": "Monsoon arrives in Kerala", "url": "https://example.com/a"},
            {"title": "Markets close higher", "url": "https://example.com/b"},
        ],
    }


@pytest.fixture
def mock_httpx_response(sample_news_payload):
    response = MagicMock(spec=httpx.Response)
    response.status_code = 200
    response.json = MagicMock(return_value=sample_news_payload)
    response.raise_for_status = MagicMock()
    return response


@pytest.fixture
def mock_llm_service():
    service = MagicMock()
    service.complete = AsyncMock(return_value="")
    return service


@pytest.fixture
def mock_news_service(sample_news_payload):
    service = MagicMock()
    service.search = AsyncMock(return_value=sample_news_payload)
    return service


@pytest.fixture
def mock_speech_service():
    service = MagicMock()
    service.synthesize = AsyncMock(return_value=b"ID3fake-mp3-bytes")
    return service


@pytest.fixture
async def async_client(mock_llm_service, mock_news_service, mock_speech_service):
    from httpx import AsyncClient, ASGITransport
    from src.main import app
    from src.api.dependencies import get_llm_service, get_news_service, get_speech_service

    app.dependency_overrides[get_llm_service] = lambda: mock_llm_service
    app.dependency_overrides[get_news_service] = lambda: mock_news_service
    app.dependency_overrides[get_speech_service] = lambda: mock_speech_service

    # Use ASGITransport for direct app interaction
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
