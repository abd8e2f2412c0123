import pytest

from src.core.exceptions import ProviderError
from src.models.enums import DifficultyLevel
from src.prompts import SummaryPrompts


@pytest.mark.asyncio
async def test_health(async_client):
    response = await async_client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "OK"}


class TestNewsEndpoint:
    @pytest.mark.asyncio
    async def test_news(self, async_client, mock_news_service, sample_news_payload):
        response = await async_client.get("/api/news", params={"count": "5", "q": "monsoon"})

        assert response.status_code == 200
        assert response.json() == sample_news_payload
        mock_news_service.search.assert_awaited_once_with(query="monsoon", count="5")

    @pytest.mark.asyncio
    async def test_news_provider_failure(self, async_client, mock_news_service):
        mock_news_service.search.side_effect = ProviderError(
            "NewsAPI request failed", details={"code": "rateLimited"}
        )

        response = await async_client.get("/api/news")

        assert response.status_code == 500
        assert response.json() == {"error": "NewsAPI request failed", "details": {"code": "rateLimited"}}


class TestSummarizeEndpoint:
    @pytest.mark.asyncio
    async def test_summarize(self, async_client, mock_llm_service):
        mock_llm_service.complete.return_value = "भारत जीता।\nהודו ניצחה.\nIndia won."

        response = await async_client.post("/api/summarize", json={"text": "India won the match.", "level": "advanced"})

        assert response.status_code == 200
        assert response.json() == {"result": "भारत जीता।\nהודו ניצחה."}

    @pytest.mark.asyncio
    async def test_missing_text(self, async_client, mock_llm_service):
        response = await async_client.post("/api/summarize", json={"level": "beginner"})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing text"}
        mock_llm_service.complete.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_body(self, async_client, mock_llm_service):
        response = await async_client.post("/api/summarize")

        assert response.status_code == 400
        assert response.json() == {"error": "Missing text"}
        mock_llm_service.complete.assert_not_called()

    @pytest.mark.asyncio
    async def test_provider_failure(self, async_client, mock_llm_service):
        mock_llm_service.complete.side_effect = ProviderError("OpenAI error", details="quota exceeded")

        response = await async_client.post("/api/summarize", json={"text": "news"})

        assert response.status_code == 500
        assert response.json() == {"error": "OpenAI error", "details": "quota exceeded"}



    @pytest.mark.asyncio
    async def test_numeric_text_is_read_as_string(self, async_client, mock_llm_service):
        mock_llm_service.complete.return_value = "वर्ष 2024।"

        response = await async_client.post("/api/summarize", json={"text": 2024})

        assert response.status_code == 200
        assert response.json() == {"result": "वर्ष 2024।"}
        assert mock_llm_service.complete.call_args.args[0].endswith("2024")

    @pytest.mark.asyncio
    async def test_non_string_level_uses_advanced_guide(self, async_client, mock_llm_service):
        mock_llm_service.complete.return_value = "भारत जीता।"

        response = await async_client.post("/api/summarize", json={"text": "India won.", "level": 2})

        assert response.status_code == 200
        prompt = mock_llm_service.complete.call_args.args[0]
        assert SummaryPrompts.get_level_guide(DifficultyLevel.ADVANCED) in prompt


class TestSpeakEndpoint:
    @pytest.mark.asyncio
    async def test_speak_returns_mp3(self, async_client, mock_speech_service):
        response = await async_client.post("/api/speak", json={"text": "नमस्ते दुनिया", "rate": 90, "pauseMs": 300})

        assert response.status_code == 200
        assert response.headers["content-type"] == "audio/mpeg"
        assert response.headers["content-length"] == str(len(b"ID3fake-mp3-bytes"))
        assert response.content == b"ID3fake-mp3-bytes"

        ssml = mock_speech_service.synthesize.call_args.args[0]
        assert '<prosody rate="slow">' in ssml
        assert 'नमस्ते<break time="300ms"/>दुनिया' in ssml
        assert 'xml:lang="hi-IN"' in ssml

    @pytest.mark.asyncio
    async def test_speak_defaults(self, async_client, mock_speech_service):
        response = await async_client.post("/api/speak", json={"text": "नमस्ते दुनिया"})

        assert response.status_code == 200
        ssml = mock_speech_service.synthesize.call_args.args[0]
        assert '<prosody rate="medium">' in ssml
        assert "नमस्ते दुनिया" in ssml

    @pytest.mark.asyncio
    async def test_missing_text(self, async_client, mock_speech_service):
        response = await async_client.post("/api/speak", json={"rate": 100})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing text"}
        mock_speech_service.synthesize.assert_not_called()

    @pytest.mark.asyncio
    async def test_synthesis_not_completed(self, async_client, mock_speech_service):
        mock_speech_service.synthesize.side_effect = ProviderError(
            "Speech not completed", details={"reason": "ResultReason.Canceled"}
        )

        response = await async_client.post("/api/speak", json={"text": "नमस्ते"})

        assert response.status_code == 500
        assert response.headers["content-type"] == "application/json"
        assert response.json()["error"] == "Speech not completed"

    @pytest.mark.asyncio
    async def test_numeric_speak_text(self, async_client, mock_speech_service):
        response = await async_client.post("/api/speak", json={"text": 108})

        assert response.status_code == 200
        assert "108" in mock_speech_service.synthesize.call_args.args[0]


class TestWordMapEndpoint:
    @pytest.mark.asyncio
    async def test_wordmap(self, async_client, mock_llm_service):
        mock_llm_service.complete.return_value = '{"words":[{"hi":"ek","he":"אחד"}]}'

        response = await async_client.post("/api/wordmap", json={"sentence": "ek din"})

        assert response.status_code == 200
        assert response.json() == {"words": [{"hi": "ek", "he": "אחד"}, {"hi": "din", "he": ""}]}

    @pytest.mark.asyncio
    async def test_whitespace_sentence_returns_empty_list(self, async_client, mock_llm_service):
        response = await async_client.post("/api/wordmap", json={"sentence": "   "})

        assert response.status_code == 200
        assert response.json() == {"words": []}
        mock_llm_service.complete.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_sentence(self, async_client, mock_llm_service):
        response = await async_client.post("/api/wordmap", json={"text": "ek din"})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing sentence"}
        mock_llm_service.complete.assert_not_called()

    @pytest.mark.asyncio
    async def test_unparseable_model_output(self, async_client, mock_llm_service):
        mock_llm_service.complete.return_value = "I cannot help with that."

        response = await async_client.post("/api/wordmap", json={"sentence": "ek din"})

        assert response.status_code == 500
        assert response.json()["error"] == "Wordmap error"

    @pytest.mark.asyncio
    async def test_numeric_sentence_is_read_as_string(self, async_client, mock_llm_service):
        mock_llm_service.complete.return_value = '{"words": []}'

        response = await async_client.post("/api/wordmap", json={"sentence": 42})

        assert response.status_code == 200
        assert response.json() == {"words": [{"hi": "42", "he": ""}]}
