from fastapi import Depends

from ..config import Settings, get_settings
from ..services.llm_service import LLMService
from ..services.news_service import NewsService
from ..services.speech_service import SpeechService
from ..services.summary_service import SummaryService
from ..services.wordmap_service import WordMapService


def get_news_service(settings: Settings = Depends(get_settings)) -> NewsService:
    return NewsService(
        api_key=settings.newsapi_key,
        base_url=settings.newsapi_base_url,
        language=settings.newsapi_language,
        sort_by=settings.newsapi_sort_by,
        timeout_seconds=settings.newsapi_timeout_seconds,
        lookback_days=settings.newsapi_lookback_days,
    )


def get_llm_service(settings: Settings = Depends(get_settings)) -> LLMService:
    return LLMService(
        openai_api_key=settings.openai_api_key,
        openai_model_name=settings.openai_model_name,
    )


def get_summary_service(llm_service: LLMService = Depends(get_llm_service)) -> SummaryService:
    return SummaryService(llm_service)


def get_wordmap_service(llm_service: LLMService = Depends(get_llm_service)) -> WordMapService:
    return WordMapService(llm_service)


def get_speech_service(settings: Settings = Depends(get_settings)) -> SpeechService:
    return SpeechService(
        speech_key=settings.azure_speech_key,
        speech_region=settings.azure_speech_region,
        voice_name=settings.azure_speech_voice,
    )
