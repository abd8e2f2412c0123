"""
NewsAPI search client.

Results are relayed as returned by the provider; only the envelope is trimmed
to ``status``, ``totalResults`` and ``articles``.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import httpx
import structlog

from ..core.exceptions import ProviderError
from ..utils.validation_utils import clamp, coerce_number

logger = structlog.get_logger(__name__)

DEFAULT_QUERY = "India"
DEFAULT_COUNT = 3
MIN_COUNT, MAX_COUNT = 1, 20


def clamp_count(count: Any) -> int:
    return int(clamp(coerce_number(count, DEFAULT_COUNT), MIN_COUNT, MAX_COUNT))


class NewsService:
    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://newsapi.org/v2/everything",
        language: str = "en",
        sort_by: str = "publishedAt",
        timeout_seconds: float = 15.0,
        lookback_days: int = 7,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.language = language
        self.sort_by = sort_by
        self.timeout_seconds = timeout_seconds
        self.lookback_days = lookback_days

    def lookback_date(self, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        return (now - timedelta(days=self.lookback_days)).strftime("%Y-%m-%d")

    def build_params(self, query: str, count: int) -> Dict[str, Any]:
        return {
            "q": query,
            "from": self.lookback_date(),
            "sortBy": self.sort_by,
            "language": self.language,
            "pageSize": count,
            "apiKey": self.api_key,
        }

    async def search(self, query: Optional[str] = None, count: Any = None) -> Dict[str, Any]:
        query = str(query) if query else DEFAULT_QUERY
        count = clamp_count(count)

        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.get(self.base_url, params=self.build_params(query, count))
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            details = self._error_details(e.response)
            logger.warning("NewsAPI returned an error", status_code=e.response.status_code, query=query)
            raise ProviderError("NewsAPI request failed", details=details) from e
        except Exception as e:
            logger.warning("NewsAPI request failed", error=str(e), query=query)
            raise ProviderError("NewsAPI request failed", details=str(e)) from e

        if not isinstance(data, dict):
            raise ProviderError("NewsAPI request failed", details="Unexpected response payload")

        articles = data.get("articles")
        logger.info("NewsAPI search completed", query=query, count=count, returned=len(articles or []))
        return {
            "status": data.get("status"),
            "totalResults": data.get("totalResults"),
            "articles": articles,
        }

    @staticmethod
    def _error_details(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"
