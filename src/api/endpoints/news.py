from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from ...services.news_service import NewsService
from ..dependencies import get_news_service
from ..schemas import ErrorResponse, NewsResponse

router = APIRouter()


@router.get("/news", response_model=NewsResponse, responses={500: {"model": ErrorResponse}})
async def get_news(
    count: Optional[str] = Query(None, description="Number of articles, clamped to 1-20 (default 3)"),
    q: Optional[str] = Query(None, description="Search query (default India)"),
    news_service: NewsService = Depends(get_news_service),
) -> Dict[str, Any]:
    """Latest articles from the past week matching the query"""
    return await news_service.search(query=q, count=count)
