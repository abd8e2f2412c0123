from fastapi import APIRouter

from .endpoints import health, news, speak, summarize, wordmap

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(news.router, tags=["news"])
api_router.include_router(summarize.router, tags=["summarize"])
api_router.include_router(speak.router, tags=["speak"])
api_router.include_router(wordmap.router, tags=["wordmap"])
