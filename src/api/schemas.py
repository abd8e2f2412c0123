"""Request and response models for the /api endpoints.

Request fields are all optional so that missing required inputs are reported
as ``400 {"error": "Missing ..."}`` by the endpoints themselves.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class LenientRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")


class SummarizeRequest(LenientRequest):
    text: Optional[Any] = Field(None, description="News text to summarize")
    level: Optional[Any] = Field("beginner", description="beginner, intermediate or advanced")


class SpeakRequest(LenientRequest):
    text: Optional[Any] = Field(None, description="Hindi text to read aloud")
    rate: Optional[Any] = Field(100, description="Speaking rate percent, 60-140")
    pause_ms: Optional[Any] = Field(0, alias="pauseMs", description="Pause between words in ms, 0-2000")


class WordMapRequest(LenientRequest):
    sentence: Optional[Any] = Field(None, description="Hindi sentence to gloss word by word")


class HealthResponse(BaseModel):
    status: str = "OK"


class NewsResponse(BaseModel):
    status: Optional[str] = None
    totalResults: Optional[int] = None
    articles: Optional[List[Any]] = None


class SummarizeResponse(BaseModel):
    result: str


class WordGloss(BaseModel):
    hi: str
    he: str


class WordMapResponse(BaseModel):
    words: List[WordGloss]


class ErrorResponse(BaseModel):
    error: str
    details: Optional[Any] = None
