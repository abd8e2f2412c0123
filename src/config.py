from functools import lru_cache
from typing import Annotated, List, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode

REQUIRED_ENV_VARS = (
    ("newsapi_key", "NEWSAPI_KEY"),
    ("openai_api_key", "OPENAI_API_KEY"),
    ("azure_speech_key", "AZURE_SPEECH_KEY"),
    ("azure_speech_region", "AZURE_SPEECH_REGION"),
)


class Settings(BaseSettings):

    api_host: str = Field(default="0.0.0.0", description="API host")
    port: int = Field(default=3001, description="API port")
    debug: bool = Field(default=False, description="Debug mode")

    # Provider credentials (required at startup)
    newsapi_key: Optional[str] = Field(default=None, description="NewsAPI key")
    openai_api_key: Optional[str] = Field(default=None, description="OpenAI API key")
    azure_speech_key: Optional[str] = Field(default=None, description="Azure Speech subscription key")
    azure_speech_region: Optional[str] = Field(default=None, description="Azure Speech region, e.g. westeurope")

    allowed_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
        validation_alias=AliasChoices("CORS_ALLOWED_ORIGINS", "ALLOWED_ORIGINS"),
    )
    public_dir: str = Field(default="public", description="Static files directory served at /")

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json or text)")

    # News search
    newsapi_base_url: str = Field(default="https://newsapi.org/v2/everything", description="NewsAPI search endpoint")
    newsapi_language: str = Field(default="en", description="Language filter for news search")
    newsapi_sort_by: str = Field(default="publishedAt", description="Sort order for news search")
    newsapi_timeout_seconds: float = Field(default=15.0, description="Timeout for NewsAPI requests")
    newsapi_lookback_days: int = Field(default=7, description="Only return articles published in the last N days")

    # LLM
    openai_model_name: str = Field(default="gpt-4.1-mini", description="OpenAI model name")

    # Speech synthesis
    azure_speech_voice: str = Field(default="hi-IN-SwaraNeural", description="Azure neural voice name")
    azure_speech_language: str = Field(default="hi-IN", description="SSML xml:lang of the synthesized speech")

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def parse_allowed_origins(cls, value):
        if value is None:
            return value
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    def missing_required(self) -> List[str]:
        """Names of required environment variables that are unset or blank."""
        return [
            env_name
            for field_name, env_name in REQUIRED_ENV_VARS
            if not (getattr(self, field_name) or "").strip()
        ]

    class Config:
        env_file = [".env", ".env.local"]  # .env.local takes precedence over .env
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
