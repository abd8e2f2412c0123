from typing import Optional

import openai
import structlog

from ..core.exceptions import ProviderError

logger = structlog.get_logger(__name__)


class LLMService:
    def __init__(self, openai_api_key: Optional[str] = None, openai_model_name: str = "gpt-4.1-mini"):
        self.openai_model_name = openai_model_name
        self.openai_client = openai.AsyncOpenAI(api_key=openai_api_key)

    async def complete(self, prompt: str, error_message: str = "OpenAI error") -> str:
        """
        Send a single user message and return the model's text.

        There is no retry and no provider fallback; any failure surfaces as a
        ProviderError carrying ``error_message`` and the underlying error.
        """
        try:
            response = await self.openai_client.chat.completions.create(
                model=self.openai_model_name,
                messages=[{"role": "user", "content": prompt}],
            )
            result = response.choices[0].message.content or ""
        except openai.APIStatusError as e:
            logger.warning("OpenAI request rejected", status_code=e.status_code, error=str(e))
            raise ProviderError(error_message, details=str(e)) from e
        except Exception as e:
            logger.warning("OpenAI generation failed", error=str(e))
            raise ProviderError(error_message, details=str(e)) from e

        logger.info("OpenAI generation completed", model=self.openai_model_name, response_length=len(result))
        return result
