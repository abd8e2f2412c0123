from typing import Any

import structlog

from ..models.enums import DifficultyLevel
from ..prompts import SummaryPrompts
from ..utils.string_utils import filter_script_lines
from .llm_service import LLMService

logger = structlog.get_logger(__name__)


class SummaryService:
    def __init__(self, llm_service: LLMService):
        self.llm_service = llm_service

    async def summarize(self, text: str, level: Any = None) -> str:
        """Hindi summary with a Hebrew line after each sentence; other scripts are filtered out."""
        difficulty = DifficultyLevel.parse(level)
        prompt = SummaryPrompts.get_summary_prompt(text, difficulty)

        raw = await self.llm_service.complete(prompt, error_message="OpenAI error")
        result = filter_script_lines(raw)

        logger.info(
            "Summary generated",
            level=difficulty.value,
            raw_lines=len(raw.split("\n")),
            kept_lines=len(result.split("\n")) if result else 0,
        )
        return result
