"""
Hindi to Hebrew word glossing.

The model is asked for strict JSON, but its answer is never trusted for shape:
the output always has one entry per input word, in input order, with the
original spelling. Glosses are matched by position only.
"""

import json
from typing import Any, Dict, List

import structlog

from ..core.exceptions import ProviderError
from ..prompts import WordMapPrompts
from ..utils.string_utils import has_hebrew, split_words
from .llm_service import LLMService

logger = structlog.get_logger(__name__)

ERROR_MESSAGE = "Wordmap error"


def parse_model_json(raw: str) -> Any:
    """Parse the model output, falling back to the outermost {...} span."""
    raw = (raw or "").strip()
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        pass

    start = raw.find("{")
    end = raw.rfind("}")
    if start < 0 or end <= start:
        raise ProviderError(ERROR_MESSAGE, details="Failed to parse JSON from model")

    try:
        return json.loads(raw[start:end + 1])
    except json.JSONDecodeError as e:
        raise ProviderError(ERROR_MESSAGE, details=f"Failed to parse JSON from model: {e}") from e


def normalize_glosses(words: List[str], parsed: Any) -> List[Dict[str, str]]:
    entries = parsed.get("words") if isinstance(parsed, dict) else None
    if not isinstance(entries, list):
        entries = []

    normalized = []
    for index, word in enumerate(words):
        item = entries[index] if index < len(entries) else None
        gloss = item.get("he") if isinstance(item, dict) else None
        gloss = str(gloss) if gloss else ""
        if not has_hebrew(gloss):
            gloss = ""
        normalized.append({"hi": word, "he": gloss})
    return normalized


class WordMapService:
    def __init__(self, llm_service: LLMService):
        self.llm_service = llm_service

    async def map_words(self, sentence: str) -> List[Dict[str, str]]:
        words = split_words(sentence)
        if not words:
            return []

        prompt = WordMapPrompts.get_wordmap_prompt(words)
        raw = await self.llm_service.complete(prompt, error_message=ERROR_MESSAGE)
        normalized = normalize_glosses(words, parse_model_json(raw))

        logger.info(
            "Word map generated",
            word_count=len(words),
            glossed=sum(1 for entry in normalized if entry["he"]),
        )
        return normalized
