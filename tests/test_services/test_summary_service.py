import pytest

from src.models.enums import DifficultyLevel
from src.prompts import SummaryPrompts
from src.services.summary_service import SummaryService


class TestSummaryService:
    @pytest.fixture(autouse=True)
    def setup_service(self, mock_llm_service):
        self.llm_service = mock_llm_service
        self.service = SummaryService(mock_llm_service)

    @pytest.mark.asyncio
    async def test_summarize_filters_non_script_lines(self):
        self.llm_service.complete.return_value = (
            "दिल्ली में बारिश हुई।\n"
            "בדלהי ירד גשם.\n"
            "Translation: It rained in Delhi.\n"
            "\n"
            "लोग खुश हैं।\n"
            "האנשים שמחים.\n"
        )

        result = await self.service.summarize("It rained in Delhi today.", "beginner")

        assert result == "दिल्ली में बारिश हुई।\nבדלהי ירד גשם.\nलोग खुश हैं।\nהאנשים שמחים."

    @pytest.mark.asyncio
    async def test_all_latin_output_is_an_empty_result(self):
        self.llm_service.complete.return_value = "Sorry, I can only answer in English."

        assert await self.service.summarize("some news") == ""

    @pytest.mark.asyncio
    async def test_prompt_contains_level_guide_and_article(self):
        self.llm_service.complete.return_value = ""

        await self.service.summarize("ARTICLE BODY", "intermediate")

        prompt = self.llm_service.complete.call_args.args[0]
        assert SummaryPrompts.get_level_guide(DifficultyLevel.INTERMEDIATE) in prompt
        assert prompt.endswith("ARTICLE BODY")
        assert self.llm_service.complete.await_count == 1


class TestDifficultyLevel:
    def test_parse(self):
        assert DifficultyLevel.parse(None) is DifficultyLevel.BEGINNER
        assert DifficultyLevel.parse("beginner") is DifficultyLevel.BEGINNER
        assert DifficultyLevel.parse("intermediate") is DifficultyLevel.INTERMEDIATE
        assert DifficultyLevel.parse("advanced") is DifficultyLevel.ADVANCED

    def test_unknown_level_uses_advanced_guide(self):
        assert DifficultyLevel.parse("expert") is DifficultyLevel.ADVANCED
