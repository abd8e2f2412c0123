from .summary_prompts import SummaryPrompts
from .wordmap_prompts import WordMapPrompts

__all__ = ["SummaryPrompts", "WordMapPrompts"]
