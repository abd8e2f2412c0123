import re
from typing import List

HEBREW_PATTERN = re.compile(r"[\u0590-\u05FF]")
DEVANAGARI_PATTERN = re.compile(r"[\u0900-\u097F]")


def has_hebrew(text: str) -> bool:
    return bool(HEBREW_PATTERN.search(text or ""))


def has_hindi(text: str) -> bool:
    return bool(DEVANAGARI_PATTERN.search(text or ""))


def split_words(text: str) -> List[str]:
    return str(text).split()


def filter_script_lines(text: str) -> str:
    """
    Keep only the lines that carry Hindi (Devanagari) or Hebrew text.

    Lines in any other script, e.g. an English "translation" the model slipped
    in, are dropped. Kept lines are stripped; the result may be empty.
    """
    kept_lines = []
    for line in (text or "").split("\n"):
        if not (has_hebrew(line) or has_hindi(line)):
            continue
        line = line.strip()
        if line:
            kept_lines.append(line)
    return "\n".join(kept_lines)
