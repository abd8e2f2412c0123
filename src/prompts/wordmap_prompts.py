from typing import List


class WordMapPrompts:
    @staticmethod
    def format_word_list(words: List[str]) -> str:
        return "\n".join(f"{index}. {word}" for index, word in enumerate(words, start=1))

    @staticmethod
    def get_wordmap_prompt(words: List[str]) -> str:
        """Strict JSON: {"words": [{"hi": <word as given>, "he": <short Hebrew gloss>}, ...]}"""
        return f"""את/ה מתרגם/ת לעברית בלבד.
החזר/י JSON בלבד, בדיוק בפורמט:
{{"words":[{{"hi":"...","he":"..."}}, ...]}}

חוקים (חשוב מאוד):
- "hi" חייב להיות בדיוק המילה כפי שמופיעה ברשימה שאני נותן/ת לך.
- "he" חייב להיות בעברית בלבד (אותיות עבריות). אסור אנגלית.
- "he" תרגום קצר (מילה אחת או עד 3 מילים).
- אם זו מילת יחס/חיבור/כינוי וכו' שאין לה תרגום עצמאי, תן/י משמעות קצרה בעברית.
- אל תוסיף/י שום טקסט מעבר ל-JSON. בלי הסברים. בלי Markdown.

רשימת המילים (בסדר הזה, בדיוק):
{WordMapPrompts.format_word_list(words)}""".strip()
