"""Prompts for the Hindi/Hebrew news summary"""

from ..models.enums import DifficultyLevel

LEVEL_GUIDES = {
    DifficultyLevel.BEGINNER: "הינדית פשוטה מאוד, משפטים קצרים מאוד, אוצר מילים בסיסי.",
    DifficultyLevel.INTERMEDIATE: "הינדית פשוטה אך עשירה יותר, עדיין משפטים קצרים.",
    DifficultyLevel.ADVANCED: "הינדית מתקדמת יותר, אך תמציתית וברורה.",
}


class SummaryPrompts:
    @staticmethod
    def get_level_guide(level: DifficultyLevel) -> str:
        return LEVEL_GUIDES[level]

    @staticmethod
    def get_summary_prompt(text: str, level: DifficultyLevel) -> str:
        """Alternating Hindi sentence / Hebrew translation lines, no English at all."""
        return f"""כתוב 4–6 משפטים קצרים שמסכמים את הידיעה.
{SummaryPrompts.get_level_guide(level)}

כללים חשובים:
- כל משפט בהינדית בלבד (כתב דוואנגרי).
- מיד אחרי כל משפט בהינדית – שורה נפרדת עם תרגום לעברית בלבד.
- אסור להשתמש באנגלית בכלל.
- העברית קצרה וברורה.
- אל תעתיק משפטים מהמקור.

פורמט חובה:
[משפט בהינדית]
[תרגום לעברית]

[משפט בהינדית]
[תרגום לעברית]

ידיעה:
{text}""".strip()
