from enum import Enum


class DifficultyLevel(str, Enum):
    """Hindi complexity of a generated summary"""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @classmethod
    def parse(cls, value) -> "DifficultyLevel":
        """Unknown or missing levels: missing means beginner, anything else advanced."""
        if value is None or value == "":
            return cls.BEGINNER
        try:
            return cls(str(value))
        except ValueError:
            return cls.ADVANCED
