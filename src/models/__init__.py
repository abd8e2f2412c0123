from .enums import DifficultyLevel

__all__ = ["DifficultyLevel"]
