"""Database models for the teleprompter service."""

from .prompt import DELETED_TEXT, MAX_KEY_LENGTH, Prompt, PromptVersion

__all__ = [
    "DELETED_TEXT",
    "MAX_KEY_LENGTH",
    "Prompt",
    "PromptVersion",
]
