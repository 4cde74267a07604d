"""Repository layer for data access operations."""

from .prompt_repo import PromptRepository

__all__ = [
    "PromptRepository",
]
