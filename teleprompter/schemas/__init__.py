"""Pydantic schemas for API request/response models."""

from .prompt import (
    DeleteMessage,
    PromptInput,
    PromptSchema,
    UpdateMessage,
)

__all__ = [
    "PromptInput",
    "PromptSchema",
    "UpdateMessage",
    "DeleteMessage",
]
