"""Schemas for prompts and their change notifications."""

from typing import Literal, Optional

from pydantic import BaseModel, Field, StrictStr, field_validator

from ..models.prompt import MAX_KEY_LENGTH


class PromptInput(BaseModel):
    """Schema for writing a new version of a prompt."""

    id: StrictStr = Field(..., min_length=1, max_length=MAX_KEY_LENGTH, description="Prompt id, must not contain '/'")
    text: StrictStr = Field(..., min_length=1, description="Template body")
    namespace: Optional[StrictStr] = Field(
        default=None,
        max_length=MAX_KEY_LENGTH,
        description="Subscriber channel notified of changes to this prompt"
    )

    @field_validator("id")
    @classmethod
    def id_is_single_path_segment(cls, value: str) -> str:
        if "/" in value:
            raise ValueError("id must not contain '/'")
        return value


class PromptSchema(BaseModel):
    """Schema for a prompt value, current or historical."""

    id: str
    text: str
    version: int
    namespace: Optional[str] = None

    model_config = {"from_attributes": True}


class UpdateMessage(BaseModel):
    """Notification sent when a prompt gets a new current value."""

    type: Literal["update"] = "update"
    prompt: PromptSchema


class DeleteMessage(BaseModel):
    """Notification sent when a prompt is deleted."""

    type: Literal["delete"] = "delete"
    id: str
