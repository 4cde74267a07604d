"""API endpoints for prompt operations."""

import logging
import re
from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from ..exceptions import InvalidPromptException, VersionNotFoundException
from ..models.prompt import MAX_KEY_LENGTH
from ..schemas.prompt import PromptInput, PromptSchema
from ..services.prompt_service import PromptService
from ..services.propagator import Propagator
from ..services.store import VersionedStore
from .dependencies import get_prompt_service, get_propagator, get_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/prompts", tags=["prompts"])

# Registered after `router`; catches every other method/path under /prompts
fallback_router = APIRouter(prefix="/prompts", include_in_schema=False)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

VERSION_PATTERN = re.compile(r"-?[0-9]+")
MIN_VERSION = -(2 ** 63)
MAX_VERSION = 2 ** 63 - 1


@router.get("", response_model=List[PromptSchema], response_model_exclude_none=True)
@router.get("/", response_model=List[PromptSchema], response_model_exclude_none=True)
async def list_prompts(store: VersionedStore = Depends(get_store)):
    """Get all current prompts, ordered by id."""
    return await store.list()


@router.post("", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
async def write_prompt(
    prompt_data: PromptInput,
    background_tasks: BackgroundTasks,
    store: VersionedStore = Depends(get_store),
    propagator: Propagator = Depends(get_propagator),
):
    """Create a prompt or write a new version of an existing one."""
    prompt = await store.write(prompt_data)
    background_tasks.add_task(propagator.propagate_update, prompt)
    return "Created"


@router.get("/{prompt_id}", response_model=PromptSchema, response_model_exclude_none=True)
@router.get("/{prompt_id}/", response_model=PromptSchema, response_model_exclude_none=True)
async def get_prompt(prompt_id: str, store: VersionedStore = Depends(get_store)):
    """Get the current value of a prompt."""
    return await store.get(prompt_id)


@router.delete("/{prompt_id}", response_class=PlainTextResponse)
@router.delete("/{prompt_id}/", response_class=PlainTextResponse)
async def delete_prompt(
    prompt_id: str,
    background_tasks: BackgroundTasks,
    store: VersionedStore = Depends(get_store),
    propagator: Propagator = Depends(get_propagator),
):
    """Delete a prompt. Its history is kept."""
    if len(prompt_id) > MAX_KEY_LENGTH:
        raise InvalidPromptException(f"Prompt id longer than {MAX_KEY_LENGTH} characters")
    entry = await store.delete(prompt_id)
    background_tasks.add_task(propagator.propagate_delete, prompt_id, entry.namespace)
    return "Deleted"


@router.get(
    "/{prompt_id}/versions",
    response_model=List[PromptSchema],
    response_model_exclude_none=True,
)
@router.get(
    "/{prompt_id}/versions/",
    response_model=List[PromptSchema],
    response_model_exclude_none=True,
)
async def get_prompt_versions(prompt_id: str, store: VersionedStore = Depends(get_store)):
    """Get every version of a prompt, newest first, deletions included."""
    return await store.get_versions(prompt_id)


@router.post("/{prompt_id}/versions/{version}", response_class=PlainTextResponse)
async def rollback_prompt(
    prompt_id: str,
    version: str,
    background_tasks: BackgroundTasks,
    service: PromptService = Depends(get_prompt_service),
    propagator: Propagator = Depends(get_propagator),
):
    """Make a previous version current again under a new version number."""
    if not VERSION_PATTERN.fullmatch(version):
        raise InvalidPromptException(f"Version must be an integer, got {version!r}")
    target = int(version)
    if not MIN_VERSION <= target <= MAX_VERSION:
        # Versions are stored as signed 64-bit integers
        raise VersionNotFoundException(f"Prompt {prompt_id} has no version {version}")

    prompt = await service.rollback(prompt_id, target)
    background_tasks.add_task(propagator.propagate_update, prompt)
    return "Rolled back"


@fallback_router.api_route("", methods=ALL_METHODS)
@fallback_router.api_route("/{rest:path}", methods=ALL_METHODS)
async def method_not_allowed():
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method not allowed",
    )
