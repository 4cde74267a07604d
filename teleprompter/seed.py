"""Load initial prompts from YAML if the store is empty."""

import logging
from pathlib import Path

import yaml

from .schemas.prompt import PromptInput
from .services.store import VersionedStore

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict:
    """Load seed data from a YAML file."""
    if not path.exists():
        raise FileNotFoundError(f"Seed data file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


async def load_seed_if_empty(store: VersionedStore, path: Path) -> bool:
    """
    If there are no current prompts, write every prompt listed under the
    ``prompts`` key of the seed file.
    Returns True if seed was loaded, False if the store already had data.
    """
    if not await store.is_empty():
        logger.info("Prompts already present, skipping initial data load")
        return False

    data = _load_yaml(path)
    prompts = [PromptInput(**p) for p in data.get("prompts", [])]
    for prompt in prompts:
        await store.write(prompt)

    logger.info("Seed loaded: %s prompts", len(prompts))
    return bool(prompts)
