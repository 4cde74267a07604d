"""Service for prompt operations that combine several store calls."""

import logging

from ..schemas.prompt import PromptInput, PromptSchema
from .store import VersionedStore

logger = logging.getLogger(__name__)


class PromptService:
    """Service for restoring prompts from their history."""

    def __init__(self, store: VersionedStore):
        self.store = store

    async def rollback(self, prompt_id: str, version: int) -> PromptSchema:
        """
        Make a historical version of a prompt current again.

        The chosen entry's text and namespace are written as a brand new
        version; the history itself is left untouched. Any entry can be
        chosen, a ``DELETED`` marker included: its text is written like any
        other.
        """
        entry = await self.store.find_version(prompt_id, version)
        prompt = await self.store.write(
            PromptInput(id=entry.id, text=entry.text, namespace=entry.namespace)
        )
        logger.info(f"Rolled back prompt {prompt_id} to version {version} as version {prompt.version}")
        return prompt
