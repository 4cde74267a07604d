"""Versioned prompt storage.

The store keeps two relations: the current value of every prompt and an
append-only history of every value a prompt has ever had, including a
``DELETED`` sentinel for each deletion. Each operation runs in its own
transaction while holding the store lock, so appending history and updating
the current value are observed as one step and no two operations on the
same store interleave.
"""

import asyncio
import logging
import time
from typing import Callable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..exceptions import PromptNotFoundException, VersionNotFoundException
from ..models.prompt import DELETED_TEXT
from ..repositories.prompt_repo import PromptRepository
from ..schemas.prompt import PromptInput, PromptSchema

logger = logging.getLogger(__name__)


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


class VersionedStore:
    """Single-writer store for current prompts and their version history."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        clock: Optional[Callable[[], int]] = None,
    ):
        self.session_factory = session_factory
        self.clock = clock or now_ms
        self._lock = asyncio.Lock()

    async def list(self) -> List[PromptSchema]:
        """Get all current prompts ordered by id."""
        async with self._lock, self.session_factory() as session:
            prompts = await PromptRepository(session).find_all()
            return [PromptSchema.model_validate(p) for p in prompts]

    async def get(self, prompt_id: str) -> PromptSchema:
        """Get the current value of a prompt."""
        async with self._lock, self.session_factory() as session:
            prompt = await PromptRepository(session).find_by_id(prompt_id)
            if prompt is None:
                raise PromptNotFoundException(f"Prompt {prompt_id} not found")
            logger.debug(f"Loaded prompt {prompt_id} at version {prompt.version}")
            return PromptSchema.model_validate(prompt)

    async def get_versions(self, prompt_id: str) -> List[PromptSchema]:
        """Get the full history of a prompt, newest first. Unknown ids have none."""
        async with self._lock, self.session_factory() as session:
            entries = await PromptRepository(session).get_versions(prompt_id)
            return [PromptSchema.model_validate(e) for e in entries]

    async def find_version(self, prompt_id: str, version: int) -> PromptSchema:
        """Get the history entry of a prompt with exactly this version."""
        async with self._lock, self.session_factory() as session:
            entry = await PromptRepository(session).find_version(prompt_id, version)
            if entry is None:
                raise VersionNotFoundException(
                    f"Prompt {prompt_id} has no version {version}"
                )
            return PromptSchema.model_validate(entry)

    async def is_empty(self) -> bool:
        """Check whether the store holds no current prompts."""
        async with self._lock, self.session_factory() as session:
            return not await PromptRepository(session).exists_any()

    async def write(self, data: PromptInput) -> PromptSchema:
        """
        Write a new current value for a prompt.

        Appends a history entry and upserts the current row under a fresh
        version stamp, then commits both together.
        """
        async with self._lock, self.session_factory() as session:
            async with session.begin():
                repo = PromptRepository(session)
                version = await self._next_version(repo, data.id)
                await repo.append_version(data.id, data.text, version, data.namespace)
                prompt = await repo.upsert(data.id, data.text, version, data.namespace)
                result = PromptSchema.model_validate(prompt)

        logger.info(f"Wrote prompt {data.id} version {version}")
        return result

    async def delete(self, prompt_id: str) -> PromptSchema:
        """
        Delete the current value of a prompt.

        Appends a ``DELETED`` history entry and removes the current row in
        one transaction. Deleting an unknown prompt only records the sentinel.
        Returns the sentinel entry, carrying the namespace the prompt was
        last published under.
        """
        async with self._lock, self.session_factory() as session:
            async with session.begin():
                repo = PromptRepository(session)
                namespace = await self._last_namespace(repo, prompt_id)
                version = await self._next_version(repo, prompt_id)
                entry = await repo.append_version(prompt_id, DELETED_TEXT, version, namespace)
                await repo.delete(prompt_id)
                result = PromptSchema.model_validate(entry)

        logger.info(f"Deleted prompt {prompt_id} at version {version}")
        return result

    async def _next_version(self, repo: PromptRepository, prompt_id: str) -> int:
        # Clock-derived, but always past the newest existing version of this id
        version = self.clock()
        latest = await repo.max_version(prompt_id)
        if latest is not None and version <= latest:
            logger.debug(
                f"Clock {version} not past latest version {latest} of {prompt_id}, bumping"
            )
            version = latest + 1
        return version

    async def _last_namespace(self, repo: PromptRepository, prompt_id: str) -> Optional[str]:
        prompt = await repo.find_by_id(prompt_id)
        if prompt is not None:
            return prompt.namespace
        entry = await repo.find_latest_version(prompt_id)
        return entry.namespace if entry is not None else None
