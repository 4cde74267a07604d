"""Repository for prompt and prompt history operations."""

from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.prompt import Prompt, PromptVersion


class PromptRepository:
    """Repository for the current prompt values and their history."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> List[Prompt]:
        """Find all current prompts ordered by id."""
        result = await self.db.execute(select(Prompt).order_by(Prompt.id))
        return list(result.scalars().all())

    async def find_by_id(self, prompt_id: str) -> Optional[Prompt]:
        """Find current prompt by ID."""
        result = await self.db.execute(select(Prompt).where(Prompt.id == prompt_id))
        return result.scalar_one_or_none()

    async def exists_any(self) -> bool:
        """Check whether any current prompt exists."""
        result = await self.db.execute(select(Prompt.id).limit(1))
        return result.scalar_one_or_none() is not None

    async def get_versions(self, prompt_id: str) -> List[PromptVersion]:
        """Get all history entries for a prompt, newest first."""
        result = await self.db.execute(
            select(PromptVersion)
            .where(PromptVersion.id == prompt_id)
            .order_by(PromptVersion.version.desc())
        )
        return list(result.scalars().all())

    async def find_version(self, prompt_id: str, version: int) -> Optional[PromptVersion]:
        """Find the history entry with exactly this version."""
        result = await self.db.execute(
            select(PromptVersion)
            .where(PromptVersion.id == prompt_id, PromptVersion.version == version)
        )
        return result.scalar_one_or_none()

    async def find_latest_version(self, prompt_id: str) -> Optional[PromptVersion]:
        """Find the newest history entry for a prompt."""
        result = await self.db.execute(
            select(PromptVersion)
            .where(PromptVersion.id == prompt_id)
            .order_by(PromptVersion.version.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def max_version(self, prompt_id: str) -> Optional[int]:
        """Get the highest version recorded for a prompt."""
        result = await self.db.execute(
            select(func.max(PromptVersion.version)).where(PromptVersion.id == prompt_id)
        )
        return result.scalar_one_or_none()

    async def append_version(
        self, prompt_id: str, text: str, version: int, namespace: Optional[str]
    ) -> PromptVersion:
        """Append an entry to the prompt history."""
        entry = PromptVersion(id=prompt_id, text=text, version=version, namespace=namespace)
        self.db.add(entry)
        await self.db.flush()
        return entry

    async def upsert(
        self, prompt_id: str, text: str, version: int, namespace: Optional[str]
    ) -> Prompt:
        """Create the current prompt or overwrite it in place."""
        prompt = await self.find_by_id(prompt_id)
        if prompt is None:
            prompt = Prompt(id=prompt_id, text=text, version=version, namespace=namespace)
            self.db.add(prompt)
        else:
            prompt.text = text
            prompt.version = version
            prompt.namespace = namespace

        await self.db.flush()
        return prompt

    async def delete(self, prompt_id: str) -> None:
        """Remove the current prompt, if any."""
        await self.db.execute(delete(Prompt).where(Prompt.id == prompt_id))
        await self.db.flush()
