"""
Propagation of prompt changes to subscribers.

After a change is committed, an ``update`` message (carrying the new current
prompt) or a ``delete`` message (carrying the bare id) is pushed onto the
queue of the prompt's namespace. Delivery is best effort: a failure is logged
and never retried inline, and never changes the outcome of the request that
triggered it.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Protocol, Union

import redis.asyncio as redis

from ..schemas.prompt import DeleteMessage, PromptSchema, UpdateMessage

logger = logging.getLogger(__name__)

PromptMessage = Union[UpdateMessage, DeleteMessage]


class PromptQueue(Protocol):
    """Transport delivering encoded messages to a namespace's subscribers."""

    async def send(self, namespace: str, body: str) -> None:
        ...

    async def close(self) -> None:
        ...


class InMemoryPromptQueue:
    """Queue keeping messages in process, for development and tests."""

    def __init__(self):
        self.messages: Dict[str, List[str]] = defaultdict(list)

    async def send(self, namespace: str, body: str) -> None:
        self.messages[namespace].append(body)

    async def close(self) -> None:
        pass


class RedisPromptQueue:
    """Queue backed by one Redis list per namespace."""

    def __init__(self, client: "redis.Redis", key_prefix: str = "teleprompter:"):
        self.client = client
        self.key_prefix = key_prefix

    @classmethod
    def from_url(cls, url: str, key_prefix: str = "teleprompter:") -> "RedisPromptQueue":
        return cls(redis.from_url(url, decode_responses=True), key_prefix=key_prefix)

    def key_for(self, namespace: str) -> str:
        return f"{self.key_prefix}{namespace}"

    async def send(self, namespace: str, body: str) -> None:
        await self.client.rpush(self.key_for(namespace), body)

    async def close(self) -> None:
        await self.client.aclose()


class Propagator:
    """Builds change notifications and hands them to the queue."""

    def __init__(self, queue: PromptQueue, default_namespace: str = "default"):
        self.queue = queue
        self.default_namespace = default_namespace

    async def propagate_update(self, prompt: PromptSchema) -> bool:
        """Notify subscribers of a new current value. Returns False on failure."""
        message = UpdateMessage(prompt=prompt)
        return await self._send(prompt.namespace, message, prompt.id)

    async def propagate_delete(self, prompt_id: str, namespace: Optional[str]) -> bool:
        """Notify subscribers that a prompt was deleted. Returns False on failure."""
        message = DeleteMessage(id=prompt_id)
        return await self._send(namespace, message, prompt_id)

    async def _send(self, namespace: Optional[str], message: PromptMessage, prompt_id: str) -> bool:
        target = namespace or self.default_namespace
        try:
            await self.queue.send(target, message.model_dump_json(exclude_none=True))
        except Exception:
            logger.exception(
                f"Failed to propagate {message.type} of prompt {prompt_id} to namespace {target}"
            )
            return False

        logger.info(f"Propagated {message.type} of prompt {prompt_id} to namespace {target}")
        return True
