"""Business logic services."""

from .prompt_service import PromptService
from .propagator import InMemoryPromptQueue, Propagator, PromptQueue, RedisPromptQueue
from .store import VersionedStore

__all__ = [
    "InMemoryPromptQueue",
    "PromptQueue",
    "PromptService",
    "Propagator",
    "RedisPromptQueue",
    "VersionedStore",
]
