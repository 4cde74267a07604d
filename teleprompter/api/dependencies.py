"""Dependencies shared by the API routers."""

from fastapi import Request

from ..services.prompt_service import PromptService
from ..services.propagator import Propagator
from ..services.store import VersionedStore


def get_store(request: Request) -> VersionedStore:
    """Store of the running application."""
    return request.app.state.store


def get_propagator(request: Request) -> Propagator:
    """Propagator of the running application."""
    return request.app.state.propagator


def get_prompt_service(request: Request) -> PromptService:
    return PromptService(get_store(request))
