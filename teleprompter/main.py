"""Main FastAPI application for the teleprompter service."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import prompts
from .config import Settings, get_settings
from .database import create_engine, create_session_factory, init_db
from .exceptions import TeleprompterException, map_to_http_exception
from .seed import load_seed_if_empty
from .services.propagator import InMemoryPromptQueue, Propagator, PromptQueue, RedisPromptQueue
from .services.store import VersionedStore
from .utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def create_queue(settings: Settings) -> PromptQueue:
    """Create the propagation transport selected in the settings."""
    if settings.queue_backend == "redis":
        return RedisPromptQueue.from_url(settings.redis_url, key_prefix=settings.queue_key_prefix)
    return InMemoryPromptQueue()


def create_app(settings: Optional[Settings] = None, queue: Optional[PromptQueue] = None) -> FastAPI:
    """Build the application with its store, queue and propagator."""
    settings = settings or get_settings()
    setup_logging(
        settings.service_name,
        settings.log_file,
        log_level=settings.log_level,
        log_dir=settings.log_dir,
        log_to_file=settings.log_to_file,
    )

    engine = create_engine(settings)
    store = VersionedStore(create_session_factory(engine))
    queue = queue or create_queue(settings)
    propagator = Propagator(queue, default_namespace=settings.default_namespace)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(f"Starting {settings.service_name} v{settings.service_version}")
        await init_db(engine)
        if settings.initial_data_path:
            await load_seed_if_empty(store, Path(settings.initial_data_path))
        yield
        logger.info(f"Shutting down {settings.service_name}")
        await queue.close()
        await engine.dispose()

    # redirect_slashes=False: trailing-slash variants are routed explicitly
    app = FastAPI(
        title="Teleprompter",
        description="Versioned prompts with runtime replacement and rollback",
        version=settings.service_version,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.queue = queue
    app.state.propagator = propagator

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(TeleprompterException)
    async def service_exception_handler(request: Request, exc: TeleprompterException):
        """Handle service exceptions."""
        http_exc = map_to_http_exception(exc)
        logger.info(f"{request.method} {request.url.path} -> {http_exc.status_code}: {exc}")
        return JSONResponse(status_code=http_exc.status_code, content={"detail": http_exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed request bodies are client errors (400), not 422."""
        logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Bad request", "errors": jsonable_encoder(exc.errors())},
        )

    app.include_router(prompts.router)
    app.include_router(prompts.fallback_router)
    return app

