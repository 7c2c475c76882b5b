from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.gzip import GZipMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from . import __version__
from .api.errors import register_exception_handlers
from .api.middleware.security import SecurityMiddleware
from .api.v1.router import api_router
from .config import Settings, settings as default_settings
from .core.repositories.implementations.memory.note_repository import InMemoryNoteRepository
from .core.repositories.note_repository import NoteRepository
from .utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    note_repository: NoteRepository | None = None,
) -> FastAPI:
    """Build the application around one note repository.

    A fresh, empty ``InMemoryNoteRepository`` is created unless one is passed
    in. Every request served by the returned app shares that instance.
    """
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(
        title="Notes API",
        debug=settings.debug,
        version=__version__,
        root_path=settings.root_path or "",
    )

    app.state.note_repository = note_repository or InMemoryNoteRepository(
        poison_policy=settings.store_poison_policy,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=settings.cors_origin_regex,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Accept", "Accept-Language", "Content-Language", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Proxy headers (X-Forwarded-*) when behind a load balancer
    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=["*"])

    # Trusted hosts (configure in env for production)
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.trusted_hosts)

    # GZip compression
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    app.add_middleware(SecurityMiddleware)

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.api_prefix)

    logger.info("Application created", extra={"poison_policy": settings.store_poison_policy})
    return app


app = create_app()
