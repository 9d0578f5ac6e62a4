import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from app.api.errors import unexpected_error_handler
from app.api.routes import search
from app.core.config import SearchSettings
from app.core.credentials import CredentialResolver, resolve_credentials
from app.core.gateway import SearchGateway
from app.core.logging_setup import setup_logging
from app.core.search_service import SearchService

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to the Tender Tool Search API"


def build_client(
    settings: SearchSettings,
    credentials: CredentialResolver,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    timeout = httpx.Timeout(settings.read_timeout_sec, connect=settings.connect_timeout_sec)
    return httpx.AsyncClient(
        base_url=settings.endpoint,
        timeout=timeout,
        verify=settings.verify_tls,
        auth=credentials.resolve(),
        transport=transport,
    )


def create_app(
    settings: Optional[SearchSettings] = None,
    credentials: Optional[CredentialResolver] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the API. Settings are read from the environment at startup unless given,
    `transport` lets tests stand in for the index.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        resolved = settings or SearchSettings.from_env()
        resolver = credentials or resolve_credentials(resolved)

        async with build_client(resolved, resolver, transport) as client:
            app.state.search_service = SearchService(SearchGateway(client), index=resolved.index)
            logger.info("Tender search API ready. Index: %s", resolved.index)
            yield

    app = FastAPI(
        title="Tender Search",
        lifespan=lifespan,
    )

    app.include_router(search.router, prefix="/search", tags=["search"])
    app.add_exception_handler(Exception, unexpected_error_handler)

    @app.get("/", response_class=PlainTextResponse)
    def welcome() -> str:
        return WELCOME_MESSAGE

    @app.get("/health")
    def health(request: Request):
        return request.app.state.search_service.health_check()

    return app


setup_logging()
app = create_app()
