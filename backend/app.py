from __future__ import annotations

# Standard library
import os
import logging as _logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Final

# Third-party
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from strawberry.fastapi import GraphQLRouter

# Local application imports
from api.auth import router as auth_router
from application.user.handlers.user_email_changed_handler import UserEmailChangedHandler
from domain.user.core.events.user_email_changed import UserEmailChanged
from graphql_api.context import GraphQLContext
from graphql_api.schema import create_schema
from infrastructure.config import get_recent_orders_limit
from infrastructure.events.in_memory_bus import InMemoryEventBus
from infrastructure.i18n.catalog_translator import get_translator, negotiate_locale
from infrastructure.persistence.factory import (
    get_order_repository,
    get_points_repository,
    get_session_repository,
    get_user_repository,
    reset_repositories,
)
from infrastructure.session.session_middleware import SessionMiddleware

load_dotenv()

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = _logging.getLogger("startup")

# Injected at build time (ENV APP_VERSION)
APP_VERSION = os.getenv("APP_VERSION", "0.0.0-dev")

event_bus: Final[InMemoryEventBus] = InMemoryEventBus()
event_bus.subscribe(UserEmailChanged, UserEmailChangedHandler().handle)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:  # pragma: no cover
    # Fail fast on bad persistence config instead of on first request
    get_user_repository()
    get_session_repository()
    logger.info("lifespan.ready", extra={"version": APP_VERSION})
    try:
        yield
    finally:
        logger.info("lifespan.shutdown", extra={"status": "cleanup"})
        reset_repositories()


app = FastAPI(
    title="Storefront Profile API",
    version=APP_VERSION,
    lifespan=lifespan,
)
app.add_middleware(SessionMiddleware, repository_getter=get_session_repository)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


def get_graphql_context(request: Request) -> GraphQLContext:
    """Per-request GraphQL context (locale from Accept-Language)."""
    locale = negotiate_locale(request.headers.get("Accept-Language"))
    return GraphQLContext(
        user_repository=get_user_repository(),
        order_repository=get_order_repository(),
        points_repository=get_points_repository(),
        event_bus=event_bus,
        translator=get_translator(locale),
        recent_orders_limit=get_recent_orders_limit(),
        request=request,
    )


schema = create_schema()
graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
app.include_router(auth_router)
