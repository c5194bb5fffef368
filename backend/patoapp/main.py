"""PatoApp API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PatoAppError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Storage, repository and auth store built on startup via lifespan
    - AuthStore.initialize() runs before the first request is served

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Services on app.state: routes reach them through Depends(), tests swap them
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from patoapp.api.error_handlers import register_error_handlers
from patoapp.api.routes import auth, health, patos, subscription
from patoapp.config import Settings, get_settings
from patoapp.core.repository_protocols import KeyValueStore
from patoapp.infrastructure import database
from patoapp.infrastructure.kv_store import InMemoryKeyValueStore, SqlKeyValueStore
from patoapp.infrastructure.observability import setup_logging
from patoapp.services.auth_store import AuthStore
from patoapp.services.pato_repository import PatoRepository
from patoapp.services.subscription import SubscriptionService

logger = logging.getLogger(__name__)


async def build_store(settings: Settings) -> KeyValueStore:
    """Pick the key-value backend named by settings."""
    if settings.storage_backend == "memory":
        return InMemoryKeyValueStore()
    manager = database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.create_tables()
    return SqlKeyValueStore(manager)


async def attach_services(
    app: FastAPI, store: KeyValueStore, payment_delay_seconds: float,
) -> None:
    """Wire repository, auth store and subscription service onto app.state."""
    auth_store = AuthStore(store)
    await auth_store.initialize()
    app.state.kv_store = store
    app.state.pato_repository = PatoRepository(store)
    app.state.auth_store = auth_store
    app.state.subscription_service = SubscriptionService(
        auth_store, delay_seconds=payment_delay_seconds,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    store = await build_store(settings)
    await attach_services(app, store, settings.payment_delay_seconds)
    logger.info(f"PatoApp API started (storage={settings.storage_backend})")
    yield
    if database.db_manager is not None:
        await database.db_manager.dispose()
    logger.info("PatoApp API shutting down")


app = FastAPI(title="PatoApp API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(patos.router)
app.include_router(subscription.router)
