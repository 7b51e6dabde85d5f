import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.cache import cache
from app.config import settings
from app.database import create_tables
from app.dependencies import use_comment_store
from app.error_handlers import install_error_handlers
from app.logging import setup_logging
from app.middleware import TimingMiddleware
from app.routers import comments, metrics
from app.stores import InMemoryCommentStore

VERSION = "1.0.0"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging()
    if settings.STORE_BACKEND == "memory":
        use_comment_store(app, InMemoryCommentStore())
        logger.info("Using in-memory comment store")
    elif settings.CREATE_TABLES:
        await create_tables()
    await cache.connect()  # App works without Redis
    yield
    # Shutdown
    await cache.disconnect()


app = FastAPI(
    title="Comments API",
    description="A simple service for managing comments",
    version=VERSION,
    contact={"email": "support@example.com"},
    license_info={"name": "Unlicense", "url": "http://unlicense.org"},
    lifespan=lifespan,
)

# Middleware
app.add_middleware(TimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)

# Routers
app.include_router(comments.router)
app.include_router(metrics.router)


@app.get("/health")
async def health():
    return {"status": "healthy", "version": VERSION}
