"""FastAPI application entry point."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from studio.config import settings
from studio.database import init_db
from studio.logging_config import setup_logging, get_logger
from studio.services.seed_admin import seed_admin_user
from studio.middleware.errors import register_exception_handlers
from studio.middleware.logging_middleware import LoggingMiddleware
from studio.routes import (
    health,
    auth,
    posts,
    tags,
    reviews,
    recommendations,
    leads,
)


logger = get_logger("studio.main")


def _run_startup() -> None:
    """Create tables and make sure the configured admin exists."""
    init_db()
    logger.info("Database initialized")
    try:
        seed_admin_user()
    except Exception as e:
        logger.warning("Admin seed failed (non-fatal): %s", e)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Starting %s (%s)", settings.app_name, settings.environment)
    _run_startup()
    yield
    logger.info("Shutting down")


app = FastAPI(
    title=settings.app_name,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

register_exception_handlers(app)
app.add_middleware(LoggingMiddleware)
origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix=settings.api_prefix)
app.include_router(auth.router, prefix=settings.api_prefix)
app.include_router(posts.router, prefix=settings.api_prefix)
app.include_router(tags.router, prefix=settings.api_prefix)
app.include_router(reviews.router, prefix=settings.api_prefix)
app.include_router(recommendations.router, prefix=settings.api_prefix)
app.include_router(leads.router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": settings.app_name, "docs": "/docs"}
