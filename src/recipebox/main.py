"""FastAPI application entry point."""

import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from recipebox.config import get_settings
from recipebox.database import init_db
from recipebox.logging_config import LoggingContext, configure_logging, get_logger
from recipebox.routers import (
    grocery_list_router,
    meal_plan_router,
    preferences_router,
    recipes_router,
)

settings = get_settings()

# Configure logging on module load
configure_logging(log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Starting Recipebox API")

    init_db()
    logger.info("Database tables initialized")

    yield

    logger.info("Shutting down Recipebox API")


app = FastAPI(
    title="Recipebox API",
    description="Recipes, weekly meal planning and grocery lists",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Tag every log line emitted while handling a request with its id."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    with LoggingContext(request_id=request_id):
        response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


app.include_router(recipes_router)
app.include_router(meal_plan_router)
app.include_router(grocery_list_router)
app.include_router(preferences_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "recipebox-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Recipebox API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
