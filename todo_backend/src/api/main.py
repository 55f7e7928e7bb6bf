from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from .db import dispose_engine, init_engine
from .errors import register_error_handlers
from .logging_config import setup_logging
from .routers import todos as todos_router
from .schemas import HealthStatus
from .settings import get_settings

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "todos", "description": "Create, list, update and delete Todo items."},
]

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Set up logging and the connection pool on startup; release the pool on shutdown."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_engine(settings)
    logger.info("Todo backend started")
    yield
    dispose_engine()
    logger.info("Todo backend stopped")


app = FastAPI(
    title="Todo Backend",
    description="Backend API service for managing todos stored in PostgreSQL.",
    version="1.0.0",
    openapi_tags=openapi_tags,
    lifespan=lifespan,
)

_settings = get_settings()

# Configure CORS based on settings (.env -> CORS_ALLOW_ORIGINS), with '*' fallback
allow_all = (_settings.cors_allow_origins == ["*"]) or (len(_settings.cors_allow_origins) == 0)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if allow_all else _settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


register_error_handlers(app)


# PUBLIC_INTERFACE
@app.get("/health", response_model=HealthStatus, summary="Health Check", tags=["health"])
def health_check() -> HealthStatus:
    """
    Health check endpoint. Static payload, no database access.
    """
    return HealthStatus()


app.include_router(todos_router.router)
