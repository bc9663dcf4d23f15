"""
EventHub Tickets API - Main Application Entry Point

Events and the tickets issued for them:
- Unique event names, unique ticket codes per event
- Tickets only for events that have not happened yet
- One-shot ticket usage, safe under concurrent requests
- Structured logging with request correlation
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from eventhub.core.config import get_settings
from eventhub.core.logging import setup_logging, get_logger
from eventhub.core.metrics import metrics_endpoint, record_domain_error
from eventhub.api.router import api_router
from eventhub.api.middleware import RequestLoggingMiddleware
from eventhub.db.session import dispose_engine
from eventhub.domain.errors import DomainError

settings = get_settings()
logger = get_logger(__name__)

HEALTH_MESSAGE = "I'm okay!"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown hooks."""
    setup_logging()

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )

    yield

    await dispose_engine()
    logger.info("application_shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Events and tickets with uniqueness and timing rules",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(api_router)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Single place where domain errors become HTTP responses."""
    record_domain_error(exc.code.value)
    logger.warning("domain_error", code=exc.code.value, message=exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code.value},
    )


@app.get("/health", tags=["Health"], response_class=PlainTextResponse)
async def health_check():
    """Liveness probe for Docker and load balancers."""
    return HEALTH_MESSAGE


@app.get("/metrics", tags=["Health"], include_in_schema=False)
async def metrics():
    return metrics_endpoint()
