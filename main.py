import logging
import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import init_db
from app.core.errors import register_exception_handlers
from app.core.logging_config import setup_logging
from app.api.endpoints import blog, companies, contact, health, jobs, uploads

setup_logging(settings.LOG_LEVEL, settings.JSON_LOGS)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    logger.info("Starting up Job Board API...")
    init_db()
    logger.info("Models registered")

    yield

    logger.info("Shutting down Job Board API...")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Job listings, company profiles, blog and applications API",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_api_requests(request: Request, call_next):
    """Log one line per API request with status and duration"""
    start = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        # Unhandled errors re-raise here and become a 500 in the outer handler
        if request.url.path.startswith(settings.API_PREFIX):
            duration_ms = (time.perf_counter() - start) * 1000
            logger.info(f"{request.method} {request.url.path} {status_code} in {duration_ms:.0f}ms")


# Include routers
app.include_router(jobs.router, prefix=settings.API_PREFIX)
app.include_router(uploads.router, prefix=settings.API_PREFIX)
app.include_router(blog.router, prefix=settings.API_PREFIX)
app.include_router(companies.router, prefix=settings.API_PREFIX)
app.include_router(contact.router, prefix=settings.API_PREFIX)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint - API health check"""
    return {
        "message": "Job Board API",
        "version": "1.0.0",
        "status": "healthy"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=5000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
