import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from jobpoll.app.api import routes_greeting, routes_jobs
from jobpoll.config import Settings, load_settings
from jobpoll.domain.services.job_service import JobService
from jobpoll.infrastructure.clock import Clock, utc_now
from jobpoll.infrastructure.persistence.in_memory_repo import InMemoryJobRepository

logger = logging.getLogger("uvicorn.access")


class LogRequestsMiddleware(BaseHTTPMiddleware):
    """Log when a request is received, before the handler runs."""

    async def dispatch(self, request, call_next):
        logger.info("Request started: %s %s", request.method, request.url.path)
        return await call_next(request)


def create_app(
    settings: Optional[Settings] = None,
    clock: Clock = utc_now,
    job_service: Optional[JobService] = None,
) -> FastAPI:
    """
    Build the API around its own job store. Every call gets an independent
    store unless ``job_service`` is passed in.
    """
    settings = settings or load_settings()
    if job_service is None:
        job_service = JobService(
            InMemoryJobRepository(clock=clock),
            duration=settings.job_duration,
            clock=clock,
        )

    app = FastAPI(title="jobpoll API", version="0.1.0")
    app.state.settings = settings
    app.state.job_service = job_service

    app.add_middleware(LogRequestsMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(routes_jobs.router)
    app.include_router(routes_greeting.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
