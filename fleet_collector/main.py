import logging
import time
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError

from fleet_collector.api import health, hosts
from fleet_collector.config import get_settings
from fleet_collector.logging_config import setup_logging
from fleet_collector.services.host_registry import HostRegistry

logger = logging.getLogger(__name__)


def create_app(registry: Optional[HostRegistry] = None) -> FastAPI:
    """
    Build the collector application around a host registry.

    Every call without an explicit registry gets a fresh, empty one, so
    independent apps never share state.
    """
    app = FastAPI(title="Fleet Telemetry Collector")
    app.state.registry = registry if registry is not None else HostRegistry()

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        latency_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            latency_ms,
        )
        return response

    @app.exception_handler(RequestValidationError)
    async def log_rejected_payload(request: Request, exc: RequestValidationError):
        logger.info("Invalid payload for %s %s: %s", request.method, request.url.path, exc.errors())
        return await request_validation_exception_handler(request, exc)

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(hosts.router, prefix="/hosts", tags=["hosts"])

    return app


app = create_app()


def main() -> None:
    """Serve the collector on the configured host and port."""
    settings = get_settings()
    setup_logging(settings.log_level)

    logger.info("Listening on %s:%d", settings.collector_host, settings.collector_port)
    uvicorn.run(
        app,
        host=settings.collector_host,
        port=settings.collector_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
