"""
Base service class for club site services.

Wraps a FastAPI app with the pieces every service shares: request id
propagation, per-route Prometheus metrics, structured access logs, the
health and metrics endpoints, and the mapping from SiteException to the
`{"message": ...}` error body.
"""

import os
import time
from typing import Dict, Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from shared.config import ServiceConfig, get_config
from shared.errors import SiteException
from shared.logging import clear_context, configure_logging, get_logger, get_request_id, set_request_id
from shared.metrics import get_metrics_collector

REQUEST_ID_HEADER = "X-Request-ID"
VERSION = "1.0.0"

# Unmatched paths share one label to keep metric cardinality bounded
UNMATCHED_ROUTE = "<unmatched>"


def route_template(request: Request) -> str:
    """Path template of the matched route, e.g. /pages/stories/{slug}."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_ROUTE


class BaseService:
    """Base service class with common functionality."""

    def __init__(self, service_name: str, port: int, config: Optional[ServiceConfig] = None):
        self.service_name = service_name
        self.port = port
        self.config = config or get_config(service_name, port)
        self._start_time = time.time()

        configure_logging(service_name, self.config.log_level, self.config.env)
        self.logger = get_logger(service_name)
        self.metrics = get_metrics_collector(service_name)

        self.app = FastAPI(
            title=f"{service_name.title()} Service",
            description=f"Club website - {service_name.title()} Service",
            version=VERSION,
            docs_url="/docs" if self.config.env == "local" else None,
            redoc_url=None,
        )

        self._setup_middleware()
        self._setup_routes()
        self._setup_error_handlers()

    def _setup_middleware(self):
        """Set up CORS and the request logging middleware."""

        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"] if self.config.env == "local" else [],
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

        @self.app.middleware("http")
        async def request_context(request: Request, call_next):
            request_id = set_request_id(request.headers.get(REQUEST_ID_HEADER))
            start_time = time.perf_counter()

            try:
                response = await call_next(request)
                duration = time.perf_counter() - start_time
                route = route_template(request)

                self.metrics.record_http_request(request.method, route, response.status_code, duration)
                # The query string is not logged: it carries the webhook secret
                self.logger.info(
                    "HTTP request",
                    method=request.method,
                    path=request.url.path,
                    route=route,
                    status_code=response.status_code,
                    duration_ms=round(duration * 1000, 2)
                )

                response.headers[REQUEST_ID_HEADER] = request_id
                return response
            finally:
                clear_context()

    def _setup_routes(self):
        """Set up health and metrics routes."""

        @self.app.get("/health")
        async def health_check():
            """Health check endpoint."""
            try:
                dependencies = await self._check_dependencies()
            except Exception as e:
                self.logger.error("Health check failed", error=str(e))
                self.metrics.record_health_check("error")
                return JSONResponse(
                    status_code=503,
                    content={"service": self.service_name, "status": "error", "error": str(e)}
                )

            self.metrics.record_health_check("ok")
            return {
                "service": self.service_name,
                "status": "ok",
                "uptime_seconds": round(time.time() - self._start_time, 3),
                "dependencies": dependencies,
                "version": VERSION,
                "commit": os.getenv("GIT_COMMIT", "unknown")
            }

        @self.app.get("/metrics")
        async def metrics_endpoint():
            """Prometheus metrics endpoint."""
            return Response(content=generate_latest(self.metrics.registry), media_type=CONTENT_TYPE_LATEST)

    def _setup_error_handlers(self):
        """Map exceptions to the {"message": ...} error body."""

        @self.app.exception_handler(SiteException)
        async def site_exception_handler(request: Request, exc: SiteException):
            log = self.logger.error if exc.status_code >= 500 else self.logger.warning
            log(
                "Request failed",
                code=exc.code,
                message=exc.message,
                details=exc.details,
                status_code=exc.status_code,
                path=request.url.path,
                request_id=get_request_id()
            )
            self.metrics.record_error(exc.code)
            return JSONResponse(status_code=exc.status_code, content=exc.to_response().model_dump())

        @self.app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            self.logger.error("Unhandled exception", path=request.url.path, exc_info=exc)
            self.metrics.record_error("INTERNAL_ERROR")
            return JSONResponse(status_code=500, content={"message": "Internal server error"})

    async def _check_dependencies(self) -> Dict[str, str]:
        """Report dependency status. Override in subclasses."""
        return {}

    def run(self):
        """Run the service under uvicorn."""
        import uvicorn
        uvicorn.run(
            self.app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
            # The request middleware writes the access line; uvicorn's own includes the query string
            access_log=False,
        )
