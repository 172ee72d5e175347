"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers, telemetry.
No business logic here (SRP). See tasktracker.core.lifespan and
tasktracker.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and optionally
clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from tasktracker.api import api_router
from tasktracker.core.config import get_settings
from tasktracker.core.exception_handlers import register_exception_handlers
from tasktracker.core.lifespan import create_lifespan
from tasktracker.core.limiter import limiter
from tasktracker.middleware import RequestIDMiddleware, TimeoutMiddleware
from tasktracker.pages import render_root_page


def _setup_telemetry(app: FastAPI) -> None:
    """Configure tracing and instrument the app (must run before the app starts)."""
    from tasktracker.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

    settings = get_settings()
    telemetry = TelemetryConfig(
        service_name=settings.app_name,
        service_version=settings.app_version,
        enabled=True,
        environment=settings.telemetry_environment,
    )
    telemetry.setup_telemetry(
        exporter_type=settings.telemetry_exporter,
        otlp_endpoint=settings.telemetry_otlp_endpoint,
        sample_rate=settings.telemetry_sample_rate,
    )
    telemetry.instrument_fastapi(app)
    set_telemetry(telemetry)


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    limiter.enabled = settings.rate_limit_enabled
    app.state.limiter = limiter

    register_exception_handlers(app)

    # Middleware: first added = innermost. Order (outer → inner): request ID → timeout → CORS.
    # Request ID is outermost so the 504 written by the timeout also carries the header.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix="/api")

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    def root() -> HTMLResponse:
        """Landing page with links to API documentation."""
        return HTMLResponse(content=render_root_page(settings.app_name))

    if settings.telemetry_enabled:
        _setup_telemetry(app)

    return app


app = create_app()
