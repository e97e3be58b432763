"""
FastAPI application factory for the gremlin-script service.

Creates and configures the FastAPI application with routes and dependencies.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from gremlin_script.api.dependencies import ServiceConfig, ServiceContainer
from gremlin_script.core.logging import clear_correlation_id, set_correlation_id

REQUEST_ID_HEADER = "X-Request-ID"


def create_app(
    config: ServiceConfig | None = None,
    services: ServiceContainer | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Optional service configuration
        services: Optional pre-configured service container

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Gremlin Script Service",
        description="Compiles repository criteria into Gremlin traversal scripts",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def correlation_id_middleware(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER)
        if request_id:
            set_correlation_id(request_id)
        try:
            response = await call_next(request)
        finally:
            clear_correlation_id()
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return response

    if services is None:
        services = ServiceContainer(config=config or ServiceConfig())

    # Store services in app state for dependency injection
    app.state.services = services

    # Import routes here to avoid circular imports
    from gremlin_script.api.routes import get_services, router

    def _get_services() -> ServiceContainer:
        return app.state.services

    app.dependency_overrides[get_services] = _get_services

    app.include_router(router)

    return app


def configure_app_services(app: FastAPI, services: ServiceContainer) -> None:
    """
    Configure services for an existing app.

    This allows reconfiguring services after app creation,
    useful for testing.

    Args:
        app: FastAPI application instance
        services: Service container to use
    """
    from gremlin_script.api.routes import get_services

    app.state.services = services

    def _get_services() -> ServiceContainer:
        return app.state.services

    app.dependency_overrides[get_services] = _get_services
