"""
API routes for the gremlin-script service.

Provides endpoints for find-script generation and health checks.
"""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, status

from gremlin_script.api.dependencies import ServiceContainer
from gremlin_script.api.models import (
    FindScriptRequest,
    FindScriptResponse,
    HealthResponse,
    HTTPErrorResponse,
)
from gremlin_script.core.exceptions import GremlinScriptError
from gremlin_script.query.criteria import GremlinQuery

logger = logging.getLogger(__name__)

router = APIRouter()

API_VERSION = "1.0.0"


def get_services() -> ServiceContainer:
    """Get service container - injected at runtime."""
    # This is overridden by dependency injection in create_app
    msg = "Services not configured"
    raise RuntimeError(msg)


@router.post(
    "/v1/scripts/find",
    response_model=FindScriptResponse,
    responses={
        422: {"model": HTTPErrorResponse, "description": "Criteria cannot be compiled"},
        503: {"model": HTTPErrorResponse, "description": "Service unavailable"},
    },
    tags=["scripts"],
    summary="Generate the Gremlin find script for a criteria tree",
)
async def generate_find_script(
    request: FindScriptRequest,
    services: ServiceContainer = Depends(get_services),  # noqa: B008
) -> FindScriptResponse:
    """
    Compile a criteria tree into a Gremlin find script.

    Args:
        request: Criteria tree and entity metadata
        services: Injected service container

    Returns:
        FindScriptResponse with the generated scripts
    """
    if not services.config.enable_script_api:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"error": "script_api_disabled", "message": "Script generation is currently disabled"},
        )

    start_time = time.perf_counter()

    try:
        query = GremlinQuery(criteria=request.criteria.to_criteria())
        scripts = services.find_generator.generate(query, request.entity.to_metadata())
    except GremlinScriptError as e:
        logger.warning("Script generation failed (%s): %s", e.kind.value, e.message)
        raise HTTPException(
            status_code=422,
            detail={"error": e.kind.value, "message": e.message, "detail": e.detail},
        ) from e

    latency_ms = (time.perf_counter() - start_time) * 1000
    logger.info("Generated %d script(s) for %s in %.2fms", len(scripts), request.entity.entity_label, latency_ms)

    return FindScriptResponse(scripts=scripts, latency_ms=latency_ms)


@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check endpoint",
)
async def health_check(
    services: ServiceContainer = Depends(get_services),  # noqa: B008
) -> HealthResponse:
    """
    Check the health of the script service.

    Returns:
        HealthResponse with component statuses
    """
    service_statuses = {
        "find_generator": "healthy" if services.find_generator is not None else "not_configured",
        "script_api": "enabled" if services.config.enable_script_api else "disabled",
    }
    overall = "healthy" if services.find_generator is not None else "degraded"

    return HealthResponse(status=overall, services=service_statuses, version=API_VERSION)
