"""
API module for the gremlin-script service.

Provides FastAPI routes for find-script generation.
"""

from gremlin_script.api.app import create_app
from gremlin_script.api.models import (
    CriteriaModel,
    EntityMetadataModel,
    FindScriptRequest,
    FindScriptResponse,
)
from gremlin_script.api.routes import router

__all__ = [
    "create_app",
    "router",
    "CriteriaModel",
    "EntityMetadataModel",
    "FindScriptRequest",
    "FindScriptResponse",
]
