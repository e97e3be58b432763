"""
Pydantic models for API request/response validation.

These models define the contract for the script generation endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from gremlin_script.query.criteria import Criteria, CriteriaType
from gremlin_script.query.generator import EntityKind, EntityMetadata

_DATETIME_ADAPTER = TypeAdapter(datetime)

# ==============================================================================
# Script Generation Models
# ==============================================================================


class CriteriaModel(BaseModel):
    """One node of a criteria tree as sent over the wire."""

    model_config = ConfigDict(extra="forbid")

    type: CriteriaType = Field(description="Operator tag, e.g. IS_EQUAL, AND")
    subject: str | None = Field(
        default=None,
        description="Property the node filters on (omitted for AND/OR)",
    )
    sub_values: list[Any] | None = Field(
        default=None,
        description="Operand values; timestamps may be epoch ms or ISO-8601 strings",
    )
    sub_criteria: list[CriteriaModel] = Field(
        default_factory=list,
        description="Exactly two children for AND/OR",
    )

    @model_validator(mode="after")
    def parse_temporal_values(self) -> CriteriaModel:
        """Parse ISO-8601 operands of BEFORE/AFTER/BETWEEN into datetimes.

        Numbers are left alone: the compiler reads them as epoch milliseconds.
        """
        if self.type.is_temporal and self.sub_values:
            self.sub_values = [
                _DATETIME_ADAPTER.validate_python(v) if isinstance(v, str) else v
                for v in self.sub_values
            ]
        return self

    def to_criteria(self) -> Criteria:
        """Convert to an immutable Criteria tree (validates arity)."""
        return Criteria(
            type=self.type,
            subject=self.subject,
            sub_values=self.sub_values,
            sub_criteria=tuple(child.to_criteria() for child in self.sub_criteria),
        )


class EntityMetadataModel(BaseModel):
    """Metadata of the entity the query targets."""

    model_config = ConfigDict(extra="forbid")

    id_field_name: str = Field(default="id", description="Declared id field name")
    entity_label: str = Field(min_length=1, description="Label of the entity")
    entity_kind: EntityKind = Field(description="vertex, edge or graph")

    def to_metadata(self) -> EntityMetadata:
        return EntityMetadata(
            id_field_name=self.id_field_name,
            entity_label=self.entity_label,
            entity_kind=self.entity_kind,
        )


class FindScriptRequest(BaseModel):
    """Request model for find-script generation."""

    model_config = ConfigDict(extra="forbid")

    criteria: CriteriaModel = Field(description="Root of the criteria tree")
    entity: EntityMetadataModel = Field(description="Entity metadata")


class FindScriptResponse(BaseModel):
    """Response model for find-script generation."""

    scripts: list[str] = Field(description="Generated Gremlin scripts")
    latency_ms: float = Field(description="Generation time in milliseconds")


# ==============================================================================
# Health and Error Models
# ==============================================================================


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    model_config = ConfigDict(extra="forbid")

    status: str = Field(description="Overall health status")
    services: dict[str, str] = Field(
        default_factory=dict,
        description="Individual component statuses",
    )
    version: str = Field(description="API version")


class ErrorResponse(BaseModel):
    """Standard error response model."""

    model_config = ConfigDict(extra="forbid")

    error: str = Field(description="Error type")
    message: str = Field(description="Error message")
    detail: dict[str, Any] | None = Field(
        default=None,
        description="Additional error details",
    )


class HTTPErrorResponse(BaseModel):
    """Error body as sent by FastAPI: the payload sits under ``detail``.

    Route errors carry an ErrorResponse; request validation failures keep
    FastAPI's list of field errors.
    """

    detail: ErrorResponse | list[dict[str, Any]] = Field(description="Error payload")
