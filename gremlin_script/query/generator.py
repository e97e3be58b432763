"""
Find-script generation.

Wraps a compiled predicate with the traversal source, the vertex/edge
scope and the label filter:

    g.V().has('label', 'Person').where(has('name', 'Alice'))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from gremlin_script.core.exceptions import ErrorKind, GremlinScriptError
from gremlin_script.query.compiler import PredicateCompiler
from gremlin_script.query.criteria import GremlinQuery
from gremlin_script.query.literals import quote
from gremlin_script.query.templates import (
    GREMLIN_PRIMITIVE_EDGE_ALL,
    GREMLIN_PRIMITIVE_GRAPH,
    GREMLIN_PRIMITIVE_HAS,
    GREMLIN_PRIMITIVE_INVOKE,
    GREMLIN_PRIMITIVE_VERTEX_ALL,
    GREMLIN_PRIMITIVE_WHERE,
    PROPERTY_LABEL,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Entity Metadata
# =============================================================================


class EntityKind(Enum):
    """What a domain entity is stored as."""

    VERTEX = "vertex"
    EDGE = "edge"
    GRAPH = "graph"


@dataclass(frozen=True)
class EntityMetadata:
    """Read-only metadata of the entity a query targets.

    Attributes:
        id_field_name: Declared name of the entity's id field
        entity_label: Label stored on every element of this entity
        entity_kind: Vertex, edge or graph root
    """

    id_field_name: str
    entity_label: str
    entity_kind: EntityKind

    def __post_init__(self) -> None:
        if isinstance(self.entity_kind, EntityKind):
            return
        try:
            object.__setattr__(self, "entity_kind", EntityKind(self.entity_kind))
        except ValueError as e:
            raise GremlinScriptError(
                ErrorKind.UNSUPPORTED_SCOPE,
                f"Unknown entity kind: {self.entity_kind!r}",
                detail={"entity_kind": repr(self.entity_kind)},
            ) from e

    @property
    def is_vertex(self) -> bool:
        return self.entity_kind is EntityKind.VERTEX

    @property
    def is_edge(self) -> bool:
        return self.entity_kind is EntityKind.EDGE


# =============================================================================
# Generators
# =============================================================================


@runtime_checkable
class QueryScriptGenerator(Protocol):
    """Protocol for anything that turns a query into Gremlin scripts."""

    def generate(self, query: GremlinQuery, entity: EntityMetadata) -> list[str]:
        """Generate the scripts for a query."""
        ...


class FindScriptGenerator:
    """Generates the find script for a criteria query.

    Usage:
        generator = FindScriptGenerator()
        scripts = generator.generate(GremlinQuery(criteria), entity)
    """

    def __init__(
        self,
        compiler: PredicateCompiler | None = None,
        label_property: str = PROPERTY_LABEL,
    ) -> None:
        """Initialize generator.

        Args:
            compiler: Predicate compiler (default instance if None)
            label_property: Reserved property the label filter asserts on
        """
        self._compiler = compiler or PredicateCompiler()
        self._label_property = label_property

    def generate(self, query: GremlinQuery, entity: EntityMetadata) -> list[str]:
        """Generate the find script.

        Always a single script today; the list leaves room for
        multi-statement output.

        Raises:
            GremlinScriptError: UNSUPPORTED_SCOPE for graph-root entities,
                or any compiler error
        """
        script = GREMLIN_PRIMITIVE_INVOKE.join(self._generate_fragments(query, entity))
        logger.debug("Generated find script for %s: %s", entity.entity_label, script)
        return [script]

    def _generate_fragments(self, query: GremlinQuery, entity: EntityMetadata) -> list[str]:
        fragments = [GREMLIN_PRIMITIVE_GRAPH]

        if entity.is_vertex:
            fragments.append(GREMLIN_PRIMITIVE_VERTEX_ALL)
        elif entity.is_edge:
            fragments.append(GREMLIN_PRIMITIVE_EDGE_ALL)
        else:
            raise GremlinScriptError(
                ErrorKind.UNSUPPORTED_SCOPE,
                "Cannot generate script from graph entity",
                detail={"entity_kind": entity.entity_kind.value, "entity_label": entity.entity_label},
            )

        fragments.append(
            GREMLIN_PRIMITIVE_HAS.format(quote(self._label_property), quote(entity.entity_label))
        )
        predicate = self._compiler.compile(query.criteria, entity)
        fragments.append(GREMLIN_PRIMITIVE_WHERE.format(predicate))

        return fragments
