"""
Graph element sources.

A graph entity collects the vertices and edges read back from the store.
Each element carries its own ``kind`` discriminant; the container files
it once, at insertion, and never inspects it again.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from gremlin_script.core.exceptions import ErrorKind, GremlinScriptError


class ElementKind(Enum):
    """Discriminant carried by every graph element."""

    VERTEX = "vertex"
    EDGE = "edge"
    GRAPH = "graph"


@dataclass(frozen=True)
class GraphElement:
    """A vertex or edge as read from the store.

    Attributes:
        kind: Element discriminant
        id: Element id
        label: Element label
        properties: Remaining element properties
    """

    kind: ElementKind
    id: Any = None
    label: str | None = None
    properties: dict[str, Any] = field(default_factory=dict)


@dataclass
class GraphElementContainer:
    """Vertices and edges of one graph entity, in discovery order.

    Append-only: elements are added, never removed.
    """

    id_field_name: str | None = None
    label: str | None = None
    vertices: list[GraphElement] = field(default_factory=list)
    edges: list[GraphElement] = field(default_factory=list)

    def add_element(self, element: GraphElement) -> None:
        """File an element under vertices or edges by its kind.

        Raises:
            GremlinScriptError: TYPE_MISMATCH if the element is neither
                a vertex nor an edge
        """
        kind = getattr(element, "kind", None)

        if kind is ElementKind.VERTEX:
            self.vertices.append(element)
        elif kind is ElementKind.EDGE:
            self.edges.append(element)
        else:
            raise GremlinScriptError(
                ErrorKind.TYPE_MISMATCH,
                "source type can only be Vertex or Edge",
                detail={"kind": kind.value if isinstance(kind, ElementKind) else repr(kind)},
            )

    def add_elements(self, elements: Iterable[GraphElement]) -> None:
        """Add several elements in order, stopping at the first mismatch."""
        for element in elements:
            self.add_element(element)

    def __len__(self) -> int:
        return len(self.vertices) + len(self.edges)
