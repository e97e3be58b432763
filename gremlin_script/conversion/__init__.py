"""
Conversion layer: graph elements read back from the store.
"""

from gremlin_script.conversion.source import ElementKind, GraphElement, GraphElementContainer

__all__ = [
    "ElementKind",
    "GraphElement",
    "GraphElementContainer",
]
