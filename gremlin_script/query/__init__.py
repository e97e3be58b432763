# Query module for Gremlin script generation
"""
Query layer turning repository criteria into Gremlin scripts:
- Criteria / CriteriaType: immutable predicate tree
- PredicateCompiler: criteria tree to predicate fragment
- FindScriptGenerator: full find script with scope and label filter
"""

from gremlin_script.query.compiler import PredicateCompiler
from gremlin_script.query.criteria import Criteria, CriteriaType, GremlinQuery
from gremlin_script.query.generator import (
    EntityKind,
    EntityMetadata,
    FindScriptGenerator,
    QueryScriptGenerator,
)
from gremlin_script.query.templates import template_for

__all__ = [
    # Criteria
    "Criteria",
    "CriteriaType",
    "GremlinQuery",
    # Entity
    "EntityKind",
    "EntityMetadata",
    # Generation
    "PredicateCompiler",
    "FindScriptGenerator",
    "QueryScriptGenerator",
    "template_for",
]
