"""
Predicate compiler: criteria tree to Gremlin predicate fragment.

Each node becomes an anonymous-traversal expression usable inside
``where(...)``:

    EXISTS(since)               -> has('since')
    IS_EQUAL(name, 'Alice')     -> has('name', 'Alice')
    BEFORE(createdAt, t)        -> values('createdAt').is(lt(<ms>))
    AFTER(createdAt, t)         -> values('createdAt').is(gt(<ms>))
    BETWEEN(createdAt, a, b)    -> values('createdAt').is(between(a, b))
    AND(x, y) / OR(x, y)        -> and(<x>, <y>) / or(<x>, <y>)

The entity's id field is never written by its declared name: the store
keeps element ids under a reserved property.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gremlin_script.core.exceptions import ErrorKind, GremlinScriptError
from gremlin_script.query.criteria import Criteria, CriteriaType
from gremlin_script.query.literals import quote, time_to_milliseconds, to_literal, to_primitive_long
from gremlin_script.query.templates import (
    GREMLIN_PRIMITIVE_INVOKE,
    GREMLIN_PRIMITIVE_VALUES,
    PROPERTY_ID,
    template_for,
)

if TYPE_CHECKING:
    from gremlin_script.query.generator import EntityMetadata

logger = logging.getLogger(__name__)


class PredicateCompiler:
    """Compiles criteria trees into predicate fragments.

    Stateless apart from the reserved id property, so one instance can be
    shared between threads.

    Usage:
        compiler = PredicateCompiler()
        fragment = compiler.compile(criteria, entity)
    """

    def __init__(self, id_property: str = PROPERTY_ID) -> None:
        """Initialize compiler.

        Args:
            id_property: Reserved property written in place of the id field
        """
        self._id_property = id_property

    def compile(self, criteria: Criteria, entity: EntityMetadata) -> str:
        """Compile a criteria tree.

        Args:
            criteria: Root of the tree
            entity: Metadata of the entity being queried

        Returns:
            Predicate fragment, without the surrounding ``where(...)``

        Raises:
            GremlinScriptError: UNSUPPORTED_OPERATOR or UNSUPPORTED_VALUE
        """
        fragment = self._compile_node(criteria, entity)
        logger.debug("Compiled %s criteria for %s: %s", criteria.type, entity.entity_label, fragment)
        return fragment

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _compile_node(self, criteria: Criteria, entity: EntityMetadata) -> str:
        """Post-order walk with an explicit stack; left children compile first."""
        stack: list[tuple[Criteria, bool]] = [(criteria, False)]
        fragments: list[str] = []

        while stack:
            node, children_done = stack.pop()

            if node.type is CriteriaType.AND or node.type is CriteriaType.OR:
                if children_done:
                    right = fragments.pop()
                    left = fragments.pop()
                    fragments.append(template_for(node.type).format(left, right))
                else:
                    stack.append((node, True))
                    stack.append((node.sub_criteria[1], False))
                    stack.append((node.sub_criteria[0], False))
            else:
                fragments.append(self._compile_leaf(node, entity))

        return fragments[0]

    def _compile_leaf(self, criteria: Criteria, entity: EntityMetadata) -> str:
        criteria_type = criteria.type

        if criteria_type is CriteriaType.IS_EQUAL:
            return self._compile_is_equal(criteria, entity)
        elif criteria_type is CriteriaType.BEFORE or criteria_type is CriteriaType.AFTER:
            return self._compile_comparison(criteria, entity)
        elif criteria_type is CriteriaType.BETWEEN:
            return self._compile_range(criteria, entity)
        elif criteria_type is CriteriaType.EXISTS:
            return self._compile_exists(criteria, entity)

        raise GremlinScriptError(
            ErrorKind.UNSUPPORTED_OPERATOR,
            f"unsupported Criteria type: {criteria_type!r}",
            detail={"type": repr(criteria_type)},
        )

    # =========================================================================
    # Node Translation
    # =========================================================================

    def _subject(self, criteria: Criteria, entity: EntityMetadata) -> str:
        """Quoted subject, with the id field mapped to the reserved id property."""
        subject = criteria.subject
        if subject == entity.id_field_name:
            subject = self._id_property
        return quote(subject)

    def _compile_exists(self, criteria: Criteria, entity: EntityMetadata) -> str:
        return template_for(CriteriaType.EXISTS).format(self._subject(criteria, entity))

    def _compile_is_equal(self, criteria: Criteria, entity: EntityMetadata) -> str:
        value = to_literal(criteria.sub_values[0])
        return template_for(CriteriaType.IS_EQUAL).format(self._subject(criteria, entity), value)

    def _compile_comparison(self, criteria: Criteria, entity: EntityMetadata) -> str:
        """BEFORE/AFTER against a timestamp, e.g. findByCreatedAtBefore(date)."""
        milliseconds = time_to_milliseconds(criteria.sub_values[0])
        query = template_for(criteria.type).format(milliseconds)
        return self._on_values(criteria, entity, query)

    def _compile_range(self, criteria: Criteria, entity: EntityMetadata) -> str:
        """BETWEEN with bounds kept in the order given, e.g. findByCreatedAtBetween(a, b)."""
        start = to_primitive_long(criteria.sub_values[0])
        end = to_primitive_long(criteria.sub_values[1])
        query = template_for(criteria.type).format(start, end)
        return self._on_values(criteria, entity, query)

    def _on_values(self, criteria: Criteria, entity: EntityMetadata, query: str) -> str:
        values = GREMLIN_PRIMITIVE_VALUES.format(self._subject(criteria, entity))
        return GREMLIN_PRIMITIVE_INVOKE.join((values, query))
