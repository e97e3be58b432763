"""
Gremlin script primitives and the operator template registry.

Templates use ``str.format`` placeholders and are filled with literals
that are already rendered (quoted subjects, integers, nested fragments).
"""

from __future__ import annotations

from gremlin_script.core.exceptions import ErrorKind, GremlinScriptError
from gremlin_script.query.criteria import CriteriaType

# =============================================================================
# Script Primitives
# =============================================================================

GREMLIN_PRIMITIVE_GRAPH = "g"
GREMLIN_PRIMITIVE_INVOKE = "."
GREMLIN_PRIMITIVE_VERTEX_ALL = "V()"
GREMLIN_PRIMITIVE_EDGE_ALL = "E()"
GREMLIN_PRIMITIVE_WHERE = "where({})"
GREMLIN_PRIMITIVE_VALUES = "values({})"

# Reserved element properties of the backing store
PROPERTY_ID = "id"
PROPERTY_LABEL = "label"

# =============================================================================
# Operator Templates
# =============================================================================

OPERATOR_TEMPLATES: dict[CriteriaType, str] = {
    CriteriaType.IS_EQUAL: "has({}, {})",
    CriteriaType.EXISTS: "has({})",
    CriteriaType.BEFORE: "is(lt({}))",
    CriteriaType.AFTER: "is(gt({}))",
    CriteriaType.BETWEEN: "is(between({}, {}))",
    CriteriaType.AND: "and({}, {})",
    CriteriaType.OR: "or({}, {})",
}

# The label filter shares the equality template
GREMLIN_PRIMITIVE_HAS = OPERATOR_TEMPLATES[CriteriaType.IS_EQUAL]


def template_for(criteria_type: CriteriaType) -> str:
    """Return the script template for an operator.

    Args:
        criteria_type: Operator tag

    Returns:
        Template with one placeholder per operand

    Raises:
        GremlinScriptError: UNSUPPORTED_OPERATOR for an unknown tag
    """
    try:
        return OPERATOR_TEMPLATES[criteria_type]
    except (KeyError, TypeError) as e:
        raise GremlinScriptError(
            ErrorKind.UNSUPPORTED_OPERATOR,
            f"unsupported Criteria type: {criteria_type!r}",
            detail={"type": repr(criteria_type)},
        ) from e
