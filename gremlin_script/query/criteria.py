"""
Criteria model for repository queries.

A criteria tree is the predicate a repository query filters on. Leaves
test one subject (a property name) against zero, one or two values;
AND/OR nodes combine exactly two children. The tree is built top-down by
the caller and is immutable once constructed.

Arity is validated when a node is created, so a malformed tree never
reaches the compiler.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from gremlin_script.core.exceptions import ErrorKind, GremlinScriptError

# =============================================================================
# Criteria Types
# =============================================================================


class CriteriaType(Enum):
    """Closed set of operators a criteria node can carry.

    - IS_EQUAL: subject equals one value
    - EXISTS: subject is present, no value
    - BEFORE / AFTER: subject's timestamp is earlier / later than one value
    - BETWEEN: subject lies between two bounds
    - AND / OR: combination of exactly two sub-criteria
    """

    IS_EQUAL = "IS_EQUAL"
    AND = "AND"
    OR = "OR"
    BEFORE = "BEFORE"
    AFTER = "AFTER"
    BETWEEN = "BETWEEN"
    EXISTS = "EXISTS"

    @property
    def value_count(self) -> int:
        """Number of values a node of this type must carry."""
        return _VALUE_COUNTS[self]

    @property
    def is_combinator(self) -> bool:
        """True for AND/OR, which take sub-criteria instead of values."""
        return self in _COMBINATORS

    @property
    def is_temporal(self) -> bool:
        """True for operators whose values are normalized to timestamps."""
        return self in _TEMPORAL


_VALUE_COUNTS: dict[CriteriaType, int] = {
    CriteriaType.EXISTS: 0,
    CriteriaType.IS_EQUAL: 1,
    CriteriaType.BEFORE: 1,
    CriteriaType.AFTER: 1,
    CriteriaType.BETWEEN: 2,
    CriteriaType.AND: 0,
    CriteriaType.OR: 0,
}

_COMBINATORS = frozenset({CriteriaType.AND, CriteriaType.OR})
_TEMPORAL = frozenset({CriteriaType.BEFORE, CriteriaType.AFTER, CriteriaType.BETWEEN})

COMBINATOR_ARITY = 2


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class Criteria:
    """One node of a criteria tree.

    Attributes:
        type: Operator tag
        subject: Property name the node filters on (unused by AND/OR)
        sub_values: Raw operand values, length fixed by ``type``
        sub_criteria: Exactly two children for AND/OR, empty otherwise

    Raises:
        GremlinScriptError: MALFORMED_CRITERIA when the node does not match
            its operator's arity, UNSUPPORTED_OPERATOR when ``type`` is not
            a CriteriaType
    """

    type: CriteriaType
    subject: str | None = None
    sub_values: tuple[Any, ...] | None = ()
    sub_criteria: tuple[Criteria, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.type, CriteriaType):
            raise GremlinScriptError(
                ErrorKind.UNSUPPORTED_OPERATOR,
                f"unsupported Criteria type: {self.type!r}",
                detail={"type": repr(self.type)},
            )

        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "sub_values", tuple(self.sub_values or ()))
        object.__setattr__(self, "sub_criteria", tuple(self.sub_criteria or ()))

        if self.type.is_combinator:
            self._validate_combinator()
        else:
            self._validate_leaf()

    def _validate_combinator(self) -> None:
        if len(self.sub_criteria) != COMBINATOR_ARITY:
            raise self._malformed(
                f"{self.type.value} requires exactly {COMBINATOR_ARITY} sub-criteria, "
                f"got {len(self.sub_criteria)}"
            )
        if self.sub_values:
            raise self._malformed(f"{self.type.value} takes no values")
        for child in self.sub_criteria:
            if not isinstance(child, Criteria):
                raise self._malformed(
                    f"{self.type.value} children must be Criteria, "
                    f"got {type(child).__name__}"
                )

    def _validate_leaf(self) -> None:
        if not self.subject:
            raise self._malformed(f"{self.type.value} requires a subject")
        if self.sub_criteria:
            raise self._malformed(f"{self.type.value} takes no sub-criteria")

        expected = self.type.value_count
        if len(self.sub_values) != expected:
            raise self._malformed(
                f"{self.type.value} requires {expected} value(s), "
                f"got {len(self.sub_values)}"
            )

    def _malformed(self, message: str) -> GremlinScriptError:
        return GremlinScriptError(
            ErrorKind.MALFORMED_CRITERIA,
            message,
            detail={"type": self.type.value, "subject": self.subject},
        )

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def leaf(cls, type: CriteriaType, subject: str, *values: Any) -> Criteria:
        """Build a subject/value node, e.g. ``Criteria.leaf(IS_EQUAL, "name", "Alice")``."""
        return cls(type=type, subject=subject, sub_values=values)

    @classmethod
    def combine(cls, type: CriteriaType, left: Criteria, right: Criteria) -> Criteria:
        """Build an AND/OR node over two existing nodes."""
        return cls(type=type, sub_criteria=(left, right))


@dataclass(frozen=True)
class GremlinQuery:
    """A find query: the root of its criteria tree."""

    criteria: Criteria
