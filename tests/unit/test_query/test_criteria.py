"""
Unit tests for the criteria model.

Tests cover:
- Arity contract per CriteriaType
- Eager validation of malformed nodes
- Immutability and value normalization
- Leaf/combine factories
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from gremlin_script.core.exceptions import ErrorKind, GremlinScriptError
from gremlin_script.query.criteria import Criteria, CriteriaType, GremlinQuery

# =============================================================================
# Test: CriteriaType Arity
# =============================================================================


class TestCriteriaTypeArity:
    """Tests for the fixed value counts of each operator."""

    @pytest.mark.parametrize(
        ("criteria_type", "expected"),
        [
            (CriteriaType.EXISTS, 0),
            (CriteriaType.IS_EQUAL, 1),
            (CriteriaType.BEFORE, 1),
            (CriteriaType.AFTER, 1),
            (CriteriaType.BETWEEN, 2),
            (CriteriaType.AND, 0),
            (CriteriaType.OR, 0),
        ],
    )
    def test_value_count(self, criteria_type: CriteriaType, expected: int) -> None:
        """Each operator declares how many values it takes."""
        assert criteria_type.value_count == expected

    def test_only_and_or_are_combinators(self) -> None:
        """AND and OR are the only combinators."""
        combinators = {t for t in CriteriaType if t.is_combinator}

        assert combinators == {CriteriaType.AND, CriteriaType.OR}

    def test_temporal_operators(self) -> None:
        """BEFORE, AFTER and BETWEEN take timestamp-like values."""
        temporal = {t for t in CriteriaType if t.is_temporal}

        assert temporal == {CriteriaType.BEFORE, CriteriaType.AFTER, CriteriaType.BETWEEN}


# =============================================================================
# Test: Construction
# =============================================================================


class TestCriteriaConstruction:
    """Tests for building well-formed nodes."""

    def test_leaf_stores_values_as_tuple(self) -> None:
        """Leaf values are stored in the order given, as a tuple."""
        criteria = Criteria.leaf(CriteriaType.BETWEEN, "createdAt", 2000, 1000)

        assert criteria.sub_values == (2000, 1000)
        assert criteria.sub_criteria == ()

    def test_exists_accepts_none_values(self) -> None:
        """EXISTS accepts absent values."""
        criteria = Criteria(type=CriteriaType.EXISTS, subject="since", sub_values=None)

        assert criteria.sub_values == ()

    def test_exists_accepts_empty_values(self) -> None:
        """EXISTS accepts an empty value list."""
        criteria = Criteria(type=CriteriaType.EXISTS, subject="since", sub_values=[])

        assert criteria.sub_values == ()

    def test_combine_keeps_children_order(self) -> None:
        """combine() keeps left before right."""
        left = Criteria.leaf(CriteriaType.EXISTS, "since")
        right = Criteria.leaf(CriteriaType.IS_EQUAL, "active", True)

        criteria = Criteria.combine(CriteriaType.AND, left, right)

        assert criteria.sub_criteria == (left, right)
        assert criteria.subject is None

    def test_criteria_is_immutable(self) -> None:
        """Criteria nodes cannot be changed after construction."""
        criteria = Criteria.leaf(CriteriaType.IS_EQUAL, "name", "Alice")

        with pytest.raises(FrozenInstanceError):
            criteria.subject = "other"  # type: ignore[misc]

    def test_list_values_are_copied(self) -> None:
        """Mutating the caller's list does not change the node."""
        values = ["Alice"]
        criteria = Criteria(type=CriteriaType.IS_EQUAL, subject="name", sub_values=values)

        values.append("Bob")

        assert criteria.sub_values == ("Alice",)

    def test_query_wraps_root(self) -> None:
        """GremlinQuery holds the root criteria."""
        root = Criteria.leaf(CriteriaType.EXISTS, "since")

        assert GremlinQuery(root).criteria is root


# =============================================================================
# Test: Malformed Criteria
# =============================================================================


class TestMalformedCriteria:
    """Tests for eager arity validation."""

    def test_and_with_one_child_rejected(self) -> None:
        """AND needs exactly two children."""
        child = Criteria.leaf(CriteriaType.EXISTS, "since")

        with pytest.raises(GremlinScriptError) as exc_info:
            Criteria(type=CriteriaType.AND, sub_criteria=(child,))

        assert exc_info.value.kind is ErrorKind.MALFORMED_CRITERIA

    def test_or_with_three_children_rejected(self) -> None:
        """OR needs exactly two children."""
        child = Criteria.leaf(CriteriaType.EXISTS, "since")

        with pytest.raises(GremlinScriptError) as exc_info:
            Criteria(type=CriteriaType.OR, sub_criteria=(child, child, child))

        assert exc_info.value.kind is ErrorKind.MALFORMED_CRITERIA

    def test_combinator_with_values_rejected(self) -> None:
        """AND takes no values."""
        child = Criteria.leaf(CriteriaType.EXISTS, "since")

        with pytest.raises(GremlinScriptError) as exc_info:
            Criteria(type=CriteriaType.AND, sub_values=(1,), sub_criteria=(child, child))

        assert exc_info.value.kind is ErrorKind.MALFORMED_CRITERIA

    def test_combinator_with_non_criteria_child_rejected(self) -> None:
        """AND children must be Criteria nodes."""
        child = Criteria.leaf(CriteriaType.EXISTS, "since")

        with pytest.raises(GremlinScriptError) as exc_info:
            Criteria(type=CriteriaType.AND, sub_criteria=(child, "since"))  # type: ignore[arg-type]

        assert exc_info.value.kind is ErrorKind.MALFORMED_CRITERIA

    def test_between_with_one_value_rejected(self) -> None:
        """BETWEEN needs two values."""
        with pytest.raises(GremlinScriptError) as exc_info:
            Criteria.leaf(CriteriaType.BETWEEN, "createdAt", 1000)

        assert exc_info.value.kind is ErrorKind.MALFORMED_CRITERIA
        assert exc_info.value.detail["type"] == "BETWEEN"

    def test_is_equal_without_value_rejected(self) -> None:
        """IS_EQUAL needs one value."""
        with pytest.raises(GremlinScriptError) as exc_info:
            Criteria.leaf(CriteriaType.IS_EQUAL, "name")

        assert exc_info.value.kind is ErrorKind.MALFORMED_CRITERIA

    def test_exists_with_value_rejected(self) -> None:
        """EXISTS takes no value."""
        with pytest.raises(GremlinScriptError) as exc_info:
            Criteria.leaf(CriteriaType.EXISTS, "since", True)

        assert exc_info.value.kind is ErrorKind.MALFORMED_CRITERIA

    def test_leaf_without_subject_rejected(self) -> None:
        """Leaves need a subject."""
        with pytest.raises(GremlinScriptError) as exc_info:
            Criteria(type=CriteriaType.IS_EQUAL, sub_values=("Alice",))

        assert exc_info.value.kind is ErrorKind.MALFORMED_CRITERIA

    def test_leaf_with_children_rejected(self) -> None:
        """Leaves take no sub-criteria."""
        child = Criteria.leaf(CriteriaType.EXISTS, "since")

        with pytest.raises(GremlinScriptError) as exc_info:
            Criteria(
                type=CriteriaType.IS_EQUAL,
                subject="name",
                sub_values=("Alice",),
                sub_criteria=(child, child),
            )

        assert exc_info.value.kind is ErrorKind.MALFORMED_CRITERIA

    def test_unknown_type_rejected(self) -> None:
        """A tag outside CriteriaType is an unsupported operator."""
        with pytest.raises(GremlinScriptError) as exc_info:
            Criteria(type="LIKE", subject="name", sub_values=("A%",))  # type: ignore[arg-type]

        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_OPERATOR
