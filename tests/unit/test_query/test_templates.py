"""
Unit tests for the operator template registry.
"""

from __future__ import annotations

import pytest

from gremlin_script.core.exceptions import ErrorKind, GremlinScriptError
from gremlin_script.query.criteria import CriteriaType
from gremlin_script.query.templates import OPERATOR_TEMPLATES, template_for


class TestTemplateFor:
    """Tests for template_for()."""

    def test_registry_covers_every_operator(self) -> None:
        """Every CriteriaType has a template."""
        assert set(OPERATOR_TEMPLATES) == set(CriteriaType)

    @pytest.mark.parametrize(
        ("criteria_type", "expected"),
        [
            (CriteriaType.IS_EQUAL, "has({}, {})"),
            (CriteriaType.EXISTS, "has({})"),
            (CriteriaType.BEFORE, "is(lt({}))"),
            (CriteriaType.AFTER, "is(gt({}))"),
            (CriteriaType.BETWEEN, "is(between({}, {}))"),
            (CriteriaType.AND, "and({}, {})"),
            (CriteriaType.OR, "or({}, {})"),
        ],
    )
    def test_template_text(self, criteria_type: CriteriaType, expected: str) -> None:
        """Templates match the Gremlin step syntax."""
        assert template_for(criteria_type) == expected

    def test_placeholders_match_operand_count(self) -> None:
        """Leaves have one placeholder per operand plus the subject; combinators two."""
        for criteria_type in CriteriaType:
            placeholders = template_for(criteria_type).count("{}")
            if criteria_type.is_combinator:
                assert placeholders == 2
            elif criteria_type in (CriteriaType.IS_EQUAL, CriteriaType.EXISTS):
                assert placeholders == criteria_type.value_count + 1
            else:
                assert placeholders == criteria_type.value_count

    def test_unknown_operator_raises(self) -> None:
        """A tag outside the registry is an unsupported operator."""
        with pytest.raises(GremlinScriptError) as exc_info:
            template_for("LIKE")  # type: ignore[arg-type]

        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_OPERATOR

    def test_unhashable_operator_raises(self) -> None:
        """An unhashable tag is reported the same way."""
        with pytest.raises(GremlinScriptError) as exc_info:
            template_for(["AND"])  # type: ignore[arg-type]

        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_OPERATOR
