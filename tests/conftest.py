"""
Pytest configuration and fixtures for gremlin-script tests.
"""

import pytest

from gremlin_script.core.config import Settings
from gremlin_script.query.criteria import Criteria, CriteriaType
from gremlin_script.query.generator import EntityKind, EntityMetadata


@pytest.fixture
def settings() -> Settings:
    """Provide test settings with the default property tokens."""
    return Settings(
        gremlin_id_property="id",
        gremlin_label_property="label",
        enable_script_api=True,
    )


@pytest.fixture
def person_entity() -> EntityMetadata:
    """Vertex entity whose id field is declared as ``personId``."""
    return EntityMetadata(
        id_field_name="personId",
        entity_label="Person",
        entity_kind=EntityKind.VERTEX,
    )


@pytest.fixture
def knows_entity() -> EntityMetadata:
    """Edge entity with a plain ``id`` field."""
    return EntityMetadata(
        id_field_name="id",
        entity_label="Knows",
        entity_kind=EntityKind.EDGE,
    )


@pytest.fixture
def network_entity() -> EntityMetadata:
    """Graph-root entity, which has no vertex/edge scope."""
    return EntityMetadata(
        id_field_name="id",
        entity_label="Network",
        entity_kind=EntityKind.GRAPH,
    )


@pytest.fixture
def name_is_alice() -> Criteria:
    """IS_EQUAL(name, 'Alice')."""
    return Criteria.leaf(CriteriaType.IS_EQUAL, "name", "Alice")
