"""
Dependency injection for API services.

Provides the service container handed to the routes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from gremlin_script.core.config import Settings
from gremlin_script.query.compiler import PredicateCompiler
from gremlin_script.query.generator import FindScriptGenerator, QueryScriptGenerator


@dataclass
class ServiceConfig:
    """Configuration for services."""

    enable_script_api: bool = True
    id_property: str = "id"
    label_property: str = "label"

    @classmethod
    def from_settings(cls, settings: Settings) -> ServiceConfig:
        """Build service config from environment settings."""
        return cls(
            enable_script_api=settings.enable_script_api,
            id_property=settings.gremlin_id_property,
            label_property=settings.gremlin_label_property,
        )


def create_find_generator(config: ServiceConfig) -> FindScriptGenerator:
    """Create a find-script generator using the configured property tokens."""
    return FindScriptGenerator(
        compiler=PredicateCompiler(id_property=config.id_property),
        label_property=config.label_property,
    )


@dataclass
class ServiceContainer:
    """Container for all service dependencies."""

    config: ServiceConfig = field(default_factory=ServiceConfig)
    find_generator: QueryScriptGenerator | None = None

    def __post_init__(self) -> None:
        if self.find_generator is None:
            self.find_generator = create_find_generator(self.config)
