"""Fixed registry/factory demo scenario."""

from __future__ import annotations

import logging

from omegaconf import DictConfig

from object_factory.components.base import Component
from object_factory.components.dispatch import dispatch_update
from object_factory.components.factory import build_default_factory
from object_factory.components.registry import OBJECT_REGISTRY, get_default_factory
from object_factory.components.variants import CompOne, CompTwo
from object_factory.core.registry import Registry
from object_factory.runners.types import DemoResult, ScenarioConfig, load_scenario

logger = logging.getLogger(__name__)


def run_scenario(
    scenario: ScenarioConfig,
    registry: Registry[Component] | None = None,
) -> DemoResult:
    """Populate, print, dispatch update, then show shared-instance mutation."""

    if registry is None:
        registry = OBJECT_REGISTRY
        factory = get_default_factory(source_id=scenario.source_id)
    else:
        factory = build_default_factory(registry, source_id=scenario.source_id)

    for spec in scenario.components:
        registry.add(spec.id, factory.new(spec.kind))
    identifiers = registry.list_identifiers()
    logger.debug("Registered %d entries: %s", len(identifiers), ", ".join(identifiers))

    registry.require(scenario.reader_id, CompOne).print_data()

    updated = dispatch_update(registry, scenario.update_status)

    # Two lookups, one instance.
    first = registry.require(scenario.mutation.target_id, CompTwo)
    second = registry.require(scenario.mutation.target_id, CompTwo)
    first.cool_data = scenario.mutation.value
    second.print_data()

    return DemoResult(identifiers=identifiers, updated=updated, mutated_value=second.cool_data)


def run_demo(cfg: DictConfig, registry: Registry[Component] | None = None) -> DemoResult:
    return run_scenario(load_scenario(cfg), registry=registry)
