from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from object_factory.components.base import Component
from object_factory.components.factory import ComponentFactory, build_default_factory
from object_factory.components.registry import OBJECT_REGISTRY
from object_factory.core.registry import Registry


@pytest.fixture(autouse=True)
def _clean_object_registry() -> Iterator[None]:
    OBJECT_REGISTRY.clear()
    yield
    OBJECT_REGISTRY.clear()


@pytest.fixture
def registry() -> Registry[Component]:
    return Registry(namespace="test")


@pytest.fixture
def factory(registry: Registry[Component]) -> ComponentFactory:
    return build_default_factory(registry)


@pytest.fixture
def populate(
    registry: Registry[Component], factory: ComponentFactory
) -> Callable[..., Registry[Component]]:
    def _populate(entries: dict[str, str] | None = None) -> Registry[Component]:
        entries = entries or {"comp1": "CompOne", "comp2": "CompTwo", "comp3": "CompThree"}
        for identifier, kind in entries.items():
            registry.add(identifier, factory.new(kind))
        return registry

    return _populate
