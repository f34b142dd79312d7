"""Process-wide object registry and access helpers."""

from __future__ import annotations

from object_factory.components.base import Component
from object_factory.components.factory import ComponentFactory, build_default_factory
from object_factory.core.registry import Registry

OBJECT_REGISTRY: Registry[Component] = Registry(namespace="object")


def get_default_factory(*, source_id: str = "comp2") -> ComponentFactory:
    """Default factory bound to ``OBJECT_REGISTRY``."""

    return build_default_factory(OBJECT_REGISTRY, source_id=source_id)
