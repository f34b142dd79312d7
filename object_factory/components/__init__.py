"""Component variants, factory and the process-wide object registry."""

from object_factory.components.base import Component, Updatable
from object_factory.components.dispatch import dispatch_update
from object_factory.components.factory import ComponentFactory, build_default_factory
from object_factory.components.registry import OBJECT_REGISTRY, get_default_factory
from object_factory.components.variants import CompOne, CompThree, CompTwo

__all__ = [
    "OBJECT_REGISTRY",
    "CompOne",
    "CompThree",
    "CompTwo",
    "Component",
    "ComponentFactory",
    "Updatable",
    "build_default_factory",
    "dispatch_update",
    "get_default_factory",
]
