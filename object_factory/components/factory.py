"""Kind-keyed component factory."""

from __future__ import annotations

import logging
from collections.abc import Callable

from object_factory.components.base import Component
from object_factory.components.variants import CompOne, CompThree, CompTwo
from object_factory.core.exceptions import RegistryError
from object_factory.core.registry import Registry

logger = logging.getLogger(__name__)

ComponentBuilder = Callable[[Registry[Component]], Component]

COMP_TWO_DATA = "it's number two!"
COMP_THREE_DATA = "if you see this, bad news..."


class ComponentFactory:
    """Builds new components by kind name, wiring them to one object registry."""

    def __init__(self, registry: Registry[Component]) -> None:
        self.registry = registry
        self._builders: dict[str, ComponentBuilder] = {}

    def register(self, kind: str, builder: ComponentBuilder) -> None:
        if kind in self._builders:
            raise RegistryError(f"component factory already has kind '{kind}'.")
        self._builders[kind] = builder

    def new(self, kind: str) -> Component | None:
        """Return a fresh component of ``kind``, or None for an unknown kind."""

        builder = self._builders.get(kind)
        if builder is None:
            logger.debug("Unknown component kind '%s'. Available: %s.", kind, ", ".join(self.kinds()))
            return None
        return builder(self.registry)

    def kinds(self) -> tuple[str, ...]:
        return tuple(sorted(self._builders.keys()))


def build_default_factory(
    registry: Registry[Component],
    *,
    source_id: str = "comp2",
) -> ComponentFactory:
    factory = ComponentFactory(registry)
    factory.register(CompOne.kind, lambda reg: CompOne(reg, source_id=source_id))
    factory.register(CompTwo.kind, lambda _reg: CompTwo(COMP_TWO_DATA))
    factory.register(CompThree.kind, lambda _reg: CompThree(COMP_THREE_DATA))
    return factory
