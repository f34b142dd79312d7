"""The three component variants the default factory can build."""

from __future__ import annotations

from object_factory.components.base import Component, Updatable
from object_factory.core.registry import Registry


class CompOne(Component, Updatable):
    """Reads ``cool_data`` from another registry entry instead of storing any."""

    kind = "CompOne"

    def __init__(self, registry: Registry[Component], source_id: str = "comp2") -> None:
        self._registry = registry
        self.source_id = source_id

    def print_data(self) -> None:
        source = self._registry.require(self.source_id, CompTwo)
        print(source.cool_data)

    def update(self, status: bool) -> None:
        if status:
            print("comp1 checking in")

    def __repr__(self) -> str:
        return f"CompOne(source_id={self.source_id!r})"


class CompTwo(Component, Updatable):
    kind = "CompTwo"

    def __init__(self, cool_data: str) -> None:
        self.cool_data = cool_data

    def print_data(self) -> None:
        print(self.cool_data)

    def update(self, status: bool) -> None:
        if status:
            print("comp2 checking in")

    def __repr__(self) -> str:
        return f"CompTwo(cool_data={self.cool_data!r})"


class CompThree(Component):
    """Same shape as ``CompTwo`` but deliberately not ``Updatable``."""

    kind = "CompThree"

    def __init__(self, cool_data: str) -> None:
        self.cool_data = cool_data

    def print_data(self) -> None:
        print(self.cool_data)

    def update(self, status: bool) -> None:
        # Only reachable by a direct call; dispatch skips this class.
        if status:
            print("comp3 checking in")

    def __repr__(self) -> str:
        return f"CompThree(cool_data={self.cool_data!r})"
