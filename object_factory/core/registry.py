"""Simple string-keyed object registry implementation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from object_factory.core.exceptions import ComponentTypeError

T = TypeVar("T")
K = TypeVar("K")

logger = logging.getLogger(__name__)


@dataclass
class Registry(Generic[T]):
    """Stores named object instances; re-adding a name replaces the old entry."""

    namespace: str
    _items: dict[str, T | None] = field(default_factory=dict)

    def add(self, name: str, value: T | None) -> None:
        if value is None:
            logger.warning("%s registry: storing empty entry under '%s'.", self.namespace, name)
        # Drop first so a replaced entry moves to the end of the enumeration.
        replaced = name in self._items
        self._items.pop(name, None)
        self._items[name] = value
        logger.debug(
            "%s registry: %s '%s' -> %r",
            self.namespace,
            "replaced" if replaced else "added",
            name,
            value,
        )

    def get(self, name: str) -> T | None:
        return self._items.get(name)

    def require(self, name: str, kind: type[K]) -> K:
        """Return the entry under ``name`` checked against ``kind``."""

        value = self._items.get(name)
        if value is None:
            available = ", ".join(self._items) or "<empty>"
            raise ComponentTypeError(
                f"{self.namespace} registry has no entry '{name}' to read as "
                f"{kind.__name__}. Available: {available}."
            )
        if not isinstance(value, kind):
            raise ComponentTypeError(
                f"{self.namespace} entry '{name}' is {type(value).__name__}, "
                f"expected {kind.__name__}."
            )
        return value

    def clear(self) -> None:
        self._items = {}
        logger.debug("%s registry cleared.", self.namespace)

    def list_identifiers(self) -> tuple[str, ...]:
        return tuple(self._items.keys())

    def items(self) -> tuple[tuple[str, T | None], ...]:
        return tuple(self._items.items())

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __len__(self) -> int:
        return len(self._items)
