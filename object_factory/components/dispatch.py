"""Capability-gated dispatch over registry entries."""

from __future__ import annotations

import logging

from object_factory.components.base import Component, Updatable
from object_factory.core.registry import Registry

logger = logging.getLogger(__name__)


def dispatch_update(registry: Registry[Component], status: bool) -> list[str]:
    """Call ``update(status)`` on every updatable entry; return the identifiers reached."""

    updated: list[str] = []
    for identifier in registry.list_identifiers():
        entry = registry.get(identifier)
        if not isinstance(entry, Updatable):
            logger.debug("Skipping '%s': %s is not updatable.", identifier, type(entry).__name__)
            continue
        entry.update(status)
        updated.append(identifier)
    return updated
