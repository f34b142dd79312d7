"""Typed containers for demo scenario inputs and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from omegaconf import DictConfig

from object_factory.core.exceptions import ConfigurationError


@dataclass(frozen=True, slots=True)
class ComponentSpec:
    """One registry entry to create: identifier plus factory kind."""

    id: str
    kind: str


@dataclass(frozen=True, slots=True)
class MutationSpec:
    target_id: str
    value: str


@dataclass(frozen=True, slots=True)
class ScenarioConfig:
    components: tuple[ComponentSpec, ...]
    reader_id: str = "comp1"
    source_id: str = "comp2"
    update_status: bool = True
    mutation: MutationSpec = MutationSpec(target_id="comp2", value="not so cool")


@dataclass(slots=True)
class DemoResult:
    """What a demo run registered, dispatched to and read back."""

    identifiers: tuple[str, ...]
    updated: list[str] = field(default_factory=list)
    mutated_value: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "identifiers": list(self.identifiers),
            "updated": list(self.updated),
            "mutated_value": self.mutated_value,
        }


def _require_str(node: Any, key: str, where: str) -> str:
    value = node.get(key) if isinstance(node, DictConfig) else None
    if value is None or str(value) == "":
        raise ConfigurationError(f"Missing '{key}' in {where}.")
    return str(value)


def _require_bool(node: DictConfig, key: str, default: bool) -> bool:
    value = node.get(key, default)
    if not isinstance(value, bool):
        raise ConfigurationError(f"'{key}' must be true or false, got {value!r}.")
    return value


def load_scenario(cfg: DictConfig) -> ScenarioConfig:
    """Validate a demo config into a ``ScenarioConfig``."""

    raw_components = cfg.get("components")
    if not raw_components:
        raise ConfigurationError("Scenario config needs at least one entry in 'components'.")

    components = tuple(
        ComponentSpec(
            id=_require_str(entry, "id", f"components[{index}]"),
            kind=_require_str(entry, "kind", f"components[{index}]"),
        )
        for index, entry in enumerate(raw_components)
    )

    defaults = ScenarioConfig(components=components)
    mutation_cfg = cfg.get("mutation")
    if mutation_cfg is None:
        mutation = defaults.mutation
    else:
        mutation = MutationSpec(
            target_id=_require_str(mutation_cfg, "target_id", "mutation"),
            value=_require_str(mutation_cfg, "value", "mutation"),
        )

    return ScenarioConfig(
        components=components,
        reader_id=str(cfg.get("reader_id", defaults.reader_id)),
        source_id=str(cfg.get("source_id", defaults.source_id)),
        update_status=_require_bool(cfg, "update_status", defaults.update_status),
        mutation=mutation,
    )
