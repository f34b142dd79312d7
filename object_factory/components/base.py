"""Component and capability interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """Anything the factory can build and the object registry can hold."""

    kind: str = "component"

    @abstractmethod
    def print_data(self) -> None:
        """Write this component's data line to stdout."""


class Updatable(ABC):
    """Opt-in capability for components that react to update dispatch.

    Membership is nominal: a class must subclass (or be registered with) this
    ABC. Having a method called ``update`` does not make a class updatable.
    """

    @abstractmethod
    def update(self, status: bool) -> None:
        """Report in when ``status`` is true."""
