"""Shared test factories."""

from .config_factory import DEFAULT_COMPONENTS, build_demo_cfg

__all__ = ["DEFAULT_COMPONENTS", "build_demo_cfg"]
