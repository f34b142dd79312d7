"""Demo orchestration entry points."""

from object_factory.runners.demo import run_demo, run_scenario
from object_factory.runners.types import DemoResult, ScenarioConfig, load_scenario

__all__ = ["DemoResult", "ScenarioConfig", "load_scenario", "run_demo", "run_scenario"]
