"""CLI for the registry/factory demo scenario."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import hydra
from omegaconf import DictConfig

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from object_factory.runners.demo import run_demo  # noqa: E402

logger = logging.getLogger(__name__)


@hydra.main(version_base=None, config_path="../configs", config_name="config")
def main(cfg: DictConfig) -> None:
    result = run_demo(cfg)
    # stdout carries only the scenario lines.
    logger.debug("Demo result: %s", json.dumps(result.to_dict(), ensure_ascii=False))


if __name__ == "__main__":
    main()
