__all__ = ["logger"]

import logging.config
from pathlib import Path

import yaml

LOGGING_CONFIG_PATH = Path(__file__).parents[1] / "logging.yaml"

with open(LOGGING_CONFIG_PATH, encoding="utf-8") as f:
    config = yaml.safe_load(f)
    logging.config.dictConfig(config)

logger = logging.getLogger("src")
