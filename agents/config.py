"""
Search configuration for the alpha-beta agent.

Configuration can be built in code, from a dictionary, or from a YAML/JSON
config file.
"""

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class SearchConfig:
    """
    Tuning parameters for one alpha-beta agent.

    Attributes:
        depth_bound: Plies searched below the root (must be >= 1)
        time_budget_ms: Wall-clock budget per decision, kept under the
            2 second per-move limit
        seed: Random seed for the arena engine's fallback moves and the
            random baseline (None = unseeded)
    """

    depth_bound: int = 3
    time_budget_ms: int = 1800
    seed: Optional[int] = None

    def __post_init__(self):
        if self.depth_bound < 1:
            raise ValueError(f"depth_bound must be >= 1, got {self.depth_bound}")
        if self.time_budget_ms < 0:
            raise ValueError(f"time_budget_ms must be >= 0, got {self.time_budget_ms}")

    @property
    def time_budget_s(self) -> float:
        return self.time_budget_ms / 1000.0

    @classmethod
    def from_dict(cls, config_dict: dict) -> "SearchConfig":
        """Create config from dictionary, ignoring unknown keys."""
        valid_keys = {f.name for f in fields(cls)}
        filtered_dict = {k: v for k, v in config_dict.items() if k in valid_keys}
        return cls(**filtered_dict)

    @classmethod
    def from_file(cls, config_path: Path) -> "SearchConfig":
        """Load config from YAML or JSON file."""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                config_dict = yaml.safe_load(f) or {}
            elif config_path.suffix.lower() == ".json":
                config_dict = json.load(f)
            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

        return cls.from_dict(config_dict)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def save_to_file(self, config_path: Path):
        """Save config to YAML or JSON file."""
        config_path = Path(config_path)
        config_dict = self.to_dict()

        with open(config_path, "w") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
            elif config_path.suffix.lower() == ".json":
                json.dump(config_dict, f, indent=2, sort_keys=False)
            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

    def log_config(self, logger: logging.Logger):
        """Log the effective configuration."""
        logger.info("=" * 60)
        logger.info("Search Configuration")
        logger.info("=" * 60)
        logger.info(f"Depth Bound: {self.depth_bound}")
        logger.info(f"Time Budget: {self.time_budget_ms} ms")
        logger.info(f"Seed: {self.seed}")
        logger.info("=" * 60)
