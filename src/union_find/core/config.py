"""Configuration management for union-find forests."""

from enum import Enum
import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class UnionStrategy(str, Enum):
    """How DisjointSetForest.union chooses which root survives."""

    NONE = "none"
    SIZE = "size"
    RANK = "rank"


class ForestConfig(BaseModel):
    """Behaviour switches for DisjointSetForest."""

    path_compression: bool = Field(
        default=False, description="Re-point walked nodes at the root during find"
    )
    union_by: UnionStrategy = Field(
        default=UnionStrategy.NONE, description="Root selection strategy for union"
    )
    verbose: bool = Field(default=False, description="Enable verbose logging")

    @classmethod
    def load_from_file(cls, config_path: Path) -> "ForestConfig":
        """Load configuration from a JSON file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            data = json.load(f)

        return cls(**data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a JSON file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2)

    @classmethod
    def get_default(cls) -> "ForestConfig":
        """Get default configuration."""
        return cls()


def load_config(config_path: Path | None = None) -> ForestConfig:
    """Load configuration from file or return default.

    Args:
        config_path: Path to configuration file. If None, the default
            locations are tried in order before falling back to defaults.

    Returns:
        ForestConfig object
    """
    if config_path is None:
        default_locations = [
            Path.home() / ".config" / "union-find" / "config.json",
            Path.cwd() / "union-find.json",
        ]

        for location in default_locations:
            if location.exists():
                logger.debug("Loading configuration from %s", location)
                return ForestConfig.load_from_file(location)

        return ForestConfig.get_default()

    return ForestConfig.load_from_file(config_path)
