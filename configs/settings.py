"""Configuration loading for the TTC fusion core."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from configs.validator import validate_config
from exceptions import InvalidConfigError
from log_config.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AssociationConfig:
    shrink_factor: float = 0.10  # fraction of box size trimmed for range points
    outlier_mean_multiplier: float = 0.8


@dataclass(frozen=True)
class TtcConfig:
    frame_rate_hz: float = 10.0
    lane_half_width_m: float = 2.0
    min_pixel_distance: float = 100.0


@dataclass(frozen=True)
class AppConfig:
    association: AssociationConfig = field(default_factory=AssociationConfig)
    ttc: TtcConfig = field(default_factory=TtcConfig)


def default_config() -> AppConfig:
    return AppConfig()


def load_config(path: Path) -> AppConfig:
    """Load and validate configuration from YAML file.

    Args:
        path: Path to configuration file

    Returns:
        Validated AppConfig instance

    Raises:
        ConfigError: If configuration is invalid or cannot be loaded
    """
    try:
        logger.info(f"Loading configuration from {path}")
        if not path.exists():
            raise InvalidConfigError(f"Configuration file not found: {path}")

        data = yaml.safe_load(path.read_text())
        if not isinstance(data, dict):
            raise InvalidConfigError(f"Configuration root must be a mapping: {path}")

        # Validate against JSON Schema
        validate_config(data)

    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration: {e}")
        raise InvalidConfigError(f"Failed to parse configuration file: {e}")

    try:
        association = AssociationConfig(**data["association"])
        ttc = TtcConfig(**data["ttc"])
        config = AppConfig(association=association, ttc=ttc)
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"Failed to construct configuration objects: {e}")
        raise InvalidConfigError(f"Failed to construct configuration: {e}")

    logger.info(
        f"Configuration loaded successfully: {config.ttc.frame_rate_hz}Hz, "
        f"shrink {config.association.shrink_factor}"
    )
    return config


__all__ = ["AppConfig", "AssociationConfig", "TtcConfig", "default_config", "load_config"]
