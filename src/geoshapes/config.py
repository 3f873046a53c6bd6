from dataclasses import dataclass
from typing import Optional
import logging

from .distance import EARTH_RADIUS_METERS


@dataclass
class GeoshapesConfig:
    """Configuration for geoshapes serialization and distance calculations."""

    earth_radius: float = EARTH_RADIUS_METERS
    json_indent: Optional[int] = None
    log_level: str = "WARNING"


def setup_logging(config: GeoshapesConfig) -> None:
    """Setup logging configuration."""
    level = getattr(logging, config.log_level)

    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    # Create console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)
