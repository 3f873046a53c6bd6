"""
Great-circle distance between positions.
"""

import logging
import math

from .measurement import Distance
from .position import Position

logger = logging.getLogger(__name__)

# Mean Earth radius in meters
EARTH_RADIUS_METERS = 6371008.8


def haversine_distance(
    from_position: Position,
    to_position: Position,
    radius: float = EARTH_RADIUS_METERS,
) -> Distance:
    """
    Calculate the haversine distance between two positions.

    Uses the Haversine formula for great circle distance on a sphere. Altitude
    is ignored, so this is a surface distance.

    Args:
        from_position: Start position
        to_position: End position
        radius: Sphere radius in meters (default: mean Earth radius)

    Returns:
        Distance between the two positions
    """
    delta_lat = math.radians(to_position.latitude - from_position.latitude)
    delta_lon = math.radians(to_position.longitude - from_position.longitude)

    a = math.sin(delta_lat / 2) ** 2 + math.cos(
        math.radians(from_position.latitude)
    ) * math.cos(math.radians(to_position.latitude)) * math.sin(delta_lon / 2) ** 2

    # Rounding can push a just outside [0, 1], e.g. near antipodes or past the poles
    a = min(max(a, 0.0), 1.0)

    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return Distance.from_meters(radius * c)
