"""
Geoshapes - GeoJSON geometry types with a positional coordinate codec.

This package provides immutable geometry values (points, lines, polygons and
their multi-variants) that encode to and decode from GeoJSON, together with
a haversine great-circle distance between positions.
"""
import importlib.metadata

__version__ = importlib.metadata.version("geoshapes")

# Import main classes for public API
from .errors import (
    GeometryDecodeError,
    MalformedPosition,
    MalformedStructure,
    UnknownGeometryType,
)
from .position import Position, decode_position, encode_position
from .geometry import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    decode_geometry,
    dumps,
    from_shapely,
    loads,
)
from .measurement import Distance
from .distance import EARTH_RADIUS_METERS, haversine_distance
from .config import GeoshapesConfig, setup_logging

__all__ = [
    "GeometryDecodeError",
    "MalformedPosition",
    "MalformedStructure",
    "UnknownGeometryType",
    "Position",
    "decode_position",
    "encode_position",
    "Geometry",
    "GeometryCollection",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "decode_geometry",
    "dumps",
    "from_shapely",
    "loads",
    "Distance",
    "EARTH_RADIUS_METERS",
    "haversine_distance",
    "GeoshapesConfig",
    "setup_logging",
]
