"""
GeoJSON geometry types built from positions.

Seven variants share the ``Geometry`` base: Point, MultiPoint, LineString,
MultiLineString, Polygon, MultiPolygon and GeometryCollection. Each one is
an immutable value that serializes to a mapping tagged by its ``type``
member. Decoding reads the tag first and dispatches through a fixed table
of the seven variants.

Only the array shape is checked. Ring closure, winding order and minimum
lengths are left to the caller.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple, Type
import json
import logging

from shapely.geometry import mapping, shape
from shapely.geometry.base import BaseGeometry

from .config import GeoshapesConfig
from .errors import MalformedStructure, UnknownGeometryType
from .position import Position, decode_position, encode_position, is_sequence

logger = logging.getLogger(__name__)


def _decode_nested(value: Any, depth: int, path: str) -> Any:
    """
    Decode ``depth`` levels of arrays with positions at the leaves.

    Args:
        value: Nested sequence (or Position instances at the leaves)
        depth: Number of array levels above the positions
        path: Location of ``value``, used in errors

    Returns:
        Position for depth 0, otherwise nested tuples of Position
    """
    if depth == 0:
        if isinstance(value, Position):
            return value
        return decode_position(value, path)

    if not is_sequence(value):
        logger.debug(f"Expected an array at {path}, got {type(value).__name__}")
        raise MalformedStructure(
            f"invalid type {type(value).__name__}, expected an array", path
        )
    return tuple(
        _decode_nested(item, depth - 1, f"{path}[{index}]")
        for index, item in enumerate(value)
    )


def _encode_nested(value: Any, depth: int) -> Any:
    if depth == 0:
        return encode_position(value)
    return [_encode_nested(item, depth - 1) for item in value]


def _require_member(obj: Mapping, member: str, path: str) -> Any:
    if member not in obj:
        logger.debug(f"Geometry at {path} has no {member!r} member")
        raise MalformedStructure(f"missing field {member!r}", path)
    return obj[member]


class Geometry(ABC):
    """Base class for the seven geometry variants."""

    type_name: ClassVar[str]

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Return the GeoJSON mapping for this geometry."""
        pass

    @classmethod
    @abstractmethod
    def _decode_members(cls, obj: Mapping, path: str) -> "Geometry":
        """Decode the members of a mapping whose tag names this class."""
        pass

    @property
    def __geo_interface__(self) -> Dict[str, Any]:
        return self.to_dict()

    @classmethod
    def from_dict(cls, obj: Any, path: str = "$") -> "Geometry":
        """
        Decode a geometry mapping, requiring it to be an instance of this class.

        ``Geometry.from_dict`` accepts any variant.

        Raises:
            MalformedStructure: If the tag names a different variant
        """
        geometry = decode_geometry(obj, path)
        if not isinstance(geometry, cls):
            raise MalformedStructure(
                f"invalid geometry type {geometry.type_name!r}, expected {cls.type_name!r}",
                f"{path}.type",
            )
        return geometry

    def to_shapely(self) -> BaseGeometry:
        """Convert to the equivalent Shapely geometry."""
        return shape(self)


@dataclass(frozen=True)
class _CoordinateGeometry(Geometry):
    """Geometry holding a ``coordinates`` member at a fixed nesting depth."""

    depth: ClassVar[int]

    coordinates: Any

    def __post_init__(self):
        object.__setattr__(
            self,
            "coordinates",
            _decode_nested(self.coordinates, self.depth, "$.coordinates"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type_name,
            "coordinates": _encode_nested(self.coordinates, self.depth),
        }

    @classmethod
    def _decode_members(cls, obj: Mapping, path: str) -> "Geometry":
        coordinates = _require_member(obj, "coordinates", path)
        return cls(_decode_nested(coordinates, cls.depth, f"{path}.coordinates"))


@dataclass(frozen=True)
class Point(_CoordinateGeometry):
    type_name: ClassVar[str] = "Point"
    depth: ClassVar[int] = 0

    coordinates: Position


@dataclass(frozen=True)
class MultiPoint(_CoordinateGeometry):
    type_name: ClassVar[str] = "MultiPoint"
    depth: ClassVar[int] = 1

    coordinates: Tuple[Position, ...]


@dataclass(frozen=True)
class LineString(_CoordinateGeometry):
    type_name: ClassVar[str] = "LineString"
    depth: ClassVar[int] = 1

    coordinates: Tuple[Position, ...]


@dataclass(frozen=True)
class MultiLineString(_CoordinateGeometry):
    type_name: ClassVar[str] = "MultiLineString"
    depth: ClassVar[int] = 2

    coordinates: Tuple[Tuple[Position, ...], ...]


@dataclass(frozen=True)
class Polygon(_CoordinateGeometry):
    """Polygon given as a sequence of linear rings, exterior ring first."""

    type_name: ClassVar[str] = "Polygon"
    depth: ClassVar[int] = 2

    coordinates: Tuple[Tuple[Position, ...], ...]


@dataclass(frozen=True)
class MultiPolygon(_CoordinateGeometry):
    type_name: ClassVar[str] = "MultiPolygon"
    depth: ClassVar[int] = 3

    coordinates: Tuple[Tuple[Tuple[Position, ...], ...], ...]


@dataclass(frozen=True)
class GeometryCollection(Geometry):
    """An ordered collection of geometries of any type, collections included."""

    type_name: ClassVar[str] = "GeometryCollection"

    geometries: Tuple[Geometry, ...]

    def __post_init__(self):
        geometries = tuple(self.geometries)
        for index, geometry in enumerate(geometries):
            if not isinstance(geometry, Geometry):
                raise TypeError(
                    f"geometries[{index}] is {type(geometry).__name__}, not a Geometry"
                )
        object.__setattr__(self, "geometries", geometries)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type_name,
            "geometries": [geometry.to_dict() for geometry in self.geometries],
        }

    @classmethod
    def _decode_members(cls, obj: Mapping, path: str) -> "Geometry":
        members_path = f"{path}.geometries"
        members = _require_member(obj, "geometries", path)
        if not is_sequence(members):
            raise MalformedStructure(
                f"invalid type {type(members).__name__}, expected an array",
                members_path,
            )
        return cls(
            tuple(
                decode_geometry(member, f"{members_path}[{index}]")
                for index, member in enumerate(members)
            )
        )


GEOMETRY_TYPES: Dict[str, Type[Geometry]] = {
    Point.type_name: Point,
    MultiPoint.type_name: MultiPoint,
    LineString.type_name: LineString,
    MultiLineString.type_name: MultiLineString,
    Polygon.type_name: Polygon,
    MultiPolygon.type_name: MultiPolygon,
    GeometryCollection.type_name: GeometryCollection,
}


def decode_geometry(obj: Any, path: str = "$") -> Geometry:
    """
    Decode a GeoJSON geometry mapping.

    The ``type`` member is read first and selects the variant decoder.
    Members other than the ones the variant needs are ignored.

    Args:
        obj: Mapping taken from an external representation
        path: Location of ``obj`` in the enclosing document, used in errors

    Returns:
        The decoded Geometry

    Raises:
        MalformedStructure: If obj is not a mapping, lacks a string ``type``,
            or its members have the wrong shape
        UnknownGeometryType: If ``type`` is not one of the seven variants
        MalformedPosition: If a position array has the wrong length
    """
    if not isinstance(obj, Mapping):
        logger.debug(f"Expected a geometry object at {path}, got {type(obj).__name__}")
        raise MalformedStructure(
            f"invalid type {type(obj).__name__}, expected a geometry object", path
        )

    tag = _require_member(obj, "type", path)
    if not isinstance(tag, str):
        raise MalformedStructure(
            f"invalid type {type(tag).__name__}, expected a string", f"{path}.type"
        )

    geometry_cls = GEOMETRY_TYPES.get(tag)
    if geometry_cls is None:
        logger.debug(f"Unknown geometry type {tag!r} at {path}")
        raise UnknownGeometryType(tag, f"{path}.type")

    return geometry_cls._decode_members(obj, path)


def loads(text: str) -> Geometry:
    """
    Parse a geometry from JSON text.

    Raises:
        MalformedStructure: If the text is not valid JSON
        GeometryDecodeError: If the JSON is not a valid geometry
    """
    try:
        obj = json.loads(text)
    except ValueError as e:
        # JSONDecodeError, or an integer literal past the digit limit
        logger.debug(f"Invalid JSON: {e}")
        raise MalformedStructure(f"invalid JSON: {e}") from e

    geometry = decode_geometry(obj)
    logger.debug(f"Decoded {geometry.type_name} from {len(text)} characters of JSON")
    return geometry


def dumps(geometry: Geometry, config: Optional[GeoshapesConfig] = None) -> str:
    """
    Serialize a geometry to JSON text.

    Output is compact unless ``config.json_indent`` is set.

    Raises:
        ValueError: If a coordinate is NaN or infinite, which JSON cannot represent
    """
    indent = config.json_indent if config is not None else None
    separators = (",", ":") if indent is None else (",", ": ")
    text = json.dumps(
        geometry.to_dict(), indent=indent, separators=separators, allow_nan=False
    )
    logger.debug(f"Encoded {geometry.type_name} to {len(text)} characters of JSON")
    return text


def from_shapely(geom: BaseGeometry) -> Geometry:
    """Convert a Shapely geometry to the equivalent Geometry."""
    return decode_geometry(mapping(geom))

