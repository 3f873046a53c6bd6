"""
Geographic position and its positional array codec.

A position serializes to a bare array: ``[longitude, latitude]`` when it has
no altitude and ``[longitude, latitude, altitude]`` when it does. Decoding
inspects the array length explicitly so the presence of the third element
maps onto the optional altitude, and anything other than two or three
elements is rejected rather than truncated or padded.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple, Union
import logging
import numbers

from .errors import MalformedPosition, MalformedStructure

logger = logging.getLogger(__name__)

# Element names in wire order
_COMPONENTS = ("longitude", "latitude", "altitude")


@dataclass(frozen=True)
class Position:
    """Represents a geographic position with longitude, latitude and optional altitude."""

    longitude: float
    latitude: float
    altitude: Optional[float] = None

    def has_altitude(self) -> bool:
        """Check if position has altitude data."""
        return self.altitude is not None

    @classmethod
    def from_tuple(
        cls, coords: Union[Tuple[float, float], Tuple[float, float, float]]
    ) -> "Position":
        """
        Build a position from a 2-tuple or 3-tuple of numbers.

        Args:
            coords: (longitude, latitude) or (longitude, latitude, altitude)

        Returns:
            Position with altitude set only for 3-tuples

        Raises:
            MalformedPosition: If the tuple does not have two or three elements
        """
        return decode_position(coords)

    @classmethod
    def from_list(cls, value: Any, path: str = "$") -> "Position":
        """Decode a position from its array form. See ``decode_position``."""
        return decode_position(value, path)

    def to_list(self) -> List[float]:
        """Encode this position to its array form."""
        return encode_position(self)

    def to_tuple(self) -> Tuple[float, ...]:
        return tuple(encode_position(self))


def encode_position(position: Position) -> List[float]:
    """
    Encode a position as ``[lon, lat]`` or ``[lon, lat, alt]``.

    Args:
        position: Position to encode

    Returns:
        List of two or three floats
    """
    if position.altitude is None:
        return [position.longitude, position.latitude]
    return [position.longitude, position.latitude, position.altitude]


def is_sequence(value: Any) -> bool:
    """True for ordered sequences usable as arrays (strings and bytes excluded)."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def is_number(value: Any) -> bool:
    """True for real numbers, excluding booleans."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def decode_position(value: Any, path: str = "$") -> Position:
    """
    Decode a position from an ordered sequence of two or three numbers.

    Elements are consumed strictly in order: index 0 is the longitude,
    index 1 the latitude and index 2, if present, the altitude.

    Args:
        value: Sequence taken from an external representation
        path: Location of ``value`` in the enclosing document, used in errors

    Returns:
        Decoded Position

    Raises:
        MalformedStructure: If value is not a sequence or holds a non-number
        MalformedPosition: If the sequence length is not two or three
    """
    if not is_sequence(value):
        logger.debug(f"Expected a position array at {path}, got {type(value).__name__}")
        raise MalformedStructure(
            f"invalid type {type(value).__name__}, expected an array of two or three elements",
            path,
        )

    length = len(value)
    if length < 2 or length > 3:
        logger.debug(f"Rejecting position of length {length} at {path}")
        raise MalformedPosition(length, path)

    components = []
    for index, element in enumerate(value):
        if not is_number(element):
            logger.debug(
                f"Non-numeric {_COMPONENTS[index]} at {path}[{index}]: {element!r}"
            )
            raise MalformedStructure(
                f"invalid type {type(element).__name__}, expected a number "
                f"for {_COMPONENTS[index]}",
                f"{path}[{index}]",
            )
        try:
            components.append(float(element))
        except OverflowError as e:
            logger.debug(f"Out of range {_COMPONENTS[index]} at {path}[{index}]")
            raise MalformedStructure(
                f"number too large for {_COMPONENTS[index]}", f"{path}[{index}]"
            ) from e

    if length == 2:
        return Position(longitude=components[0], latitude=components[1])
    return Position(
        longitude=components[0], latitude=components[1], altitude=components[2]
    )
