"""
Exceptions raised while decoding positions and geometries.
"""


class GeometryDecodeError(ValueError):
    """Base class for all decode failures.

    Attributes:
        path: Location of the offending element, e.g. ``$.coordinates[1][0]``
    """

    def __init__(self, message: str, path: str = "$"):
        super().__init__(f"{message} at {path}")
        self.path = path


class MalformedPosition(GeometryDecodeError):
    """Raised when a position array does not have two or three elements."""

    def __init__(self, found_length: int, path: str = "$"):
        self.found_length = found_length
        # Index of the first missing element, or of the first excess one
        self.index = found_length if found_length < 2 else 3
        if found_length < 2:
            message = (
                f"invalid length {found_length}, expected an array of two or "
                f"three elements (missing element at index {self.index})"
            )
        else:
            message = (
                f"invalid length {found_length}, expected an array of two or "
                f"three elements (unexpected element at index {self.index})"
            )
        super().__init__(message, path)


class UnknownGeometryType(GeometryDecodeError):
    """Raised when the ``type`` member names no known geometry."""

    def __init__(self, tag: str, path: str = "$"):
        self.tag = tag
        super().__init__(f"unknown geometry type {tag!r}", path)


class MalformedStructure(GeometryDecodeError):
    """Raised on a nesting or element type mismatch."""

    pass
